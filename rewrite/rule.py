# rewrite/rule.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Single rewrite rule: root-level pattern matching and substitution

"""Rewrite rules over propositional formulas.

A rule pairs a pattern with a replacement. Every ``Variable`` node inside the
pattern is a pattern variable: it matches any subformula and binds the
variable's identifier to it. The replacement is a template whose variables
are filled in from those bindings.

Matching is structural and happens at the root of the target only:

- ``Not(p)`` matches ``Not(t)`` when ``p`` matches ``t``
- ``And(p1, p2)`` matches ``And(t1, t2)`` when both sides match; the two
  binding maps are merged and a pattern variable bound on both sides keeps
  the right-hand binding
- ``Or`` works like ``And``
- anything else does not match

The last-write-wins merge means a pattern such as ``x ∧ x`` does not check
that both sides are equal. None of the built-in rules depend on that, but a
rule that repeats a pattern variable across both sides expecting equal
subformulas would be unsound.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from formula import ast_nodes as ast
from utils.logger import get_logger
from .exceptions import NoMatch, UnboundPatternVariable

Bindings = Dict[int, ast.Expr]


@dataclass(frozen=True)
class RewriteRule:
    """
    A named pattern ⊢ replacement pair.

    Attributes:
        name: Human-readable rule name used in logs.
        pattern: Formula whose Variable nodes are pattern variables.
        replacement: Template instantiated from the pattern's bindings.
    """
    name: str
    pattern: ast.Expr
    replacement: ast.Expr

    def __str__(self) -> str:
        return f"{self.pattern} ⊢ {self.replacement} ({self.name})"

    def apply(self, target: ast.Expr) -> ast.Expr:
        """Rewrite ``target`` if the pattern matches it at the root.

        Args:
            target: Formula to rewrite

        Returns:
            The instantiated replacement, or ``target`` itself when the
            pattern does not match

        Raises:
            UnboundPatternVariable: The replacement uses an unbound variable
        """
        try:
            bindings = _match(self.pattern, target)
        except NoMatch:
            return target

        result = self._substitute(self.replacement, bindings)

        logger = get_logger()
        if logger.is_debug():
            logger.rule_applied(self.name, str(target), str(result))
        return result

    def match(self, target: ast.Expr) -> Optional[Bindings]:
        """Return the bindings of a root-level match, or None."""
        try:
            return _match(self.pattern, target)
        except NoMatch:
            return None

    def _substitute(self, template: ast.Expr, bindings: Bindings) -> ast.Expr:
        if isinstance(template, ast.Variable):
            try:
                return bindings[template.ident]
            except KeyError:
                raise UnboundPatternVariable(self.name, template.ident) from None

        if isinstance(template, ast.Not):
            return ast.Not(self._substitute(template.operand, bindings))

        if isinstance(template, ast.And):
            return ast.And(
                self._substitute(template.left, bindings),
                self._substitute(template.right, bindings),
            )

        if isinstance(template, ast.Or):
            return ast.Or(
                self._substitute(template.left, bindings),
                self._substitute(template.right, bindings),
            )

        raise TypeError(f"Unsupported node in replacement: {type(template).__name__}")


def _match(pattern: ast.Expr, target: ast.Expr) -> Bindings:
    """Match ``pattern`` against ``target`` at the root.

    Raises:
        NoMatch: The shapes differ
    """
    if isinstance(pattern, ast.Variable):
        return {pattern.ident: target}

    if isinstance(pattern, ast.Not) and isinstance(target, ast.Not):
        return _match(pattern.operand, target.operand)

    if isinstance(pattern, (ast.And, ast.Or)) and type(target) is type(pattern):
        bindings = _match(pattern.left, target.left)
        # Right-hand bindings overwrite left-hand ones on a shared identifier
        bindings.update(_match(pattern.right, target.right))
        return bindings

    raise NoMatch(
        f"{type(pattern).__name__} pattern does not match {type(target).__name__}"
    )

# rewrite/ruleset.py
# This file is part of Propel - Propositional Normal Forms and DPLL
#
# Ordered rulesets and the recursive fixpoint driver

"""Ordered rulesets and fixpoint rewriting.

A ruleset applies its rules one after another at a single node, feeding each
rule's output into the next. ``apply_recursive`` runs that pass over a whole
tree, rewriting a node before descending into it: a rule such as
distributivity changes the node's shape and exposes new children that must be
visited afterwards. ``rewrite_to_fixpoint`` repeats recursive passes until a
pass leaves the formula unchanged.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from formula import ast_nodes as ast
from utils.config import get_settings
from utils.logger import get_logger
from .exceptions import FixpointNotReached
from .rule import RewriteRule


@dataclass(frozen=True)
class RewriteRuleset:
    """
    Named, ordered collection of rewrite rules.

    Attributes:
        name: Ruleset name used in logs and errors.
        rules: Rules in application order.
    """
    name: str
    rules: Tuple[RewriteRule, ...]

    def __str__(self) -> str:
        lines = [self.name] + [str(rule) for rule in self.rules]
        return "\n".join(lines)

    def apply(self, target: ast.Expr) -> ast.Expr:
        """Apply every rule once, in order, at the root of ``target``."""
        for rule in self.rules:
            target = rule.apply(target)
        return target

    def apply_recursive(self, target: ast.Expr) -> ast.Expr:
        """Apply the ruleset to ``target`` and then to all of its descendants.

        The root is rewritten first; the children of the resulting node are
        then rewritten and the node rebuilt from them. A node whose children
        come back unchanged is reused as is. The walk keeps its own stack, so
        the depth of ``target`` is not limited by the recursion limit.

        Args:
            target: Formula to rewrite

        Returns:
            Formula after one top-down pass
        """
        # Each frame: rewritten node, its original children, rebuilt children
        stack: List[Tuple[ast.Expr, Tuple[ast.Expr, ...], List[ast.Expr]]] = []
        node = self.apply(target)
        stack.append((node, _children(node), []))

        while True:
            node, children, done = stack[-1]
            if len(done) < len(children):
                child = self.apply(children[len(done)])
                stack.append((child, _children(child), []))
                continue

            stack.pop()
            if all(new is old for new, old in zip(done, children)):
                rebuilt = node
            else:
                rebuilt = type(node)(*done)

            if not stack:
                return rebuilt
            stack[-1][2].append(rebuilt)

    def rewrite_to_fixpoint(
        self, target: ast.Expr, max_iterations: Optional[int] = None
    ) -> ast.Expr:
        """Repeat recursive passes until the formula stops changing.

        Args:
            target: Formula to normalize
            max_iterations: Pass limit; defaults to the configured
                ``max_rewrite_iterations``

        Returns:
            The fixed point, structurally equal to one more pass over itself

        Raises:
            FixpointNotReached: The formula still changed after the last pass
        """
        if max_iterations is None:
            max_iterations = get_settings().max_rewrite_iterations

        logger = get_logger()
        if logger.is_debug():
            logger.debug(f"Rewriting to fixpoint with {self.name}")

        for iteration in range(1, max_iterations + 1):
            rewritten = self.apply_recursive(target)
            if ast.same_structure(rewritten, target):
                logger.fixpoint_reached(self.name, iteration)
                return target
            target = rewritten

        raise FixpointNotReached(self.name, max_iterations)


def _children(node: ast.Expr) -> Tuple[ast.Expr, ...]:
    if isinstance(node, ast.Not):
        return (node.operand,)
    if isinstance(node, (ast.And, ast.Or)):
        return (node.left, node.right)
    return ()

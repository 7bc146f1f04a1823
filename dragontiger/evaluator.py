"""Evaluation of integer-only expressions."""

from __future__ import annotations

from .errors import error
from .location import Location
from .nodes import (
    ASTVisitor,
    BinaryOperator,
    IfThenElse,
    IntegerLiteral,
    Node,
    Operator,
    Sequence,
)

_INT32_MIN = -(2**31)
_UINT32_RANGE = 2**32


def _wrap(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    return (value - _INT32_MIN) % _UINT32_RANGE + _INT32_MIN


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


class IntEvaluator(ASTVisitor):
    """Computes the 32-bit integer value of arithmetic, comparison,
    sequence and conditional expressions.

    Any other node kind is reported as not yet supported.
    """

    def visit(self, node: Node) -> int:
        return super().visit(node)

    @staticmethod
    def _unimplemented(loc: Location, node_type: str) -> int:
        error(f"evaluation of {node_type} nodes is not yet implemented", loc)
        return 0

    def visit_Node(self, node: Node) -> int:
        return self._unimplemented(node.loc, type(node).__name__)

    def visit_IntegerLiteral(self, node: IntegerLiteral) -> int:
        return _wrap(node.value)

    def visit_BinaryOperator(self, node: BinaryOperator) -> int:
        left = self.visit(node.left)
        right = self.visit(node.right)
        op = node.op
        if op is Operator.PLUS:
            return _wrap(left + right)
        if op is Operator.MINUS:
            return _wrap(left - right)
        if op is Operator.TIMES:
            return _wrap(left * right)
        if op is Operator.DIVIDE:
            if right == 0:
                error("division by zero", node.loc)
            return _wrap(_truncating_div(left, right))
        comparisons = {
            Operator.EQ: left == right,
            Operator.NEQ: left != right,
            Operator.LT: left < right,
            Operator.LE: left <= right,
            Operator.GT: left > right,
            Operator.GE: left >= right,
        }
        if op in comparisons:
            return 1 if comparisons[op] else 0
        error("unknown binary operator", node.loc)
        return 0

    def visit_Sequence(self, node: Sequence) -> int:
        if not node.exprs:
            error("evaluation of empty sequence () is not allowed", node.loc)
        result = 0
        for expr in node.exprs:
            result = self.visit(expr)
        return result

    def visit_IfThenElse(self, node: IfThenElse) -> int:
        if self.visit(node.condition) != 0:
            return self.visit(node.then_part)
        return self.visit(node.else_part)


def evaluate(node: Node) -> int:
    """Evaluate ``node`` and return its 32-bit integer value."""
    return IntEvaluator().visit(node)
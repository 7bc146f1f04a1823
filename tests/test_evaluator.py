import pytest

from dragontiger.errors import CompilerError
from dragontiger.evaluator import IntEvaluator, evaluate
from dragontiger.location import Location
from dragontiger.nodes import (
    Assign,
    BinaryOperator,
    Break,
    ForLoop,
    FunCall,
    FunDecl,
    Identifier,
    IfThenElse,
    IntegerLiteral,
    Let,
    Operator,
    Sequence,
    StringLiteral,
    VarDecl,
    WhileLoop,
)

L = Location("t.tig", 2, 4)
INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)


def lit(value):
    return IntegerLiteral(L, value)


def binop(left, op, right):
    return BinaryOperator(L, lit(left), lit(right), op)


def test_integer_literal():
    assert evaluate(lit(17)) == 17


def test_times():
    assert evaluate(binop(6, Operator.TIMES, 7)) == 42


def test_division_truncates_toward_zero():
    assert evaluate(binop(-7, Operator.DIVIDE, 2)) == -3


@pytest.mark.parametrize("a,b", [(3, 9), (-5, 12), (0, 0), (1000, -1)])
def test_plus_minus_inverse(a, b):
    diff = BinaryOperator(L, lit(a), lit(b), Operator.MINUS)
    assert evaluate(BinaryOperator(L, diff, lit(b), Operator.PLUS)) == a


@pytest.mark.parametrize("a,b", [(3, 9), (-5, 12), (7, 7)])
def test_plus_commutes(a, b):
    assert evaluate(binop(a, Operator.PLUS, b)) == evaluate(binop(b, Operator.PLUS, a))


def test_overflow_wraps():
    assert evaluate(binop(INT32_MAX, Operator.PLUS, 1)) == INT32_MIN
    assert evaluate(binop(INT32_MIN, Operator.MINUS, 1)) == INT32_MAX


@pytest.mark.parametrize(
    "op,a,b,expected",
    [
        (Operator.EQ, 4, 4, 1),
        (Operator.EQ, 4, 5, 0),
        (Operator.NEQ, 4, 5, 1),
        (Operator.NEQ, 4, 4, 0),
        (Operator.LT, 1, 2, 1),
        (Operator.LT, 2, 2, 0),
        (Operator.LE, 2, 2, 1),
        (Operator.LE, 3, 2, 0),
        (Operator.GT, 3, 2, 1),
        (Operator.GT, 2, 2, 0),
        (Operator.GE, 2, 2, 1),
        (Operator.GE, 1, 2, 0),
    ],
)
def test_comparisons(op, a, b, expected):
    assert evaluate(binop(a, op, b)) == expected


def test_division_by_zero():
    with pytest.raises(CompilerError) as info:
        evaluate(binop(1, Operator.DIVIDE, 0))
    assert info.value.message == "division by zero"
    assert info.value.loc == L


def test_sequence_returns_last_value():
    assert evaluate(Sequence(L, [lit(1), lit(2), lit(9)])) == 9


def test_empty_sequence_is_error():
    with pytest.raises(CompilerError, match="empty sequence"):
        evaluate(Sequence(L, []))


def test_if_then_else():
    assert evaluate(IfThenElse(L, lit(1), lit(10), lit(20))) == 10
    assert evaluate(IfThenElse(L, lit(0), lit(10), lit(20))) == 20
    assert evaluate(IfThenElse(L, lit(-3), lit(10), lit(20))) == 10


def test_nested_expression_through_visitor():
    cond = binop(2, Operator.LT, 3)
    node = IfThenElse(L, cond, Sequence(L, [lit(5)]), lit(6))
    assert IntEvaluator().visit(node) == 5


@pytest.mark.parametrize(
    "name,node",
    [
        ("StringLiteral", StringLiteral(L, "s")),
        ("Let", Let(L, [], Sequence(L, [lit(1)]))),
        ("Identifier", Identifier(L, "x")),
        ("VarDecl", VarDecl(L, "x", None, lit(1))),
        ("FunDecl", FunDecl(L, "f", None, [], lit(1))),
        ("FunCall", FunCall(L, [], "f")),
        ("WhileLoop", WhileLoop(L, lit(1), lit(2))),
        ("ForLoop", ForLoop(L, VarDecl(L, "i", None, lit(0)), lit(1), lit(2))),
        ("Break", Break(L)),
        ("Assign", Assign(L, Identifier(L, "x"), lit(1))),
    ],
)
def test_unimplemented_nodes(name, node):
    with pytest.raises(CompilerError) as info:
        evaluate(node)
    assert info.value.message == f"evaluation of {name} nodes is not yet implemented"
    assert info.value.loc == L


def test_unimplemented_inside_arithmetic():
    node = BinaryOperator(L, lit(1), StringLiteral(L, "s"), Operator.PLUS)
    with pytest.raises(CompilerError, match="StringLiteral"):
        evaluate(node)
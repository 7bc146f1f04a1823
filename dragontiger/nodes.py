"""Abstract syntax tree nodes and the visitor protocol."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Sequence as SequenceType, TypeVar

from .location import Location
from .symbols import Symbol

_T = TypeVar("_T")


class Type(Enum):
    UNDEF = 0
    INT = 1
    STRING = 2
    VOID = 3


class Operator(Enum):
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"
    EQ = "="
    NEQ = "<>"
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    def __str__(self) -> str:
        return self.value


class _SetOnce(Generic[_T]):
    """Attribute that starts unset and may be given a real value only once."""

    def __init__(self, unset: _T) -> None:
        self.unset = unset

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.slot = "_" + name

    def _is_unset(self, value: Any) -> bool:
        return value is self.unset or value == self.unset

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.__dict__.get(self.slot, self.unset)

    def __set__(self, obj: Any, value: _T) -> None:
        if not self._is_unset(obj.__dict__.get(self.slot, self.unset)):
            raise ValueError(f"{self.name} is already set")
        if self._is_unset(value):
            raise ValueError(f"{self.name} cannot be set to {value!r}")
        obj.__dict__[self.slot] = value


class ASTVisitor:
    """Dispatches each node to a ``visit_<ClassName>`` method.

    The most specific method along the node's class hierarchy is used,
    so ``visit_Loop`` handles both loop kinds unless they have their own.
    """

    def visit(self, node: Node) -> Any:
        for cls in type(node).__mro__:
            method = getattr(self, f"visit_{cls.__name__}", None)
            if method is not None:
                return method(node)
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        raise TypeError(f"{type(self).__name__} cannot visit {type(node).__name__}")


class Node:
    """Base of all tree nodes."""

    type = _SetOnce(Type.UNDEF)

    def __init__(self, loc: Location) -> None:
        self.loc = loc

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit(self)


class Expr(Node):
    pass


class Decl(Node):
    depth = _SetOnce(-1)

    def __init__(self, loc: Location, name: Symbol | str,
                 type_name: Symbol | str | None) -> None:
        super().__init__(loc)
        self.name = Symbol(name)
        self.type_name = None if type_name is None else Symbol(type_name)


class IntegerLiteral(Expr):
    def __init__(self, loc: Location, value: int) -> None:
        super().__init__(loc)
        self.value = value


class StringLiteral(Expr):
    def __init__(self, loc: Location, value: Symbol | str) -> None:
        super().__init__(loc)
        self.value = Symbol(value)


class BinaryOperator(Expr):
    def __init__(self, loc: Location, left: Expr, right: Expr, op: Operator) -> None:
        super().__init__(loc)
        self.left = left
        self.right = right
        self.op = op


class Sequence(Expr):
    def __init__(self, loc: Location, exprs: SequenceType[Expr]) -> None:
        super().__init__(loc)
        self.exprs = list(exprs)


class Let(Expr):
    def __init__(self, loc: Location, decls: SequenceType[Decl], sequence: Sequence) -> None:
        super().__init__(loc)
        self.decls = list(decls)
        self.sequence = sequence


class Identifier(Expr):
    decl = _SetOnce(None)
    depth = _SetOnce(-1)

    def __init__(self, loc: Location, name: Symbol | str) -> None:
        super().__init__(loc)
        self.name = Symbol(name)


class IfThenElse(Expr):
    def __init__(self, loc: Location, condition: Expr, then_part: Expr,
                 else_part: Expr) -> None:
        super().__init__(loc)
        self.condition = condition
        self.then_part = then_part
        self.else_part = else_part


class VarDecl(Decl):
    def __init__(self, loc: Location, name: Symbol | str,
                 type_name: Symbol | str | None, expr: Expr | None,
                 read_only: bool = False) -> None:
        super().__init__(loc, name, type_name)
        self.expr = expr
        self.read_only = read_only
        self.escapes = False


class FunDecl(Decl):
    external_name = _SetOnce(Symbol())
    parent = _SetOnce(None)

    def __init__(self, loc: Location, name: Symbol | str,
                 type_name: Symbol | str | None, params: SequenceType[VarDecl],
                 expr: Expr | None, is_external: bool = False) -> None:
        super().__init__(loc, name, type_name)
        self.params = list(params)
        self.expr = expr
        self.is_external = is_external
        self.escaping_decls: list[VarDecl] = []


class FunCall(Expr):
    decl = _SetOnce(None)
    depth = _SetOnce(-1)

    def __init__(self, loc: Location, args: SequenceType[Expr],
                 func_name: Symbol | str) -> None:
        super().__init__(loc)
        self.args = list(args)
        self.func_name = Symbol(func_name)


class Loop(Expr):
    pass


class WhileLoop(Loop):
    def __init__(self, loc: Location, condition: Expr, body: Expr) -> None:
        super().__init__(loc)
        self.condition = condition
        self.body = body


class ForLoop(Loop):
    def __init__(self, loc: Location, variable: VarDecl, high: Expr, body: Expr) -> None:
        super().__init__(loc)
        self.variable = variable
        self.high = high
        self.body = body


class Break(Expr):
    loop = _SetOnce(None)


class Assign(Expr):
    def __init__(self, loc: Location, lhs: Identifier, rhs: Expr) -> None:
        super().__init__(loc)
        self.lhs = lhs
        self.rhs = rhs
"""Pretty-printer that renders a syntax tree back to source form."""

from __future__ import annotations

import io
from typing import TextIO

from .errors import error
from .nodes import (
    Assign,
    ASTVisitor,
    BinaryOperator,
    Break,
    FunCall,
    FunDecl,
    ForLoop,
    Identifier,
    IfThenElse,
    IntegerLiteral,
    Let,
    Node,
    Sequence,
    StringLiteral,
    Type,
    VarDecl,
    WhileLoop,
)

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
}

_INDENT = "  "


def _type_name(t: Type) -> str:
    if t is Type.INT:
        return "int"
    if t is Type.STRING:
        return "string"
    error("internal error: attempting to print the type of void or undef")
    raise AssertionError("unreachable")


class ASTDumper(ASTVisitor):
    """Writes a readable rendering of the nodes it visits to a text stream.

    In verbose mode, annotations from later compiler passes (bindings,
    escapes, external names, enclosing loops) are shown as comments.
    """

    def __init__(self, stream: TextIO, verbose: bool = False) -> None:
        self.stream = stream
        self.verbose = verbose
        self._indent_level = 0

    def visit(self, node: Node) -> None:
        super().visit(node)

    def nl(self) -> None:
        """Start a new line at the current indentation."""
        self.stream.write("\n" + _INDENT * self._indent_level)

    def _write(self, *parts: object) -> None:
        for part in parts:
            self.stream.write(str(part))

    def _inc(self) -> None:
        self._indent_level += 1

    def _dec(self) -> None:
        self._indent_level -= 1

    def _inl(self) -> None:
        self._inc()
        self.nl()

    def _dnl(self) -> None:
        self._dec()
        self.nl()

    def _write_separated(self, nodes, separator: str) -> None:
        for position, node in enumerate(nodes):
            if position:
                self._write(separator)
            self.visit(node)

    def _write_body_lines(self, exprs) -> None:
        for position, expr in enumerate(exprs):
            if position:
                self._write(";")
            self.nl()
            self.visit(expr)

    def visit_IntegerLiteral(self, literal: IntegerLiteral) -> None:
        self._write(literal.value)

    def visit_StringLiteral(self, literal: StringLiteral) -> None:
        text = str(literal.value)
        self._write('"', "".join(_ESCAPES.get(c, c) for c in text), '"')

    def visit_BinaryOperator(self, binop: BinaryOperator) -> None:
        self._write("(")
        self.visit(binop.left)
        self._write(binop.op.value)
        self.visit(binop.right)
        self._write(")")

    def visit_Sequence(self, seq: Sequence) -> None:
        self._write("(")
        self._inc()
        self._write_body_lines(seq.exprs)
        self._dnl()
        self._write(")")

    def visit_Let(self, let: Let) -> None:
        self._write("let")
        self._inc()
        for decl in let.decls:
            self.nl()
            self.visit(decl)
        self._dnl()
        self._write("in")
        self._inc()
        self._write_body_lines(let.sequence.exprs)
        self._dnl()
        self._write("end")

    def visit_Identifier(self, ident: Identifier) -> None:
        self._write(ident.name)
        if self.verbose and ident.decl is not None:
            decl = ident.decl
            self._write("/*decl:", decl.loc)
            depth_diff = ident.depth - decl.depth
            if depth_diff:
                self._write(" depth_diff:", depth_diff)
            self._write("*/")

    def visit_IfThenElse(self, ite: IfThenElse) -> None:
        self._write("if ")
        self._inl()
        self.visit(ite.condition)
        self._dnl()
        self._write(" then ")
        self._inl()
        self.visit(ite.then_part)
        self._dnl()
        self._write(" else ")
        self._inl()
        self.visit(ite.else_part)
        self._dec()

    def visit_VarDecl(self, decl: VarDecl) -> None:
        if decl.expr is not None:
            self._write("var ")
        self._write(decl.name)
        if self.verbose and decl.escapes:
            self._write("/*e*/")
        if decl.type_name is not None:
            self._write(": ", decl.type_name)
        elif decl.type not in (Type.UNDEF, Type.VOID):
            self._write(": ", _type_name(decl.type))
        if decl.expr is not None:
            self._write(" := ")
            self.visit(decl.expr)

    def visit_FunDecl(self, decl: FunDecl) -> None:
        self._write("function ", decl.name)
        if self.verbose and decl.name != decl.external_name:
            self._write("/*", decl.external_name, "*/")
        self._write("(")
        self._write_separated(decl.params, ", ")
        self._write(")")
        if decl.type_name is not None:
            self._write(": ", decl.type_name)
        self._write(" = ")
        self._inl()
        if decl.expr is not None:
            self.visit(decl.expr)
        self._dec()

    def visit_FunCall(self, call: FunCall) -> None:
        self._write(call.func_name)
        if self.verbose and call.decl is not None:
            self._write("/*decl:", call.decl.loc, "*/")
        self._write("(")
        self._write_separated(call.args, ", ")
        self._write(")")

    def visit_WhileLoop(self, loop: WhileLoop) -> None:
        self._write("while ")
        self.visit(loop.condition)
        self._write(" do")
        self._inl()
        self.visit(loop.body)
        self._dec()

    def visit_ForLoop(self, loop: ForLoop) -> None:
        variable = loop.variable
        self._write("for ", variable.name)
        if self.verbose and variable.escapes:
            self._write("/*e*/")
        self._write(" := ")
        if variable.expr is not None:
            self.visit(variable.expr)
        self._write(" to ")
        self.visit(loop.high)
        self._write(" do")
        self._inl()
        self.visit(loop.body)
        self._dec()

    def visit_Break(self, brk: Break) -> None:
        self._write("break")
        if self.verbose and brk.loop is not None:
            self._write("/*loop:", brk.loop.loc, "*/")

    def visit_Assign(self, assign: Assign) -> None:
        self.visit(assign.lhs)
        self._write(" := ")
        self.visit(assign.rhs)


def dump(node: Node, verbose: bool = False) -> str:
    """Render ``node`` as text, ending with a newline."""
    buffer = io.StringIO()
    dumper = ASTDumper(buffer, verbose)
    dumper.visit(node)
    dumper.nl()
    return buffer.getvalue()
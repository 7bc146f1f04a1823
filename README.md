# dragontiger

Building blocks for a compiler for the Tiger language: interned symbols,
source locations, compiler diagnostics, the abstract syntax tree, a
pretty-printer that renders a tree back to Tiger source, and an evaluator for
integer expressions.

## Installation

```
pip install .
```

## Building a tree

Trees are built from the node classes in `dragontiger.nodes`: `IntegerLiteral`,
`StringLiteral`, `BinaryOperator`, `Sequence`, `Let`, `Identifier`,
`IfThenElse`, `VarDecl`, `FunDecl`, `FunCall`, `WhileLoop`, `ForLoop`, `Break`
and `Assign`. Every node takes a `Location` first. Binary operators use the
`Operator` enum (`PLUS`, `MINUS`, `TIMES`, `DIVIDE`, `EQ`, `NEQ`, `LT`, `LE`,
`GT`, `GE`).

```python
from dragontiger.location import Location
from dragontiger.nodes import BinaryOperator, IntegerLiteral, Operator

loc = Location("example.tig")
tree = BinaryOperator(
    loc,
    IntegerLiteral(loc, 6),
    IntegerLiteral(loc, 7),
    Operator.TIMES,
)
```

Annotations meant for later passes (a node's `type`, the `depth` of
declarations and uses, the `decl` an identifier or call is bound to, a
function's `external_name` and `parent`, the `loop` a `break` leaves) start
unset and may each be set only once; setting one twice, or to its unset
value, raises `ValueError`.

`dragontiger.nodes.ASTVisitor` dispatches a node to the `visit_<ClassName>`
method of a subclass, walking up the node's class hierarchy to find the most
specific one.

## Printing a tree

`dragontiger.dumper.dump` returns the Tiger source text of a tree, ending with
a newline. With `verbose=True` it annotates identifiers, calls, escaping
variables, external function names and `break` with what has been attached
to them, as comments.

```python
from dragontiger.dumper import dump

print(dump(tree))   # (6*7)
```

`ASTDumper(stream, verbose)` writes to any text stream, if you would rather
stream the output yourself.

## Evaluating a tree

`dragontiger.evaluator.evaluate` computes the value of a tree made of integer
literals, binary operators, sequences and `if`/`then`/`else`, using 32-bit
signed integer arithmetic that wraps on overflow; division truncates toward
zero. Comparisons yield `1` or `0`.

```python
from dragontiger.evaluator import evaluate

evaluate(tree)   # 42
```

Division by zero, an empty sequence, and any other kind of node raise
`dragontiger.errors.CompilerError`, which carries the `message` and the `loc`
of the offending node; its text is `"<location>: <message>"`.

## Diagnostics and locations

`dragontiger.errors.error(message, loc)` raises `CompilerError`;
`non_fatal_error(message, loc)` prints the same text to standard error and
returns. `dragontiger.location.Location` prints as `file:line.column`, with
the end of the span when it has one; `NO_LOCATION` stands for "no place in
the source".

## Symbols

`dragontiger.symbols.Symbol` interns strings: two symbols made from equal
strings are the same object, so comparing them is an identity check.
`Symbol()` is the null symbol and prints as `<null>`.

## What this package does not do

There is no lexer or parser and no command-line program: the package does not
read Tiger source files. Trees have to be built in Python from the node
classes. There is no type checker or name binder either; the annotations
described above are only filled in by code that sets them.

## Running the tests

```
pip install .[test]
pytest
```
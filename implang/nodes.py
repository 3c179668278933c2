"""Abstract syntax tree for IMP.

Expressions and statements are closed sets of frozen dataclasses. Every stage
of the pipeline dispatches over them with ``match``; adding a node means
teaching the parser, the pretty printer, the type checker and the interpreter
about it.

Each node records the source line it started on. The line is excluded from
comparison so two trees with the same shape are equal however the source
was laid out.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field
from typing import Iterator

from implang.operations import Op


@dataclass(frozen=True)
class Node:
    pass


# Expressions

@dataclass(frozen=True)
class Expr(Node):
    pass


@dataclass(frozen=True)
class IntLit(Expr):
    value: int
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class BoolLit(Expr):
    value: bool
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Var(Expr):
    name: str
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class BinOp(Expr):
    """``+``, ``*``, ``&&``, ``||``, ``==`` or ``<`` over two operands."""
    op: Op
    left: Expr
    right: Expr
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class UnaryOp(Expr):
    """Boolean negation ``!``."""
    op: Op
    operand: Expr
    line: int = field(default=0, compare=False, repr=False)


# Statements

@dataclass(frozen=True)
class Stmt(Node):
    pass


@dataclass(frozen=True)
class Seq(Stmt):
    """Two statements run in order; longer sequences nest to the right."""
    first: Stmt
    second: Stmt
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Decl(Stmt):
    name: str
    expr: Expr
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Assign(Stmt):
    name: str
    expr: Expr
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class While(Stmt):
    cond: Expr
    body: Stmt
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class If(Stmt):
    cond: Expr
    then_branch: Stmt
    else_branch: Stmt
    line: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Print(Stmt):
    expr: Expr
    line: int = field(default=0, compare=False, repr=False)


# A program is the root statement of a source unit.
Program = Stmt


def seq(*statements: Stmt) -> Stmt:
    """
    Chain statements into a right-associated sequence.

    A single statement is returned unchanged.

    Raises:
        ValueError: If no statement is given.
    """
    if not statements:
        raise ValueError("seq() needs at least one statement")
    result = statements[-1]
    for stmt in reversed(statements[:-1]):
        result = Seq(stmt, result, stmt.line)
    return result


def statements(node: Stmt) -> Iterator[Stmt]:
    """
    Yield the statements of a right-associated sequence in order.
    """
    while isinstance(node, Seq):
        yield node.first
        node = node.second
    yield node


__all__ = [
    "Node", "Expr", "IntLit", "BoolLit", "Var", "BinOp", "UnaryOp",
    "Stmt", "Seq", "Decl", "Assign", "While", "If", "Print", "Program", "seq", "statements",
]

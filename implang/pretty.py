"""Pretty printer for IMP syntax trees.

Output is valid IMP source: binary operations are fully parenthesized and
every statement of a sequence ends with ``;``, so parsing the printed text
yields a tree equal to the one printed.


File: pretty.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import textwrap

from implang.nodes import (
    Assign, BinOp, BoolLit, Decl, Expr, If, IntLit, Print, Seq, Stmt, UnaryOp, Var, While,
    statements,
)

INDENT = "    "


def format_expr(node: Expr) -> str:
    """
    Convert an expression back to source text.
    """
    match node:
        case IntLit(value):
            return str(value)
        case BoolLit(value):
            return "true" if value else "false"
        case Var(name):
            return name
        case BinOp():
            spine = []
            while isinstance(node, BinOp):
                spine.append(node)
                node = node.left
            text = format_expr(node)
            for parent in reversed(spine):
                text = f"({text}{parent.op.symbol}{format_expr(parent.right)})"
            return text
        case UnaryOp(op, operand):
            return f"{op.symbol}{format_expr(operand)}"
        case _:
            raise TypeError(f"Invalid expression node: {node!r}")


def _block(body: Stmt) -> str:
    return "{\n" + textwrap.indent(format_stmt(body) + ";", INDENT) + "\n}"


def format_stmt(node: Stmt) -> str:
    """
    Convert a statement back to source text, without the trailing ``;``.
    """
    match node:
        case Seq():
            return ";\n".join(format_stmt(stmt) for stmt in statements(node))
        case Decl(name, expr):
            return f"{name} := {format_expr(expr)}"
        case Assign(name, expr):
            return f"{name} = {format_expr(expr)}"
        case While(cond, body):
            return f"while {format_expr(cond)} {_block(body)}"
        case If(cond, then_branch, else_branch):
            return f"if {format_expr(cond)} {_block(then_branch)} else {_block(else_branch)}"
        case Print(expr):
            return f"print {format_expr(expr)}"
        case _:
            raise TypeError(f"Invalid statement node: {node!r}")


def pretty_print(program: Stmt) -> str:
    """
    Render a whole program as IMP source.
    """
    return format_stmt(program) + ";\n"

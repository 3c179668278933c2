"""Interpreter.

This is a tree-walk interpreter for IMP programs produced by the parser. It
supports declarations, assignments, sequencing, conditionals, while-loops and
print statements over integer and boolean values.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down,
recursive manner. Statements are executed via `execute()` and expressions
are evaluated to a `Value` using `eval_expr()`. Both dispatch with `match`
over the node dataclasses in `implang.nodes`.

2. Environment
The interpreter owns a `ValueEnv`, a stack of scopes whose bottom is the
global scope. Each branch of an `if` and each iteration of a `while` body
runs in a freshly pushed scope that is popped afterwards, so declarations in
a block never escape it. Conditions are evaluated in the enclosing scope.

3. Expression Evaluation
Operators require operands of the matching kind and produce `Undefined`
otherwise. `&&` and `||` short-circuit: the right operand is not evaluated
once the left one decides the result.

4. Error Handling
Nothing in a well-formed AST stops execution. Unbound variables, kind
mismatches, failed assignments and non-boolean conditions are recorded in
`errors` as `EvaluationFailure` instances and logged as warnings; the failing
operation yields `Undefined` or does nothing, and execution carries on.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import Callable

from implang.exceptions import (
    AssignmentException,
    ConditionException,
    EvaluationFailure,
    OperandKindException,
    UndefinedVariableException,
)
from implang.nodes import (
    Assign, BinOp, BoolLit, Decl, Expr, If, IntLit, Print, Seq, Stmt, UnaryOp, Var, While,
    statements,
)
from implang.operations import Op
from implang.values import UNDEFINED, Value, ValueEnv, mk_bool, mk_int

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Tree-walk interpreter for IMP.
    """
    def __init__(
        self,
        file: str = "<input>",
        env: ValueEnv | None = None,
        emit: Callable[[str], object] = print,
    ):
        """
        Initialize the interpreter.

        Parameters:
            file (str): The name of the script, used in messages.
            env (ValueEnv | None): Environment to run in; a fresh one by default.
            emit (Callable): Receives one line of text per executed ``print``.
        """
        self.file = file
        self.env = env if env is not None else ValueEnv()
        self.emit = emit
        self.errors: list[EvaluationFailure] = []

    def report(self, failure: EvaluationFailure) -> None:
        """
        Record a recoverable runtime failure.
        """
        self.errors.append(failure)
        logger.warning("%s", failure)

    def eval_expr(self, node: Expr) -> Value:
        """
        Recursively evaluate an expression node and return its value.

        Raises:
            TypeError: If ``node`` is not an expression node.
        """
        match node:
            # Literals
            case IntLit(value):
                return mk_int(value)
            case BoolLit(value):
                return mk_bool(value)

            # Variables
            case Var(name):
                # A bound Undefined was already reported where it was produced
                if not self.env.binds(name):
                    self.report(UndefinedVariableException(name, node.line, self.file))
                return self.env.lookup(name)

            # Binary operators, left operand chains unwound without recursion
            case BinOp():
                spine = []
                leaf = node
                while isinstance(leaf, BinOp):
                    spine.append(leaf)
                    leaf = leaf.left
                value = self.eval_expr(leaf)
                for parent in reversed(spine):
                    value = self._apply(parent, value)
                return value

            # Unary operator
            case UnaryOp(Op.NOT, operand):
                value = self.eval_expr(operand)
                if value.is_bool():
                    return mk_bool(not value.data)
                return self._mismatch(node, value)

        raise TypeError(f"Invalid expression node: {node!r}")

    def _apply(self, node: BinOp, lhs: Value) -> Value:
        """
        Combine an evaluated left operand with the right operand of ``node``.

        ``&&`` and ``||`` leave the right operand unevaluated once ``lhs``
        decides the result.
        """
        op = node.op
        if op in (Op.AND, Op.OR):
            if lhs.is_bool() and lhs.data == (op is Op.OR):
                return lhs
            rhs = self.eval_expr(node.right)
            if lhs.is_bool() and rhs.is_bool():
                return rhs
            return self._mismatch(node, lhs, rhs)

        rhs = self.eval_expr(node.right)
        match op:
            case Op.ADD if lhs.is_int() and rhs.is_int():
                return mk_int(lhs.data + rhs.data)
            case Op.MUL if lhs.is_int() and rhs.is_int():
                return mk_int(lhs.data * rhs.data)
            case Op.LT if lhs.is_int() and rhs.is_int():
                return mk_bool(lhs.data < rhs.data)
            case Op.EQ if lhs.kind is rhs.kind and not lhs.is_undefined():
                return mk_bool(lhs.data == rhs.data)
        return self._mismatch(node, lhs, rhs)

    def _mismatch(self, node, *operands: Value) -> Value:
        # Report only where the mismatch originates, not where Undefined propagates
        if not any(value.is_undefined() for value in operands):
            self.report(OperandKindException(node.op, operands, node.line, self.file))
        return UNDEFINED

    def _condition(self, construct: str, node: Stmt) -> bool | None:
        value = self.eval_expr(node.cond)
        if value.is_bool():
            return value.data
        self.report(ConditionException(construct, value, node.line, self.file))
        return None

    def execute(self, node: Stmt) -> None:
        """
        Execute a statement against the interpreter's environment.

        Raises:
            TypeError: If ``node`` is not a statement node.
        """
        match node:
            case Seq():
                for stmt in statements(node):
                    self.execute(stmt)

            case Decl(name, expr):
                self.env.declare(name, self.eval_expr(expr))

            case Assign(name, expr):
                value = self.eval_expr(expr)
                if not self.env.assign(name, value):
                    current = self.env.lookup(name)
                    self.report(AssignmentException(name, value, current, node.line, self.file))

            case If(_, then_branch, else_branch):
                taken = self._condition("if", node)
                if taken is None:
                    return
                with self.env.scope():
                    self.execute(then_branch if taken else else_branch)

            case While(_, body):
                while True:
                    taken = self._condition("while", node)
                    if not taken:
                        break
                    with self.env.scope():
                        self.execute(body)

            case Print(expr):
                self.emit(str(self.eval_expr(expr)))

            case _:
                raise TypeError(f"Unknown statement type: {node!r} in {self.file}")

    def value_of(self, name: str) -> Value:
        """
        Look up ``name`` in the current environment without reporting.
        """
        return self.env.lookup(name)


__all__ = ["Interpreter"]

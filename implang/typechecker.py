"""Static type checker.

Expressions are given a :class:`~implang.values.Type` by :func:`infer` and
statements are accepted or rejected by :func:`check`. Both walk the tree
over a :class:`~implang.values.TypeEnv`, the scoped environment used at
runtime but holding types instead of values. Nothing here raises on an AST;
every unsupported combination becomes ``IllTyped`` or ``False``.

``&&`` and ``||`` demand two ``Bool`` operands even though the interpreter
short-circuits them, so ``true || 54`` is rejected although it would run.


File: typechecker.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from implang.nodes import (
    Assign, BinOp, BoolLit, Decl, Expr, If, IntLit, Print, Seq, Stmt, UnaryOp, Var, While,
    statements,
)
from implang.operations import Op
from implang.values import Type, TypeEnv

logger = logging.getLogger(__name__)

# operator -> (operand type, result type)
_BINARY_RULES = {
    Op.ADD: (Type.INT, Type.INT),
    Op.MUL: (Type.INT, Type.INT),
    Op.LT: (Type.INT, Type.BOOL),
    Op.AND: (Type.BOOL, Type.BOOL),
    Op.OR: (Type.BOOL, Type.BOOL),
}


def infer(node: Expr, env: TypeEnv) -> Type:
    """
    Infer the type of an expression.

    Returns:
        Type: ``Type.ILL_TYPED`` when the expression cannot be typed.
    """
    match node:
        case IntLit():
            return Type.INT
        case BoolLit():
            return Type.BOOL
        case Var(name):
            return env.lookup(name)
        case BinOp():
            # Walk the left spine iteratively; long chains like 1+1+...+1 nest left
            spine = []
            while isinstance(node, BinOp):
                spine.append(node)
                node = node.left
            ty = infer(node, env)
            for parent in reversed(spine):
                ty = _infer_binary(parent.op, ty, infer(parent.right, env))
            return ty
        case UnaryOp(Op.NOT, operand):
            if infer(operand, env) is Type.BOOL:
                return Type.BOOL
            return Type.ILL_TYPED
        case _:
            return Type.ILL_TYPED


def _infer_binary(op: Op, lhs: Type, rhs: Type) -> Type:
    if op is Op.EQ:
        if lhs == rhs and lhs is not Type.ILL_TYPED:
            return Type.BOOL
        return Type.ILL_TYPED
    if op in _BINARY_RULES:
        operand, result = _BINARY_RULES[op]
        if lhs is operand and rhs is operand:
            return result
    return Type.ILL_TYPED


def _check_in_scope(node: Stmt, env: TypeEnv) -> bool:
    with env.scope():
        return check(node, env)


def check(node: Stmt, env: TypeEnv) -> bool:
    """
    Check that a statement is well typed, declaring names into ``env``.
    """
    match node:
        case Seq():
            return all(check(stmt, env) for stmt in statements(node))
        case Decl(name, expr):
            ty = infer(expr, env)
            if ty is Type.ILL_TYPED:
                return _reject(node, f"'{name}' declared from an ill-typed expression")
            env.declare(name, ty)
            return True
        case Assign(name, expr):
            current = env.lookup(name)
            ty = infer(expr, env)
            if current is Type.ILL_TYPED or current != ty:
                return _reject(node, f"cannot assign {ty} to '{name}' of type {current}")
            return True
        case While(cond, body):
            if infer(cond, env) is not Type.BOOL:
                return _reject(node, "loop condition is not Bool")
            return _check_in_scope(body, env)
        case If(cond, then_branch, else_branch):
            if infer(cond, env) is not Type.BOOL:
                return _reject(node, "if condition is not Bool")
            return _check_in_scope(then_branch, env) and _check_in_scope(else_branch, env)
        case Print(expr):
            if infer(expr, env) is Type.ILL_TYPED:
                return _reject(node, "printed expression is ill-typed")
            return True
        case _:
            return False


def _reject(node: Stmt, reason: str) -> bool:
    logger.debug("Type check failed on line %s: %s", node.line, reason)
    return False


def check_program(program: Stmt) -> bool:
    """
    Check a whole program in a fresh type environment.
    """
    return check(program, TypeEnv())

"""
Tests for the IMP type checker.
"""
import logging

import pytest

from implang.nodes import BinOp, BoolLit, IntLit, Print, UnaryOp, Var
from implang.operations import Op
from implang.typechecker import check, check_program, infer
from implang.values import Type, TypeEnv

from implang.tests.utils import parse_source


CHECK_CASES = [
    # Sequences
    ("seq", "print 42; print 54;", True),
    ("seq2", "x := 42 < true; print 54 < false;", False),
    ("seq3", "print 42; print 54 < false;", False),

    # Statements
    ("assign", "x := 42; x = 54;", True),
    ("assign2", "x := 42; x = true;", False),
    ("assign3", "x = 42;", False),
    ("assign from unbound", "x := 1; x = y;", False),
    ("while", "while true {print 42;};", True),
    ("while2", "while 42 {print 42;};", False),
    ("if-then-else", "if false {print 42;} else {print 54;};", True),
    ("if-then-else2", "if true {print 42 < true;} else {print 54;};", False),
    ("if-then-else3", "if 42 {print 42;} else {print 54;};", False),
    ("print", "print 42;", True),
    ("print unbound", "print y;", False),

    # Expressions
    ("equal", "x := true == false;", True),
    ("equal2", "x := true == 54;", False),
    ("equal unbound", "x := y == z;", False),
    ("less", "x := 42 < 54;", True),
    ("less2", "x := 42 < true;", False),
    ("less bools", "x := true < false;", False),
    ("plus", "x := 42 + 54;", True),
    ("plus2", "x := 42 + false;", False),
    ("mult", "x := 6 * 9;", True),
    ("mult2", "x := 6 * false;", False),
    ("(exp) => exp", "x := (42+54);", True),
    ("(exp) => exp 2", "x := (42+false);", False),

    # Boolean operators are typed strictly even though they short-circuit at runtime
    ("or", "x := false || true;", True),
    ("or2", "x := false || 42;", False),
    ("or sc", "x := true || false;", True),
    ("or sc2", "x := true || 54;", False),
    ("and", "x := true && true;", True),
    ("and2", "x := true && 42;", False),
    ("and sc", "x := false && true;", True),
    ("and sc2", "x := false && 54;", False),

    ("not", "x := !true;", True),
    ("not2", "x := !42;", False),
    ("not3", "x := true; y := !x;", True),
    ("not4", "x := 54; y := !x;", False),
]


@pytest.mark.parametrize("name, source, expected", CHECK_CASES, ids=[c[0] for c in CHECK_CASES])
def test_check(name, source, expected):
    """
    Test whole-program checking against the expected verdict.
    """
    assert check_program(parse_source(source)) is expected


def test_infer_literals_and_variables():
    """
    Test inference of literals and scoped variable lookup.
    """
    env = TypeEnv()
    env.declare("n", Type.INT)
    assert infer(IntLit(1), env) is Type.INT
    assert infer(BoolLit(False), env) is Type.BOOL
    assert infer(Var("n"), env) is Type.INT
    assert infer(Var("missing"), env) is Type.ILL_TYPED


def test_infer_result_types():
    """
    Test the result type of each operator on well-typed operands.
    """
    env = TypeEnv()
    one = IntLit(1)
    yes = BoolLit(True)
    assert infer(BinOp(Op.ADD, one, one), env) is Type.INT
    assert infer(BinOp(Op.MUL, one, one), env) is Type.INT
    assert infer(BinOp(Op.LT, one, one), env) is Type.BOOL
    assert infer(BinOp(Op.EQ, one, one), env) is Type.BOOL
    assert infer(BinOp(Op.EQ, yes, yes), env) is Type.BOOL
    assert infer(BinOp(Op.AND, yes, yes), env) is Type.BOOL
    assert infer(BinOp(Op.OR, yes, yes), env) is Type.BOOL
    assert infer(UnaryOp(Op.NOT, yes), env) is Type.BOOL


def test_ill_typed_propagates():
    """
    Test that an ill-typed operand poisons the enclosing expression.
    """
    bad = BinOp(Op.ADD, IntLit(1), BoolLit(True))
    assert infer(BinOp(Op.MUL, bad, IntLit(2)), TypeEnv()) is Type.ILL_TYPED
    assert infer(UnaryOp(Op.NOT, bad), TypeEnv()) is Type.ILL_TYPED


def test_block_declarations_do_not_leak():
    """
    Test that names declared in a branch or loop body are gone afterwards.
    """
    assert check_program(parse_source("if true {y := 1;} else {y := 2;}; print y;")) is False
    assert check_program(parse_source("while false {y := 1;}; y = 2;")) is False


def test_shadowing_in_block():
    """
    Test that an inner declaration may change a name's type for the block only.
    """
    source = (
        "x := 1;"
        "if true {x := false; x = true;} else {print x;};"
        "x = 2;"
    )
    assert check_program(parse_source(source)) is True


def test_check_leaves_scopes_balanced():
    """
    Test that checking pops every scope it pushes, even on failure.
    """
    env = TypeEnv()
    assert check(parse_source("if true {print 1;} else {print 1 < true;};"), env) is False
    assert env.depth == 1
    assert check(parse_source("x := 1; while true {y := x;};"), env) is True
    assert env.depth == 1
    assert env.lookup("x") is Type.INT
    assert env.lookup("y") is Type.ILL_TYPED


def test_check_never_raises_on_foreign_nodes():
    """
    Test that unsupported nodes are rejected rather than raising.
    """
    env = TypeEnv()
    assert infer("not a node", env) is Type.ILL_TYPED
    assert check(Print("not a node"), env) is False
    assert check("not a node", env) is False


def test_rejection_is_logged(caplog):
    """
    Test that a failing statement is logged at debug level with its line.
    """
    with caplog.at_level(logging.DEBUG, logger="implang.typechecker"):
        assert check_program(parse_source("x := 1;\nx = true;")) is False
    assert "line 2" in caplog.text

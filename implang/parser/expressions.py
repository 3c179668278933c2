"""
Expression parsing utilities for IMP.

These functions operate on a `implang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. From highest to lowest:

    factor  ::= integer | "true" | "false" | name | "!" factor | "(" exp ")"
    term    ::= factor { ("*" | "&&") factor }
    exp2    ::= term { ("+" | "||") term }
    exp     ::= exp2 { ("==" | "<") exp2 }

All binary levels associate to the left.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from implang.nodes import BinOp, BoolLit, Expr, IntLit, UnaryOp, Var
from implang.operations import Op

if TYPE_CHECKING:
    from implang.parser import Parser


# ---- Highest precedence ----

def parse_factor(parser: 'Parser') -> Expr:
    """Parse a literal, variable, negation or parenthesized expression."""
    tok = parser.curr_token

    if tok.type == 'INT':
        parser.advance()
        return IntLit(int(tok.value), tok.line)

    if tok.type == 'BOOL':
        parser.advance()
        return BoolLit(tok.value == 'true', tok.line)

    if tok.type == 'NAME':
        parser.advance()
        return Var(tok.value, tok.line)

    if tok.type == 'NOT':
        parser.advance()
        return UnaryOp(Op.NOT, parser.factor(), tok.line)

    if tok.type == 'LPAREN':
        parser.advance()
        node = parser.expr()
        parser.eat('RPAREN', '")"')
        return node

    raise parser.error("value or expression")


def _parse_left_assoc(parser: 'Parser', operand, op_map: dict) -> Expr:
    result = operand()
    while parser.curr_token.type in op_map:
        op_tok = parser.advance()
        result = BinOp(op_map[op_tok.type], result, operand(), op_tok.line)
    return result


def parse_term(parser: 'Parser') -> Expr:
    """Parse multiplication and conjunction."""
    return _parse_left_assoc(parser, parser.factor, {
        'MUL': Op.MUL,
        'AND': Op.AND,
    })


def parse_exp2(parser: 'Parser') -> Expr:
    """Parse addition and disjunction."""
    return _parse_left_assoc(parser, parser.term, {
        'PLUS': Op.ADD,
        'OR': Op.OR,
    })


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> Expr:
    """Parse comparisons (==, <), the lowest-precedence operators."""
    return _parse_left_assoc(parser, parser.exp2, {
        'EQ': Op.EQ,
        'LT': Op.LT,
    })

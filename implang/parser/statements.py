"""
Statement parsing utilities for IMP.

These functions operate on a `implang.parser.parser.Parser` instance and
handle sequences, blocks, declarations, assignments, loops, conditionals
and print statements.

    seq   ::= stmt ";" { stmt ";" }
    block ::= "{" seq "}"
    stmt  ::= name ":=" exp | name "=" exp
            | "while" exp block
            | "if" exp block "else" block
            | "print" exp


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from implang.nodes import Assign, Decl, If, Print, Stmt, While, seq

if TYPE_CHECKING:
    from implang.parser import Parser


def parse_sequence(parser: 'Parser') -> Stmt:
    """
    Parse one or more statements, each terminated by a semicolon.

    The sequence ends at a closing brace or at the end of input, which are
    left for the caller to consume.

    Args:
        parser: The parser instance.

    Returns:
        Stmt: A single statement, or a right-associated chain of ``Seq`` nodes.
    """
    statements = []
    while True:
        statements.append(parser.statement())
        parser.eat('SEMI', "semicolon")
        if parser.curr_token.type in ('RBRACE', 'EOF'):
            return seq(*statements)


def parse_block(parser: 'Parser') -> Stmt:
    """
    Parse a sequence of statements enclosed in braces.

    Args:
        parser: The parser instance.
    """
    parser.eat('LBRACE', '"{"')
    body = parser.sequence()
    parser.eat('RBRACE', '"}"')
    return body


def parse_statement(parser: 'Parser') -> Stmt:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        Stmt: The statement node.
    """
    tok = parser.curr_token
    if tok.type == 'NAME':
        return parse_binding(parser)
    elif tok.type == 'WHILE':
        return parse_while(parser)
    elif tok.type == 'IF':
        return parse_if(parser)
    elif tok.type == 'PRINT':
        return parse_print(parser)
    raise parser.error("name or keyword")


def parse_binding(parser: 'Parser') -> Stmt:
    """
    Parse a declaration (``name := exp``) or an assignment (``name = exp``).

    Args:
        parser: The parser instance.
    """
    id_tok = parser.advance()
    if parser.curr_token.type == 'DECLARE':
        parser.advance()
        return Decl(id_tok.value, parser.expr(), id_tok.line)
    if parser.curr_token.type == 'ASSIGN':
        parser.advance()
        return Assign(id_tok.value, parser.expr(), id_tok.line)
    raise parser.error("declaration or assignment")


def parse_while(parser: 'Parser') -> Stmt:
    """
    Parse a 'while' loop.

    Syntax:
        while <expression> { <statements> }
    """
    tok = parser.advance()
    condition = parser.expr()
    body = parser.block()
    return While(condition, body, tok.line)


def parse_if(parser: 'Parser') -> Stmt:
    """
    Parse an 'if' statement. The 'else' branch is mandatory.

    Syntax:
        if <expression> { <statements> } else { <statements> }
    """
    tok = parser.advance()
    condition = parser.expr()
    then_block = parser.block()
    parser.eat('ELSE', 'keyword "else"')
    else_block = parser.block()
    return If(condition, then_block, else_block, tok.line)


def parse_print(parser: 'Parser') -> Stmt:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression>
    """
    tok = parser.advance()
    return Print(parser.expr(), tok.line)

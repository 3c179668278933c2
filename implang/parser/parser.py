"""
Main parser entry point for IMP.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`implang.parser.expressions` and `implang.parser.statements`.

The parser pulls tokens from a :class:`implang.lexer.Lexer` one at a time and
keeps a single token of lookahead. The first error aborts parsing; there is
no recovery.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from implang.exceptions import ParseError
from implang.lexer import Lexer, Token
from implang.nodes import Expr, Stmt

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """IMP parser."""

    def __init__(self, source: str | Lexer, file: str = "<input>"):
        """
        Initialize the parser and read the first token.

        Parameters:
            source (str | Lexer): The source code, or a lexer positioned at its start.
            file (str): The name of the script.
        """
        self.lexer = source if isinstance(source, Lexer) else Lexer(source, file)
        self.source_file = file
        self.curr_token: Token = self.lexer.next()

    def advance(self) -> Token:
        """
        Move to the next token and return the one just passed.
        """
        tok = self.curr_token
        self.curr_token = self.lexer.next()
        return tok

    def error(self, expected: str) -> ParseError:
        """
        Build an error for the current token.

        Parameters:
            expected (str): Description of the construct that was required.
        """
        return ParseError(expected, self.curr_token.value, self.curr_token.line, self.source_file)

    def eat(self, token_type: str, expected: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.
            expected (str): Description used in the error message.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.curr_token.type != token_type:
            raise self.error(expected)
        return self.advance()

    # Expression wrappers
    def factor(self) -> Expr:
        """
        Parse a literal, variable, negation or parenthesized group.
        """
        return _expr.parse_factor(self)

    def term(self) -> Expr:
        """
        Parse a chain of multiplications and conjunctions.
        """
        return _expr.parse_term(self)

    def exp2(self) -> Expr:
        """
        Parse a chain of additions and disjunctions.
        """
        return _expr.parse_exp2(self)

    def expr(self) -> Expr:
        """
        Parse a full expression, including comparisons.
        """
        return _expr.parse_expr(self)

    # Statement wrappers
    def sequence(self) -> Stmt:
        """
        Parse semicolon-terminated statements up to a closing brace or end of input.
        """
        return _stmt.parse_sequence(self)

    def block(self) -> Stmt:
        """
        Parse a sequence enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self) -> Stmt:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse(self) -> Stmt:
        """
        Parse the full input into a program.

        Raises:
            ParseError: On the first syntax error.
            LexError: On an unexpected character.
        """
        program = self.sequence()
        if self.curr_token.type != 'EOF':
            raise self.error("end of input")
        return program


def parse(source: str, file: str = "<input>") -> Stmt:
    """
    Parse IMP source text into a program.
    """
    return Parser(source, file).parse()

"""Lexer for IMP.

The lexer is pull-based: every call to :meth:`Lexer.next` matches exactly one
token at the current position using a combined regular expression of named
groups and returns it as a :class:`Token` carrying its type, lexeme and the
line it started on. The parser holds only the token it is looking at, so no
token list is built while parsing.

1. Token Definitions
Alternatives are tried in the order they are listed, which settles overlaps:
integer literals (with an optional leading ``-``) come before anything else,
so ``-1`` is never split; ``true``/``false`` are matched as whole words ahead
of identifiers; two-character operators (``:=``, ``==``, ``||``, ``&&``) are
listed before the single-character ones so ``=`` never swallows a following
``=``.

2. Keyword Differentiation
Identifiers start with a lowercase letter. After an identifier is matched it
is checked against the reserved words (``while``, ``if``, ``else``,
``print``) and retagged when it is one.

3. Whitespace and Comments
Whitespace and ``//`` comments are skipped before each token. Newlines in
skipped text advance the line counter.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import Iterator

from implang.exceptions import LexError


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (str | None): The matched lexeme, or None at end of input.
            line (int): The line the token starts on.
        """
        self.type = type_
        self.value = value
        self.line = line

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value}, line={self.line})"


token_specification: list[tuple[str, str]] = [
    # Literals
    ('INT',       r'-?[0-9]+'),
    ('BOOL',      r'(?:true|false)\b'),

    # Identifiers and keywords
    ('NAME',      r'[a-z][A-Za-z0-9_]*'),

    # Multi-character operators
    ('DECLARE',   r':='),
    ('EQ',        r'=='),
    ('OR',        r'\|\|'),
    ('AND',       r'&&'),

    # Single-character operators
    ('ASSIGN',    r'='),
    ('PLUS',      r'\+'),
    ('MUL',       r'\*'),
    ('NOT',       r'!'),
    ('LT',        r'<'),

    # Delimiters
    ('LBRACE',    r'\{'),
    ('RBRACE',    r'\}'),
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('SEMI',      r';'),

    ('MISMATCH',  r'.'),
]

TOKEN_REGEX = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification))

# Whitespace and line comments, skipped in one match
SKIP_REGEX = re.compile(r'(?:\s+|//[^\n]*)+')

KEYWORDS = {
    'while': 'WHILE',
    'if': 'IF',
    'else': 'ELSE',
    'print': 'PRINT',
}


class Lexer:
    """
    Produces IMP tokens one at a time.
    """
    def __init__(self, code: str, file: str = "<input>"):
        """
        Initialize the lexer at the start of ``code``.

        Parameters:
            code (str): The source code.
            file (str): The source name used in error messages.
        """
        self.code = code
        self.file = file
        self.position = 0
        self.line = 1

    def next(self) -> Token:
        """
        Advance over the next token and return it.

        Returns:
            Token: The next token, or an ``EOF`` token once the input is
            exhausted (repeatedly, if called again).

        Raises:
            LexError: If an unexpected character is encountered.
        """
        skipped = SKIP_REGEX.match(self.code, self.position)
        if skipped:
            self.line += skipped.group().count('\n')
            self.position = skipped.end()

        if self.position >= len(self.code):
            return Token('EOF', None, self.line)

        match_obj = TOKEN_REGEX.match(self.code, self.position)
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'MISMATCH':
            raise LexError(value, self.line, self.file)
        if kind == 'NAME':
            kind = KEYWORDS.get(value, 'NAME')

        self.position = match_obj.end()
        return Token(kind, value, self.line)

    def __iter__(self) -> Iterator[Token]:
        """
        Yield the remaining tokens up to and including ``EOF``.
        """
        while True:
            token = self.next()
            yield token
            if token.type == 'EOF':
                return


def tokenize(code: str, file: str = "<input>") -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    The parser does not need this; it is used for debugging dumps.

    Raises:
        LexError: If an unexpected character is encountered.
    """
    return list(Lexer(code, file))

"""IMP: a small imperative teaching language.

The package is a four-stage pipeline over one abstract syntax tree: a lexer,
a recursive descent parser, a static type checker and a tree-walk
interpreter.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from implang.interpreter import Interpreter
from implang.parser import Parser, parse
from implang.pretty import pretty_print
from implang.runner import interpret
from implang.typechecker import check, check_program, infer

__version__ = "0.1.0"

__all__ = [
    "Interpreter",
    "Parser",
    "check",
    "check_program",
    "infer",
    "interpret",
    "parse",
    "pretty_print",
]

"""Shared definitions for AST operation identifiers.

This module centralizes the operator identifiers used by the parser, the
type checker, the interpreter and the pretty printer to label operator nodes
in the abstract syntax tree. Keeping them in one place prevents the stages
from drifting apart when an operator is added or renamed.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "add"
    MUL = "mul"

    # Comparison
    EQ = "eq"
    LT = "lt"

    # Boolean
    AND = "and"
    OR = "or"
    NOT = "not"

    @property
    def symbol(self) -> str:
        """
        Return the source spelling of the operator.
        """
        return _SYMBOLS[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


_SYMBOLS = {
    Op.ADD: "+",
    Op.MUL: "*",
    Op.EQ: "==",
    Op.LT: "<",
    Op.AND: "&&",
    Op.OR: "||",
    Op.NOT: "!",
}


__all__ = ["Op"]

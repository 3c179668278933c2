"""Values, types and scoped environments.

1. Values
A runtime value is a tagged union over integers, booleans and ``Undefined``.
``Undefined`` is the result of every kind-mismatched or unbound operation and
propagates through evaluation without raising.

2. Types
The static counterpart has three members: ``Int``, ``Bool`` and ``IllTyped``.
``IllTyped`` plays the same poison role for the type checker.

3. Environments
An environment is a stack of scopes, each mapping names to values (or types).
The global scope sits at the bottom and is never popped. Lookup walks from the
innermost scope outward; declaration always writes into the innermost scope;
assignment mutates the innermost existing binding, and only when the new
value has the same kind as the old one.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


class Kind(Enum):
    """
    Runtime representation tag of a :class:`Value`.
    """
    INT = "Int"
    BOOL = "Bool"
    UNDEFINED = "Undefined"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Value:
    """
    Tagged runtime value.
    """
    kind: Kind
    data: Any = None

    def is_int(self) -> bool:
        return self.kind is Kind.INT

    def is_bool(self) -> bool:
        return self.kind is Kind.BOOL

    def is_undefined(self) -> bool:
        return self.kind is Kind.UNDEFINED

    def __str__(self) -> str:
        """
        Render the value the way ``print`` shows it.
        """
        if self.kind is Kind.INT:
            return str(self.data)
        if self.kind is Kind.BOOL:
            return "true" if self.data else "false"
        return "Undefined"


def mk_int(x: int) -> Value:
    return Value(Kind.INT, int(x))


def mk_bool(x: bool) -> Value:
    return Value(Kind.BOOL, bool(x))


UNDEFINED = Value(Kind.UNDEFINED)


class Type(Enum):
    """
    Static type of an expression.
    """
    ILL_TYPED = "IllTyped"
    INT = "Int"
    BOOL = "Bool"

    def __str__(self) -> str:
        return self.value


class Environment:
    """
    Stack of scopes with innermost-first lookup.

    Subclasses choose the poison value returned for unbound names and how the
    kind of a stored entry is determined for assignment.
    """
    missing: Any = None

    def __init__(self):
        self.scopes: list[dict[str, Any]] = [{}]

    @staticmethod
    def kind_of(entry):
        return entry

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def lookup(self, name: str):
        """
        Return the innermost binding of ``name``, or the poison value.
        """
        for scope in reversed(self.scopes):
            if name in scope:
                return scope[name]
        return self.missing

    def binds(self, name: str) -> bool:
        """
        Return True if any scope holds a binding for ``name``.
        """
        return any(name in scope for scope in self.scopes)

    def declare(self, name: str, entry) -> None:
        """
        Bind ``name`` in the innermost scope, shadowing outer bindings.
        """
        self.scopes[-1][name] = entry

    def assign(self, name: str, entry) -> bool:
        """
        Overwrite the innermost existing binding of ``name``.

        Returns:
            bool: False, leaving every scope untouched, if ``name`` is unbound
            or its current entry has a different kind than ``entry``.
        """
        for scope in reversed(self.scopes):
            if name in scope:
                if self.kind_of(scope[name]) != self.kind_of(entry):
                    return False
                scope[name] = entry
                return True
        return False

    def push_scope(self) -> None:
        self.scopes.append({})

    def pop_scope(self) -> None:
        """
        Discard the innermost scope.

        Raises:
            RuntimeError: If only the global scope is left.
        """
        if len(self.scopes) == 1:
            raise RuntimeError("Cannot pop the global scope")
        self.scopes.pop()

    @contextmanager
    def scope(self) -> Iterator["Environment"]:
        """
        Run the body of a ``with`` block inside a fresh child scope.
        """
        self.push_scope()
        try:
            yield self
        finally:
            self.pop_scope()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.scopes!r})"


class ValueEnv(Environment):
    """
    Runtime environment mapping names to :class:`Value`.
    """
    missing = UNDEFINED

    @staticmethod
    def kind_of(entry):
        return entry.kind


class TypeEnv(Environment):
    """
    Static environment mapping names to :class:`Type`.
    """
    missing = Type.ILL_TYPED

"""Errors.

Lexical, syntactic and semantic errors are raised and abort the pipeline for
a source unit. Runtime failures derive from :class:`EvaluationFailure`; the
interpreter records them instead of raising so that execution continues.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _located(message, line=None, file=None) -> str:
    if line is not None:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class LexError(RuntimeError):
    """
    Error for characters the lexer does not recognize.
    """
    def __init__(self, char, line=None, file=None):
        self.char = char
        self.line = line
        super().__init__(_located(f"Unexpected character '{char}'", line, file))


class ParseError(SyntaxError):
    """
    Error for a missing or misplaced token.
    """
    def __init__(self, expected, found, line=None, file=None):
        self.expected = expected
        self.found = found
        self.line = line
        found_text = "end of input" if found is None else f"'{found}'"
        super().__init__(_located(f"Expected {expected}, but found {found_text}", line, file))


class TypeCheckError(TypeError):
    """
    Error for programs rejected by the type checker.
    """
    def __init__(self, file=None):
        super().__init__(_located("Program failed type checking", file=file))


class EvaluationFailure(Exception):
    """
    Base class for recoverable runtime failures.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        super().__init__(_located(message, line, file))


class UndefinedVariableException(EvaluationFailure):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, file)


class OperandKindException(EvaluationFailure):
    """
    Error for operators applied to values of the wrong kind.
    """
    def __init__(self, op, operands, line=None, file=None):
        self.op = op
        self.operands = operands
        kinds = " and ".join(str(value.kind) for value in operands)
        super().__init__(f"Operator '{op.symbol}' cannot be applied to {kinds}", line, file)


class AssignmentException(EvaluationFailure):
    """
    Error for assignments to unbound names or across value kinds.
    """
    def __init__(self, varname, value, current, line=None, file=None):
        self.varname = varname
        self.value = value
        if current.is_undefined():
            reason = "it is not declared or holds Undefined"
        else:
            reason = f"it holds {current.kind}, not {value.kind}"
        super().__init__(f"Cannot assign to '{varname}': {reason}", line, file)


class ConditionException(EvaluationFailure):
    """
    Error for conditions that do not evaluate to a boolean.
    """
    def __init__(self, construct, value, line=None, file=None):
        self.construct = construct
        self.value = value
        super().__init__(
            f"Condition of '{construct}' must be Bool, but evaluated to {value.kind}",
            line,
            file,
        )

"""Pipeline driver.

Runs a source unit through every stage: the parser (pulling tokens from the
lexer), the type checker and, only when checking succeeds, the interpreter.


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import Callable

from implang.exceptions import TypeCheckError
from implang.interpreter import Interpreter
from implang.parser import parse
from implang.typechecker import check_program

logger = logging.getLogger(__name__)


def interpret(source: str, file: str = "<input>", emit: Callable[[str], object] = print) -> Interpreter:
    """
    Parse, type check and execute IMP source.

    Parameters:
        source (str): The program text.
        file (str): The name of the script.
        emit (Callable): Receives one line of text per executed ``print``.

    Returns:
        Interpreter: The interpreter after execution, holding the final
        environment and any recorded runtime failures.

    Raises:
        LexError: On an unexpected character.
        ParseError: On a syntax error.
        TypeCheckError: If the program is ill-typed; nothing is executed.
    """
    program = parse(source, file)
    logger.debug("Parsed %s", file)
    if not check_program(program):
        raise TypeCheckError(file)
    logger.debug("Type checked %s", file)
    interpreter = Interpreter(file, emit=emit)
    interpreter.execute(program)
    return interpreter

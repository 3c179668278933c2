"""
Utility functions shared across IMP Language tests.
"""
from implang.interpreter import Interpreter
from implang.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    return Parser(source, "<test>").parse()


def run_source(source: str, emit=print) -> Interpreter:
    """
    Parse and execute source code without type checking.

    Returns the interpreter so tests can inspect the final environment.
    """
    interpreter = Interpreter("<test>", emit=emit)
    interpreter.execute(parse_source(source))
    return interpreter

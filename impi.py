"""
IMP Language Interpreter

This is the main entry point for the IMP language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Parser pulls tokens from the Lexer and builds the AST.
3. The type checker validates the AST; ill-typed programs are not run.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Setting the IMPDEBUG environment variable enables debug logging and dumps the
token stream and the pretty-printed AST before execution.
"""
import logging
import os
import sys

from termcolor import colored

from implang.exceptions import LexError, ParseError, TypeCheckError
from implang.lexer import tokenize
from implang.parser import parse
from implang.pretty import pretty_print
from implang.runner import interpret


def print_usage():
    """
    Print usage.
    """
    print()
    print("IMP Language Interpreter")
    print()
    print("Usage:")
    print("    impi <script.imp>")
    print()
    print("Arguments:")
    print("    <script.imp>")
    print("        Path to an IMP source file to type check and execute.")
    print()
    print("Example:")
    print("    impi loop.imp")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    IMPDEBUG")
    print("        When set, log debug output and dump tokens and AST.")


def print_error(message) -> None:
    """
    Print a fatal error to stderr.
    """
    print(colored("error: ", "red", attrs=["bold"]) + str(message), file=sys.stderr)


def debug_print_tokens_ast(code: str, script_name: str):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokenize(code, script_name))
    print("\nAST:\n")
    print(pretty_print(parse(code, script_name)))


def run_script(script_name: str) -> int:
    """
    Run an IMP script and return the exit status.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print_error(f"cannot read {script_name}: {e.strerror}")
        return 1
    except UnicodeDecodeError as e:
        print_error(f"cannot read {script_name}: not valid UTF-8 at byte {e.start}")
        return 1

    try:
        if os.environ.get('IMPDEBUG'):
            debug_print_tokens_ast(code, script_name)
        interpret(code, script_name)
    except (LexError, ParseError, TypeCheckError) as e:
        print_error(e)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = sys.argv[1:] if argv is None else argv[1:]
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get('IMPDEBUG') else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))

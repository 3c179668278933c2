"""
Tests for the IMP lexer.
"""
import pytest

from implang.exceptions import LexError
from implang.lexer import Lexer, tokenize


def kinds(source: str) -> list[str]:
    """
    Return the token types of ``source``, without the trailing EOF.
    """
    return [tok.type for tok in tokenize(source)][:-1]


def test_statement_tokens():
    """
    Test that a declaration is split into name, operator, literal and semicolon.
    """
    tokens = tokenize("x := 42;")
    assert [(t.type, t.value) for t in tokens] == [
        ('NAME', 'x'),
        ('DECLARE', ':='),
        ('INT', '42'),
        ('SEMI', ';'),
        ('EOF', None),
    ]


def test_negative_integer_is_one_token():
    """
    Test that a leading minus belongs to the integer literal.
    """
    assert [(t.type, t.value) for t in tokenize("-12")][:-1] == [('INT', '-12')]


def test_keywords_and_names():
    """
    Test that reserved words are keywords and other lowercase words are names.
    """
    assert kinds("while if else print whiles iffy x1 camelCase snake_case") == [
        'WHILE', 'IF', 'ELSE', 'PRINT', 'NAME', 'NAME', 'NAME', 'NAME', 'NAME',
    ]


def test_boolean_literals_are_whole_words():
    """
    Test that ``true`` and ``false`` are literals but ``trueish`` is a name.
    """
    assert kinds("true false trueish false_flag") == ['BOOL', 'BOOL', 'NAME', 'NAME']


def test_operators_prefer_longest_match():
    """
    Test that two-character operators are not split into their prefixes.
    """
    assert kinds(":= == = || && ! < + *") == [
        'DECLARE', 'EQ', 'ASSIGN', 'OR', 'AND', 'NOT', 'LT', 'PLUS', 'MUL',
    ]
    assert kinds("x==y") == ['NAME', 'EQ', 'NAME']
    assert kinds("x=y") == ['NAME', 'ASSIGN', 'NAME']


def test_delimiters():
    """
    Test braces, parentheses and semicolons.
    """
    assert kinds("{ ( ) } ;") == ['LBRACE', 'LPAREN', 'RPAREN', 'RBRACE', 'SEMI']


def test_line_numbers_and_comments():
    """
    Test that newlines are counted and comments are skipped.
    """
    source = (
        "x := 1; // first\n"
        "\n"
        "// a whole comment line\n"
        "print x;\n"
    )
    tokens = tokenize(source)
    assert [(t.type, t.line) for t in tokens] == [
        ('NAME', 1), ('DECLARE', 1), ('INT', 1), ('SEMI', 1),
        ('PRINT', 4), ('NAME', 4), ('SEMI', 4),
        ('EOF', 5),
    ]


def test_next_is_pull_based():
    """
    Test that the lexer hands out one token per call and repeats EOF.
    """
    lexer = Lexer("print 1;")
    assert lexer.next().type == 'PRINT'
    assert lexer.next().value == '1'
    assert lexer.next().type == 'SEMI'
    assert lexer.next().type == 'EOF'
    assert lexer.next().type == 'EOF'


def test_unexpected_character():
    """
    Test that an unrecognized character raises with its line number.
    """
    with pytest.raises(LexError) as excinfo:
        tokenize("x := 1;\ny := 2 % 3;")
    assert excinfo.value.char == '%'
    assert excinfo.value.line == 2
    assert "Unexpected character '%' on line 2" in str(excinfo.value)


@pytest.mark.parametrize("source", ["X := 1;", "_x := 1;", "x := 1 - 2;", "x := 1 / 2;"])
def test_rejected_characters(source):
    """
    Test that uppercase-leading names and unsupported operators are rejected.
    """
    with pytest.raises(LexError):
        tokenize(source)


@pytest.mark.parametrize("source", ["x := ١٢;", "x := １;"])
def test_integers_use_ascii_digits_only(source):
    """
    Test that non-ASCII decimal digits are not read as integer literals.
    """
    with pytest.raises(LexError):
        tokenize(source)

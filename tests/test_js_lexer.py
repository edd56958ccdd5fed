import pytest

from saba.errors import UnexpectedInputError
from saba.js_lexer import (
    Identifier,
    JsLexer,
    Keyword,
    Number,
    Punctuator,
    StringLiteral,
)


def test_empty():
    assert list(JsLexer("")) == []


def test_num():
    assert list(JsLexer("42")) == [Number(42)]


def test_add_nums():
    assert list(JsLexer("1 + 2")) == [Number(1), Punctuator("+"), Number(2)]


def test_assign_variable():
    assert list(JsLexer('var foo="bar";')) == [
        Keyword("var"),
        Identifier("foo"),
        Punctuator("="),
        StringLiteral("bar"),
        Punctuator(";"),
    ]


def test_add_variable_and_num():
    assert list(JsLexer("var foo=42; var result=foo+1;")) == [
        Keyword("var"),
        Identifier("foo"),
        Punctuator("="),
        Number(42),
        Punctuator(";"),
        Keyword("var"),
        Identifier("result"),
        Punctuator("="),
        Identifier("foo"),
        Punctuator("+"),
        Number(1),
        Punctuator(";"),
    ]


def test_add_local_variable_and_num():
    source = "function foo() { var a=42; return a; } var result = foo() + 1;"
    assert list(JsLexer(source)) == [
        Keyword("function"),
        Identifier("foo"),
        Punctuator("("),
        Punctuator(")"),
        Punctuator("{"),
        Keyword("var"),
        Identifier("a"),
        Punctuator("="),
        Number(42),
        Punctuator(";"),
        Keyword("return"),
        Identifier("a"),
        Punctuator(";"),
        Punctuator("}"),
        Keyword("var"),
        Identifier("result"),
        Punctuator("="),
        Identifier("foo"),
        Punctuator("("),
        Punctuator(")"),
        Punctuator("+"),
        Number(1),
        Punctuator(";"),
    ]


def test_trailing_whitespace_ends_stream():
    assert list(JsLexer("a \n ")) == [Identifier("a")]


def test_unterminated_string_takes_rest():
    assert list(JsLexer('"abc')) == [StringLiteral("abc")]


def test_unsupported_char_raises():
    with pytest.raises(UnexpectedInputError):
        list(JsLexer("a * b"))


def test_iterator_is_exhausted_after_end():
    lexer = JsLexer("x")
    assert next(lexer) == Identifier("x")
    with pytest.raises(StopIteration):
        next(lexer)
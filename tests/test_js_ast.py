import pytest

from saba.errors import UnexpectedInputError
from saba.js_ast import (
    AdditiveExpression,
    AssignmentExpression,
    BlockStatement,
    CallExpression,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    JsParser,
    MemberExpression,
    NumericLiteral,
    Program,
    ReturnStatement,
    StringLiteral,
    VariableDeclaration,
    VariableDeclarator,
)
from saba.js_lexer import JsLexer


def parse(source):
    return JsParser(JsLexer(source)).parse_ast()


def test_empty():
    assert parse("") == Program()


def test_num():
    assert parse("42") == Program([ExpressionStatement(NumericLiteral(42))])


def test_add_nums():
    expected = Program(
        [
            ExpressionStatement(
                AdditiveExpression("+", NumericLiteral(1), NumericLiteral(2))
            )
        ]
    )
    assert parse("1 + 2") == expected


def test_assign_variable():
    expected = Program(
        [
            VariableDeclaration(
                (VariableDeclarator(Identifier("foo"), StringLiteral("bar")),)
            )
        ]
    )
    assert parse('var foo="bar";') == expected


def test_add_variable_and_num():
    expected = Program(
        [
            VariableDeclaration(
                (VariableDeclarator(Identifier("foo"), NumericLiteral(42)),)
            ),
            VariableDeclaration(
                (
                    VariableDeclarator(
                        Identifier("result"),
                        AdditiveExpression(
                            "+", Identifier("foo"), NumericLiteral(1)
                        ),
                    ),
                )
            ),
        ]
    )
    assert parse("var foo=42; var result=foo+1;") == expected


def _foo_returning_42():
    return FunctionDeclaration(
        Identifier("foo"),
        (),
        BlockStatement((ReturnStatement(NumericLiteral(42)),)),
    )


def test_define_function():
    assert parse("function foo() { return 42; }") == Program([_foo_returning_42()])


def test_add_function_add_num():
    expected = Program(
        [
            _foo_returning_42(),
            VariableDeclaration(
                (
                    VariableDeclarator(
                        Identifier("result"),
                        AdditiveExpression(
                            "+",
                            CallExpression(Identifier("foo"), ()),
                            NumericLiteral(1),
                        ),
                    ),
                )
            ),
        ]
    )
    assert parse("function foo() { return 42; } var result = foo() + 1;") == expected


def test_define_function_with_args():
    expected = Program(
        [
            FunctionDeclaration(
                Identifier("foo"),
                (Identifier("a"), Identifier("b")),
                BlockStatement(
                    (
                        ReturnStatement(
                            AdditiveExpression(
                                "+", Identifier("a"), Identifier("b")
                            )
                        ),
                    )
                ),
            )
        ]
    )
    assert parse("function foo(a, b) { return a+b; }") == expected


def test_member_call():
    expected = Program(
        [
            ExpressionStatement(
                CallExpression(
                    MemberExpression(
                        Identifier("document"), Identifier("getElementById")
                    ),
                    (StringLiteral("x"),),
                )
            )
        ]
    )
    assert parse('document.getElementById("x")') == expected


def test_reassignment():
    expected = Program(
        [
            ExpressionStatement(
                AssignmentExpression("=", Identifier("a"), NumericLiteral(1))
            )
        ]
    )
    assert parse("a = 1;") == expected


def test_unclosed_function_body_raises():
    with pytest.raises(UnexpectedInputError):
        parse("function foo() { return 1;")


def test_missing_parameter_list_raises():
    with pytest.raises(UnexpectedInputError):
        parse("function foo { return 1; }")


def test_bad_parameter_list_raises():
    with pytest.raises(UnexpectedInputError):
        parse("function foo(a + b) { return 1; }")
"""Abstract syntax tree and parser for the small JavaScript subset."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from saba import js_lexer as tok
from saba.errors import UnexpectedInputError


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Optional["JsNode"]


@dataclass(frozen=True)
class AdditiveExpression:
    operator: str
    left: Optional["JsNode"]
    right: Optional["JsNode"]


@dataclass(frozen=True)
class AssignmentExpression:
    operator: str
    left: Optional["JsNode"]
    right: Optional["JsNode"]


@dataclass(frozen=True)
class MemberExpression:
    object: Optional["JsNode"]
    property: Optional["JsNode"]


@dataclass(frozen=True)
class NumericLiteral:
    value: int


@dataclass(frozen=True)
class VariableDeclaration:
    declarations: tuple[Optional["JsNode"], ...]


@dataclass(frozen=True)
class VariableDeclarator:
    id: Optional["JsNode"]
    init: Optional["JsNode"]


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class BlockStatement:
    body: tuple[Optional["JsNode"], ...]


@dataclass(frozen=True)
class ReturnStatement:
    argument: Optional["JsNode"]


@dataclass(frozen=True)
class FunctionDeclaration:
    id: Optional["JsNode"]
    params: tuple[Optional["JsNode"], ...]
    body: Optional["JsNode"]


@dataclass(frozen=True)
class CallExpression:
    callee: Optional["JsNode"]
    arguments: tuple[Optional["JsNode"], ...]


JsNode = Union[
    ExpressionStatement,
    AdditiveExpression,
    AssignmentExpression,
    MemberExpression,
    NumericLiteral,
    VariableDeclaration,
    VariableDeclarator,
    Identifier,
    StringLiteral,
    BlockStatement,
    ReturnStatement,
    FunctionDeclaration,
    CallExpression,
]


@dataclass
class Program:
    """The top-level list of statements and declarations."""

    body: list[JsNode] = field(default_factory=list)


def _is_punct(token: Optional[tok.Token], char: str) -> bool:
    return isinstance(token, tok.Punctuator) and token.value == char


class JsParser:
    """Recursive-descent parser building a Program from lexer tokens."""

    def __init__(self, lexer: Iterator[tok.Token]) -> None:
        self._tokens = iter(lexer)
        self._lookahead: Optional[tok.Token] = None
        self._has_lookahead = False

    def _peek(self) -> Optional[tok.Token]:
        if not self._has_lookahead:
            self._lookahead = next(self._tokens, None)
            self._has_lookahead = True
        return self._lookahead

    def _next(self) -> Optional[tok.Token]:
        token = self._peek()
        self._has_lookahead = False
        self._lookahead = None
        return token

    def _primary_expression(self) -> Optional[JsNode]:
        token = self._next()
        if isinstance(token, tok.Identifier):
            return Identifier(token.name)
        if isinstance(token, tok.StringLiteral):
            return StringLiteral(token.value)
        if isinstance(token, tok.Number):
            return NumericLiteral(token.value)
        return None

    def _member_expression(self) -> Optional[JsNode]:
        expr = self._primary_expression()
        if _is_punct(self._peek(), "."):
            self._next()
            return MemberExpression(expr, self._identifier())
        return expr

    def _arguments(self) -> tuple[Optional[JsNode], ...]:
        arguments: list[Optional[JsNode]] = []
        while True:
            token = self._peek()
            if token is None:
                return tuple(arguments)
            if isinstance(token, tok.Punctuator):
                if token.value == ")":
                    self._next()
                    return tuple(arguments)
                if token.value != ",":
                    raise UnexpectedInputError(
                        f"unexpected {token.value!r} in argument list"
                    )
                self._next()
            else:
                arguments.append(self._assignment_expression())

    def _left_hand_side_expression(self) -> Optional[JsNode]:
        expr = self._member_expression()
        if _is_punct(self._peek(), "("):
            self._next()
            return CallExpression(expr, self._arguments())
        return expr

    def _additive_expression(self) -> Optional[JsNode]:
        left = self._left_hand_side_expression()
        token = self._peek()
        if isinstance(token, tok.Punctuator) and token.value in ("+", "-"):
            self._next()
            return AdditiveExpression(token.value, left, self._assignment_expression())
        return left

    def _assignment_expression(self) -> Optional[JsNode]:
        expr = self._additive_expression()
        if _is_punct(self._peek(), "="):
            self._next()
            return AssignmentExpression("=", expr, self._assignment_expression())
        return expr

    def _initialiser(self) -> Optional[JsNode]:
        if _is_punct(self._next(), "="):
            return self._assignment_expression()
        return None

    def _identifier(self) -> Optional[JsNode]:
        token = self._next()
        if isinstance(token, tok.Identifier):
            return Identifier(token.name)
        return None

    def _variable_declaration(self) -> JsNode:
        ident = self._identifier()
        declarator = VariableDeclarator(ident, self._initialiser())
        return VariableDeclaration((declarator,))

    def _statement(self) -> Optional[JsNode]:
        token = self._peek()
        if token is None:
            return None

        node: Optional[JsNode]
        if isinstance(token, tok.Keyword):
            if token.name == "var":
                self._next()
                node = self._variable_declaration()
            elif token.name == "return":
                self._next()
                node = ReturnStatement(self._assignment_expression())
            else:
                node = None
        else:
            node = ExpressionStatement(self._assignment_expression())

        if _is_punct(self._peek(), ";"):
            self._next()
        return node

    def _expect(self, char: str, what: str) -> None:
        token = self._next()
        if not _is_punct(token, char):
            raise UnexpectedInputError(
                f"function should have {what} but got {token!r}"
            )

    def _function_body(self) -> JsNode:
        self._expect("{", "open curly bracket")
        body: list[Optional[JsNode]] = []
        while True:
            token = self._peek()
            if token is None:
                raise UnexpectedInputError("function body is not closed")
            if _is_punct(token, "}"):
                self._next()
                return BlockStatement(tuple(body))
            body.append(self._source_element())

    def _parameter_list(self) -> tuple[Optional[JsNode], ...]:
        self._expect("(", "`(`")
        params: list[Optional[JsNode]] = []
        while True:
            token = self._peek()
            if token is None:
                return tuple(params)
            if isinstance(token, tok.Punctuator):
                if token.value == ")":
                    self._next()
                    return tuple(params)
                if token.value != ",":
                    raise UnexpectedInputError(
                        f"unexpected {token.value!r} in parameter list"
                    )
                self._next()
            else:
                params.append(self._identifier())

    def _function_declaration(self) -> JsNode:
        ident = self._identifier()
        params = self._parameter_list()
        return FunctionDeclaration(ident, params, self._function_body())

    def _source_element(self) -> Optional[JsNode]:
        token = self._peek()
        if token is None:
            return None
        if isinstance(token, tok.Keyword) and token.name == "function":
            self._next()
            return self._function_declaration()
        return self._statement()

    def parse_ast(self) -> Program:
        """Parse all tokens into a Program."""
        body: list[JsNode] = []
        while True:
            node = self._source_element()
            if node is None:
                return Program(body)
            body.append(node)


__all__ = [
    "AdditiveExpression",
    "AssignmentExpression",
    "BlockStatement",
    "CallExpression",
    "ExpressionStatement",
    "FunctionDeclaration",
    "Identifier",
    "JsNode",
    "JsParser",
    "MemberExpression",
    "NumericLiteral",
    "Program",
    "ReturnStatement",
    "StringLiteral",
    "VariableDeclaration",
    "VariableDeclarator",
]
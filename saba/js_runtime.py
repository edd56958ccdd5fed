"""Tree-walking interpreter for the small JavaScript subset."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from saba.dom import Node as DomNode
from saba.dom import Text
from saba.dom_api import get_element_by_id
from saba.errors import UnexpectedInputError
from saba.js_ast import (
    AdditiveExpression,
    AssignmentExpression,
    BlockStatement,
    CallExpression,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    JsNode,
    MemberExpression,
    NumericLiteral,
    Program,
    ReturnStatement,
    StringLiteral,
    VariableDeclaration,
    VariableDeclarator,
)

_GET_ELEMENT_BY_ID = "document.getElementById"


class _ValueOps:
    """Arithmetic shared by all runtime values."""

    def __add__(self, rhs: "RuntimeValue") -> "RuntimeValue":
        if isinstance(self, NumberValue) and isinstance(rhs, NumberValue):
            return NumberValue(self.value + rhs.value)
        return StringValue(str(self) + str(rhs))

    def __sub__(self, rhs: "RuntimeValue") -> "RuntimeValue":
        if isinstance(self, NumberValue) and isinstance(rhs, NumberValue):
            return NumberValue(self.value - rhs.value)
        # Not a number: represented as zero.
        return NumberValue(0)


@dataclass(frozen=True)
class NumberValue(_ValueOps):
    """A non-negative integer value."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StringValue(_ValueOps):
    """A string value."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HtmlElement(_ValueOps):
    """A DOM node, optionally with a property being accessed on it."""

    object: DomNode
    property: Optional[str] = None

    def __str__(self) -> str:
        return f"HtmlElement: {self.object!r}"


RuntimeValue = Union[NumberValue, StringValue, HtmlElement]


@dataclass(frozen=True)
class Function:
    """A user-defined function."""

    id: str
    params: tuple[Optional[JsNode], ...]
    body: Optional[JsNode]


_MISSING = object()


class Environment:
    """A scope of variables, chained to an enclosing scope."""

    def __init__(self, outer: Optional["Environment"] = None) -> None:
        self.outer = outer
        self.variables: list[tuple[str, Optional[RuntimeValue]]] = []

    def _lookup(self, name: str) -> object:
        for var_name, value in self.variables:
            if var_name == name:
                return value
        if self.outer is not None:
            return self.outer._lookup(name)
        return _MISSING

    def get_variable(self, name: str) -> Optional[RuntimeValue]:
        """Value of the nearest variable called ``name``, or None."""
        value = self._lookup(name)
        return None if value is _MISSING else value  # type: ignore[return-value]

    def add_variable(self, name: str, value: Optional[RuntimeValue]) -> None:
        """Declare a variable in this scope."""
        self.variables.append((name, value))

    def update_variable(self, name: str, value: Optional[RuntimeValue]) -> None:
        """Replace the value of a variable declared in this scope, if any."""
        for index, (var_name, _) in enumerate(self.variables):
            if var_name == name:
                del self.variables[index]
                self.variables.append((name, value))
                return


@dataclass
class JsRuntime:
    """Executes a Program against a DOM tree."""

    dom_root: DomNode
    env: Environment = field(default_factory=Environment)
    functions: list[Function] = field(default_factory=list)

    def __init__(self, dom_root: DomNode) -> None:
        self.dom_root = dom_root
        self.env = Environment(None)
        self.functions = []

    def _call_browser_api(
        self,
        func: RuntimeValue,
        arguments: Sequence[Optional[JsNode]],
        env: Environment,
    ) -> tuple[bool, Optional[RuntimeValue]]:
        if func == StringValue(_GET_ELEMENT_BY_ID):
            if not arguments:
                return True, None
            arg = self.evaluate(arguments[0], env)
            if arg is None:
                return True, None
            target = get_element_by_id(self.dom_root, str(arg))
            if target is None:
                return True, None
            return True, HtmlElement(target, None)
        return False, None

    def _find_function(self, callee_value: RuntimeValue) -> Function:
        found: Optional[Function] = None
        for func in self.functions:
            if callee_value == StringValue(func.id):
                found = func
        if found is None:
            raise UnexpectedInputError(f"function {callee_value} doesn't exist")
        return found

    def evaluate(
        self, node: Optional[JsNode], env: Optional[Environment] = None
    ) -> Optional[RuntimeValue]:
        """Evaluate one AST node in ``env`` (the global scope by default)."""
        if env is None:
            env = self.env
        if node is None:
            return None

        match node:
            case ExpressionStatement(expression=expr):
                return self.evaluate(expr, env)

            case AdditiveExpression(operator=op, left=left, right=right):
                left_value = self.evaluate(left, env)
                if left_value is None:
                    return None
                right_value = self.evaluate(right, env)
                if right_value is None:
                    return None
                if op == "+":
                    return left_value + right_value
                if op == "-":
                    return left_value - right_value
                return None

            case AssignmentExpression(operator=op, left=left, right=right):
                if op != "=":
                    return None
                if isinstance(left, Identifier):
                    env.update_variable(left.name, self.evaluate(right, env))
                    return None
                target = self.evaluate(left, env)
                if isinstance(target, HtmlElement):
                    right_value = self.evaluate(right, env)
                    if right_value is None:
                        return None
                    if target.property == "textContent":
                        target.object.first_child = DomNode(Text(str(right_value)))
                return None

            case MemberExpression(object=obj, property=prop):
                object_value = self.evaluate(obj, env)
                if object_value is None:
                    return None
                property_value = self.evaluate(prop, env)
                if property_value is None:
                    return object_value
                if isinstance(object_value, HtmlElement):
                    if object_value.property is not None:
                        raise UnexpectedInputError(
                            "nested property access on an element is not supported"
                        )
                    return HtmlElement(object_value.object, str(property_value))
                # "document.getElementById" is handled as one string name.
                return object_value + StringValue(".") + property_value

            case NumericLiteral(value=value):
                return NumberValue(value)

            case VariableDeclaration(declarations=declarations):
                for declaration in declarations:
                    self.evaluate(declaration, env)
                return None

            case VariableDeclarator(id=ident, init=init):
                if isinstance(ident, Identifier):
                    env.add_variable(ident.name, self.evaluate(init, env))
                return None

            case Identifier(name=name):
                value = env.get_variable(name)
                # An unknown name evaluates to its own spelling.
                return value if value is not None else StringValue(name)

            case StringLiteral(value=value):
                return StringValue(value)

            case BlockStatement(body=body):
                result: Optional[RuntimeValue] = None
                for statement in body:
                    result = self.evaluate(statement, env)
                return result

            case ReturnStatement(argument=argument):
                return self.evaluate(argument, env)

            case FunctionDeclaration(id=ident, params=params, body=body):
                name = self.evaluate(ident, env)
                if isinstance(name, StringValue):
                    self.functions.append(Function(name.value, tuple(params), body))
                return None

            case CallExpression(callee=callee, arguments=arguments):
                new_env = Environment(env)
                callee_value = self.evaluate(callee, new_env)
                if callee_value is None:
                    return None

                handled, result = self._call_browser_api(
                    callee_value, arguments, new_env
                )
                if handled:
                    return result

                function = self._find_function(callee_value)
                if len(arguments) != len(function.params):
                    raise UnexpectedInputError(
                        f"function {function.id} takes {len(function.params)} "
                        f"arguments but got {len(arguments)}"
                    )
                for param, argument in zip(function.params, arguments):
                    param_name = self.evaluate(param, new_env)
                    if isinstance(param_name, StringValue):
                        new_env.add_variable(
                            param_name.value, self.evaluate(argument, new_env)
                        )
                return self.evaluate(function.body, new_env)

        raise UnexpectedInputError(f"unsupported node {node!r}")

    def execute(self, program: Program) -> None:
        """Run every top-level statement of ``program`` in the global scope."""
        for node in program.body:
            self.evaluate(node, self.env)


__all__ = [
    "Environment",
    "Function",
    "HtmlElement",
    "JsRuntime",
    "NumberValue",
    "RuntimeValue",
    "StringValue",
]
"""A tree-walking interpreter for the JavaScript subset parsed by :mod:`saba.js_ast`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from saba.js_ast import (
    AdditiveExpression,
    AssignmentExpression,
    BlockStatement,
    CallExpression,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    MemberExpression,
    Node,
    NumericLiteral,
    Program,
    ReturnStatement,
    StringLiteral,
    VariableDeclaration,
    VariableDeclarator,
)

_U64 = 1 << 64


class RuntimeError_(RuntimeError):
    """Raised when a script cannot be executed."""


def _add(left: RuntimeValue, right: RuntimeValue) -> RuntimeValue:
    if isinstance(left, NumberValue) and isinstance(right, NumberValue):
        return NumberValue((left.value + right.value) % _U64)
    return StringValue(f"{left}{right}")


def _sub(left: RuntimeValue, right: RuntimeValue) -> RuntimeValue:
    if isinstance(left, NumberValue) and isinstance(right, NumberValue):
        return NumberValue((left.value - right.value) % _U64)
    return NumberValue(0)


@dataclass(frozen=True)
class NumberValue:
    """An unsigned 64-bit number."""

    value: int

    def __str__(self) -> str:
        return str(self.value)

    def __add__(self, other: RuntimeValue) -> RuntimeValue:
        return _add(self, other)

    def __sub__(self, other: RuntimeValue) -> RuntimeValue:
        return _sub(self, other)


@dataclass(frozen=True)
class StringValue:
    """A string."""

    value: str

    def __str__(self) -> str:
        return self.value

    def __add__(self, other: RuntimeValue) -> RuntimeValue:
        return _add(self, other)

    def __sub__(self, other: RuntimeValue) -> RuntimeValue:
        return _sub(self, other)


RuntimeValue = Union[NumberValue, StringValue]


@dataclass(frozen=True)
class Function:
    """A user-defined function: its name, parameter nodes and body."""

    id: str
    params: Tuple[Optional[Node], ...]
    body: Optional[Node]


class Environment:
    """A scope of variables, optionally nested in an outer scope."""

    def __init__(self, outer: Optional[Environment] = None) -> None:
        self.outer = outer
        self._variables: List[Tuple[str, Optional[RuntimeValue]]] = []

    def get_variable(self, name: str) -> Optional[RuntimeValue]:
        """Return the value bound to ``name`` here or in an outer scope."""
        for var_name, value in self._variables:
            if var_name == name:
                return value
        if self.outer is not None:
            return self.outer.get_variable(name)
        return None

    def add_variable(self, name: str, value: Optional[RuntimeValue]) -> None:
        """Bind ``name`` in this scope."""
        self._variables.append((name, value))

    def update_variable(self, name: str, value: Optional[RuntimeValue]) -> None:
        """Rebind ``name`` if it is bound in this scope; otherwise do nothing."""
        for i, (var_name, _) in enumerate(self._variables):
            if var_name == name:
                del self._variables[i]
                self._variables.append((name, value))
                return


class JsRuntime:
    """Executes programs, keeping global variables and declared functions."""

    def __init__(self) -> None:
        self.env = Environment()
        self.functions: List[Function] = []

    def execute(self, program: Program) -> None:
        """Evaluate every top-level statement in the global scope."""
        for node in program.body:
            self.eval(node, self.env)

    def eval(self, node: Optional[Node], env: Environment) -> Optional[RuntimeValue]:
        """Evaluate ``node`` in ``env`` and return its value, if any."""
        match node:
            case None:
                return None
            case ExpressionStatement(expression):
                return self.eval(expression, env)
            case AdditiveExpression(operator, left, right):
                left_value = self.eval(left, env)
                if left_value is None:
                    return None
                right_value = self.eval(right, env)
                if right_value is None:
                    return None
                if operator == "+":
                    return left_value + right_value
                if operator == "-":
                    return left_value - right_value
                return None
            case AssignmentExpression(operator, left, right):
                if operator != "=":
                    return None
                if isinstance(left, Identifier):
                    env.update_variable(left.name, self.eval(right, env))
                    return None
                self.eval(left, env)
                return None
            case MemberExpression(obj, prop):
                object_value = self.eval(obj, env)
                if object_value is None:
                    return None
                property_value = self.eval(prop, env)
                if property_value is None:
                    return object_value
                return object_value + StringValue(".") + property_value
            case NumericLiteral(value):
                return NumberValue(value)
            case VariableDeclaration(declarations):
                for declaration in declarations:
                    self.eval(declaration, env)
                return None
            case VariableDeclarator(ident, init):
                if isinstance(ident, Identifier):
                    env.add_variable(ident.name, self.eval(init, env))
                return None
            case Identifier(name):
                value = env.get_variable(name)
                return value if value is not None else StringValue(name)
            case StringLiteral(value):
                return StringValue(value)
            case BlockStatement(body):
                result: Optional[RuntimeValue] = None
                for statement in body:
                    result = self.eval(statement, env)
                return result
            case ReturnStatement(argument):
                return self.eval(argument, env)
            case FunctionDeclaration(ident, params, body):
                name = self.eval(ident, env)
                if isinstance(name, StringValue):
                    self.functions.append(Function(name.value, tuple(params), body))
                return None
            case CallExpression(callee, arguments):
                return self._call(callee, arguments, env)
        raise RuntimeError_(f"unsupported node {node!r}")

    def _call(
        self,
        callee: Optional[Node],
        arguments: Tuple[Optional[Node], ...],
        env: Environment,
    ) -> Optional[RuntimeValue]:
        new_env = Environment(env)
        callee_value = self.eval(callee, new_env)
        if callee_value is None:
            return None

        function: Optional[Function] = None
        for candidate in self.functions:
            if callee_value == StringValue(candidate.id):
                function = candidate
        if function is None:
            raise RuntimeError_(f"function {callee!r} doesn't exist")

        if len(arguments) != len(function.params):
            raise RuntimeError_(
                f"function {function.id!r} takes {len(function.params)} "
                f"arguments but got {len(arguments)}"
            )
        for param, argument in zip(function.params, arguments):
            name = self.eval(param, new_env)
            if isinstance(name, StringValue):
                new_env.add_variable(name.value, self.eval(argument, new_env))
        return self.eval(function.body, new_env)
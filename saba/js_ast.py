"""A recursive-descent parser building an AST for the small JavaScript subset."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from saba.js_token import Token, TokenKind


class ParseError(ValueError):
    """Raised when the token stream does not form a supported program."""


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Optional[Node]


@dataclass(frozen=True)
class AdditiveExpression:
    operator: str
    left: Optional[Node]
    right: Optional[Node]


@dataclass(frozen=True)
class AssignmentExpression:
    operator: str
    left: Optional[Node]
    right: Optional[Node]


@dataclass(frozen=True)
class MemberExpression:
    object: Optional[Node]
    property: Optional[Node]


@dataclass(frozen=True)
class NumericLiteral:
    value: int


@dataclass(frozen=True)
class VariableDeclaration:
    declarations: Tuple[Optional[Node], ...]


@dataclass(frozen=True)
class VariableDeclarator:
    id: Optional[Node]
    init: Optional[Node]


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class BlockStatement:
    body: Tuple[Optional[Node], ...]


@dataclass(frozen=True)
class ReturnStatement:
    argument: Optional[Node]


@dataclass(frozen=True)
class FunctionDeclaration:
    id: Optional[Node]
    params: Tuple[Optional[Node], ...]
    body: Optional[Node]


@dataclass(frozen=True)
class CallExpression:
    callee: Optional[Node]
    arguments: Tuple[Optional[Node], ...]


Node = Union[
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
    """The top-level list of statements of a script."""

    body: List[Node] = field(default_factory=list)


def _is_punct(token: Optional[Token], char: str) -> bool:
    return (
        token is not None
        and token.kind is TokenKind.PUNCTUATOR
        and token.value == char
    )


class JsParser:
    """Parses a stream of tokens into a :class:`Program`."""

    def __init__(self, lexer: Iterable[Token]) -> None:
        self._tokens: Iterator[Token] = iter(lexer)
        self._peeked: Optional[Token] = None
        self._has_peeked = False

    def _peek(self) -> Optional[Token]:
        if not self._has_peeked:
            self._peeked = next(self._tokens, None)
            self._has_peeked = True
        return self._peeked

    def _next(self) -> Optional[Token]:
        if self._has_peeked:
            self._has_peeked = False
            token, self._peeked = self._peeked, None
            return token
        return next(self._tokens, None)

    def parse_ast(self) -> Program:
        """Parse every source element until the tokens run out."""
        body: List[Node] = []
        while (node := self._source_element()) is not None:
            body.append(node)
        return Program(body)

    def _source_element(self) -> Optional[Node]:
        token = self._peek()
        if token is None:
            return None
        if token.kind is TokenKind.KEYWORD and token.value == "function":
            self._next()
            return self._function_declaration()
        return self._statement()

    def _function_declaration(self) -> Node:
        ident = self._identifier()
        params = self._parameter_list()
        return FunctionDeclaration(ident, params, self._function_body())

    def _expect_open(self, char: str, what: str) -> None:
        token = self._next()
        if token is None or token.kind is not TokenKind.PUNCTUATOR:
            raise ParseError(f"function should have {what} but got {token!r}")
        if token.value != char:
            raise ParseError(f"expected {char!r} but got {token.value!r}")

    def _parameter_list(self) -> Tuple[Optional[Node], ...]:
        self._expect_open("(", "`(`")
        params: List[Optional[Node]] = []
        while (token := self._peek()) is not None:
            if token.kind is TokenKind.PUNCTUATOR:
                if token.value == ")":
                    self._next()
                    break
                if token.value != ",":
                    raise ParseError(
                        f"unexpected {token.value!r} in parameter list"
                    )
                self._next()
            else:
                params.append(self._identifier())
        return tuple(params)

    def _function_body(self) -> Node:
        self._expect_open("{", "open curly bracket")
        body: List[Optional[Node]] = []
        while True:
            token = self._peek()
            if token is None:
                raise ParseError("function body is not closed by `}`")
            if _is_punct(token, "}"):
                self._next()
                return BlockStatement(tuple(body))
            body.append(self._source_element())

    def _statement(self) -> Optional[Node]:
        token = self._peek()
        if token is None:
            return None

        node: Optional[Node]
        if token.kind is TokenKind.KEYWORD:
            if token.value == "var":
                self._next()
                node = self._variable_declaration()
            elif token.value == "return":
                self._next()
                node = ReturnStatement(self._assignment_expression())
            else:
                node = None
        else:
            node = ExpressionStatement(self._assignment_expression())

        if _is_punct(self._peek(), ";"):
            self._next()
        return node

    def _assignment_expression(self) -> Optional[Node]:
        expr = self._additive_expression()
        if _is_punct(self._peek(), "="):
            self._next()
            return AssignmentExpression("=", expr, self._assignment_expression())
        return expr

    def _additive_expression(self) -> Optional[Node]:
        left = self._left_hand_side_expression()
        token = self._peek()
        if (
            token is not None
            and token.kind is TokenKind.PUNCTUATOR
            and token.value in ("+", "-")
        ):
            self._next()
            return AdditiveExpression(
                str(token.value), left, self._assignment_expression()
            )
        return left

    def _left_hand_side_expression(self) -> Optional[Node]:
        expr = self._member_expression()
        if _is_punct(self._peek(), "("):
            self._next()
            return CallExpression(expr, self._arguments())
        return expr

    def _arguments(self) -> Tuple[Optional[Node], ...]:
        arguments: List[Optional[Node]] = []
        while (token := self._peek()) is not None:
            if token.kind is TokenKind.PUNCTUATOR:
                if token.value == ")":
                    self._next()
                    break
                if token.value != ",":
                    raise ParseError(f"unexpected {token.value!r} in arguments")
                self._next()
            else:
                arguments.append(self._assignment_expression())
        return tuple(arguments)

    def _member_expression(self) -> Optional[Node]:
        expr = self._primary_expression()
        if _is_punct(self._peek(), "."):
            self._next()
            return MemberExpression(expr, self._identifier())
        return expr

    def _primary_expression(self) -> Optional[Node]:
        token = self._next()
        if token is None:
            return None
        if token.kind is TokenKind.IDENTIFIER:
            return Identifier(str(token.value))
        if token.kind is TokenKind.STRING_LITERAL:
            return StringLiteral(str(token.value))
        if token.kind is TokenKind.NUMBER:
            return NumericLiteral(int(token.value))
        return None

    def _variable_declaration(self) -> Node:
        ident = self._identifier()
        declarator = VariableDeclarator(ident, self._initialiser())
        return VariableDeclaration((declarator,))

    def _identifier(self) -> Optional[Node]:
        token = self._next()
        if token is not None and token.kind is TokenKind.IDENTIFIER:
            return Identifier(str(token.value))
        return None

    def _initialiser(self) -> Optional[Node]:
        token = self._next()
        if _is_punct(token, "="):
            return self._assignment_expression()
        return None
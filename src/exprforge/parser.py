"""Parser for ExprForge expression text.

Converts a stream of tokens into an Expression tree. Uses recursive
descent with operator precedence. Every node is built through
make_expression(), so a successfully parsed tree is already validated
and the canonical rendering of any tree parses back to an equivalent one.

Operator Precedence (lowest to highest):
1. || (or)
2. && (and)
3. == != < <= > >=
4. + -
5. * / %
6. ^
7. ! (not) - (unary)
8. . (member access) [] (index) () (function call)
"""

from typing import Any

from exprforge.expression import Constant, Expression, make_expression
from exprforge.lexer import Lexer, Token, TokenType
from exprforge.registry import FunctionRegistry
from exprforge.types import ExpressionError, ExpressionType


class ParseError(Exception):
    """Error during parsing."""

    def __init__(self, message: str, token: Token):
        self.token = token
        super().__init__(f"{message} at position {token.position}")


_BINARY_LEVELS: list[dict[TokenType, str]] = [
    {TokenType.OR: ExpressionType.OR},
    {TokenType.AND: ExpressionType.AND},
    {
        TokenType.EQ: ExpressionType.EQUAL,
        TokenType.NEQ: ExpressionType.NOT_EQUAL,
        TokenType.LT: ExpressionType.LESS_THAN,
        TokenType.LTE: ExpressionType.LESS_THAN_OR_EQUAL,
        TokenType.GT: ExpressionType.GREATER_THAN,
        TokenType.GTE: ExpressionType.GREATER_THAN_OR_EQUAL,
    },
    {TokenType.PLUS: ExpressionType.ADD, TokenType.MINUS: ExpressionType.SUBTRACT},
    {
        TokenType.MULTIPLY: ExpressionType.MULTIPLY,
        TokenType.DIVIDE: ExpressionType.DIVIDE,
        TokenType.MODULO: ExpressionType.MOD,
    },
    {TokenType.POWER: ExpressionType.POWER},
]


class Parser:
    """Recursive descent parser for expression text.

    Usage:
        parser = Parser("user.age >= 18 && !banned")
        expression = parser.parse()
    """

    def __init__(self, source: str, registry: FunctionRegistry | None = None):
        self.source = source
        self.registry = registry
        self.tokens = Lexer(source).tokenize()
        self.position = 0

    def parse(self) -> Expression:
        """Parse the source and return the root expression."""
        if not self.tokens or self.tokens[0].type == TokenType.EOF:
            raise ParseError("Empty expression", Token(TokenType.EOF, None, 0))

        expression = self._parse_binary(0)

        if not self._is_at_end():
            raise ParseError(
                f"Unexpected token '{self._current().value}'",
                self._current(),
            )

        return expression

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _current(self) -> Token:
        if self.position >= len(self.tokens):
            return Token(TokenType.EOF, None, len(self.source))
        return self.tokens[self.position]

    def _is_at_end(self) -> bool:
        return self._current().type == TokenType.EOF

    def _advance(self) -> Token:
        token = self._current()
        self.position += 1
        return token

    def _match(self, *types: TokenType) -> bool:
        return self._current().type in types

    def _consume(self, token_type: TokenType, message: str) -> Token:
        if self._current().type == token_type:
            return self._advance()
        raise ParseError(message, self._current())

    def _make(self, type: str, token: Token, *children: Expression) -> Expression:
        """Build and validate a node, reporting failures at token."""
        try:
            return make_expression(type, None, *children, registry=self.registry)
        except ExpressionError as e:
            raise ParseError(str(e), token) from e

    # -------------------------------------------------------------------------
    # Parsing methods
    # -------------------------------------------------------------------------

    def _parse_binary(self, level: int) -> Expression:
        """Parse a left-associative binary level, lowest precedence first."""
        if level == len(_BINARY_LEVELS):
            return self._parse_unary()

        operators = _BINARY_LEVELS[level]
        left = self._parse_binary(level + 1)

        while self._current().type in operators:
            op_token = self._advance()
            right = self._parse_binary(level + 1)
            left = self._make(operators[op_token.type], op_token, left, right)

        return left

    def _parse_unary(self) -> Expression:
        """Parse unary expression (!, not, -)."""
        if self._match(TokenType.NOT):
            token = self._advance()
            return self._make(ExpressionType.NOT, token, self._parse_unary())

        if self._match(TokenType.MINUS):
            token = self._advance()
            return self._make(ExpressionType.SUBTRACT, token, self._parse_unary())

        return self._parse_postfix()

    def _parse_postfix(self) -> Expression:
        """Parse postfix expressions (member access, index)."""
        expr = self._parse_primary()

        while True:
            if self._match(TokenType.DOT):
                token = self._advance()
                member = self._consume(
                    TokenType.IDENTIFIER, "Expected identifier after '.'"
                )
                expr = self._make(
                    ExpressionType.ACCESSOR, token, Constant(str(member.value)), expr
                )

            elif self._match(TokenType.LBRACKET):
                token = self._advance()
                index = self._parse_binary(0)
                self._consume(TokenType.RBRACKET, "Expected ']' after index")
                expr = self._make(ExpressionType.ELEMENT, token, expr, index)

            else:
                break

        return expr

    def _parse_primary(self) -> Expression:
        """Parse primary expression (literals, names, calls, groups, arrays)."""
        token = self._current()

        if token.type in (
            TokenType.NUMBER,
            TokenType.STRING,
            TokenType.BOOLEAN,
            TokenType.NULL,
        ):
            self._advance()
            return Constant(token.value)

        if token.type == TokenType.IDENTIFIER:
            self._advance()
            if self._match(TokenType.LPAREN):
                return self._parse_function_call(token)
            return self._make(ExpressionType.ACCESSOR, token, Constant(str(token.value)))

        if token.type == TokenType.LPAREN:
            self._advance()
            expr = self._parse_binary(0)
            self._consume(TokenType.RPAREN, "Expected ')' after expression")
            return expr

        if token.type == TokenType.LBRACKET:
            self._advance()
            elements = self._parse_arguments(TokenType.RBRACKET, "array elements")
            return self._make(ExpressionType.ARRAY, token, *elements)

        raise ParseError(f"Unexpected token '{token.value}'", token)

    def _parse_function_call(self, name: Token) -> Expression:
        """Parse a function call (arguments in parentheses)."""
        self._consume(TokenType.LPAREN, "Expected '(' after function name")
        arguments = self._parse_arguments(TokenType.RPAREN, "arguments")
        return self._make(str(name.value), name, *arguments)

    def _parse_arguments(self, closing: TokenType, what: str) -> list[Expression]:
        """Parse a comma separated list up to and including the closing token."""
        arguments: list[Expression] = []

        if not self._match(closing):
            arguments.append(self._parse_binary(0))

            while self._match(TokenType.COMMA):
                self._advance()
                arguments.append(self._parse_binary(0))

        closing_text = "]" if closing == TokenType.RBRACKET else ")"
        self._consume(closing, f"Expected '{closing_text}' after {what}")
        return arguments


def parse(source: str, registry: FunctionRegistry | None = None) -> Expression:
    """Convenience function to parse expression text.

    Args:
        source: The expression text
        registry: Registry to resolve function names against; defaults to
            the process-wide registry

    Returns:
        The validated root expression
    """
    return Parser(source, registry).parse()


def evaluate(
    source: str,
    state: Any = None,
    registry: FunctionRegistry | None = None,
) -> tuple[Any, str | None]:
    """Parse expression text and evaluate it against a state object.

    Parse failures raise; evaluation failures are returned as the error.

    Example:
        value, error = evaluate("count > 0 && enabled", {"count": 5, "enabled": True})
        # value = True, error = None
    """
    return parse(source, registry).try_evaluate(state)

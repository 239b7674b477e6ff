"""
Expression Parser - Recursive descent evaluator for arithmetic.

The parser pulls tokens from the lexer one at a time and computes the
value while it parses; no syntax tree is built.
"""

import math

from rdcalc.errors import (
    ArithmeticOverflow,
    DivisionByZero,
    InvalidExpression,
    InvalidNumber,
    MissingClosingParenthesis,
    NestingTooDeep,
    UnexpectedEndOfInput,
)
from rdcalc.lexer import ExpressionLexer, Token, TokenType

# Each level of parentheses costs three stack frames
MAX_NESTING_DEPTH = 100


class ExpressionParser:
    """
    Recursive descent parser that evaluates as it goes.

    Grammar:
        expression := term (('+' | '-') term)*
        term       := factor (('*' | '/') factor)*
        factor     := NUMBER | '(' expression ')'

    All operators are left-associative. Precedence comes from the
    nesting of the three rules. Parentheses may nest at most
    MAX_NESTING_DEPTH levels, and every intermediate result must be a
    finite float.
    """

    def __init__(self, source: "str | ExpressionLexer"):
        if isinstance(source, ExpressionLexer):
            self.lexer = source
        else:
            self.lexer = ExpressionLexer(source)
        self._lookahead: Token
        self._depth = 0
        self._used = False

    def _current_token(self) -> Token:
        """Get the lookahead token."""
        return self._lookahead

    def _advance(self) -> Token:
        """Consume the lookahead and pull the next token from the lexer."""
        token = self._current_token()
        self._lookahead = self.lexer.next_token()
        return token

    def _match(self, *token_types: TokenType) -> bool:
        """Check if the lookahead matches any of the given types."""
        return self._current_token().type in token_types

    def parse(self) -> float:
        """Evaluate the whole input and return its value."""
        if self._used:
            raise RuntimeError("ExpressionParser instances are single-use")
        self._used = True

        self._lookahead = self.lexer.next_token()
        result = self._parse_expression()

        if not self._match(TokenType.EOF):
            token = self._current_token()
            raise InvalidExpression(
                f"unexpected {token.value!r} after end of expression", token.position
            )

        return result

    def _parse_expression(self) -> float:
        """Parse expression: term ((+|-) term)*"""
        result = self._parse_term()

        while self._match(TokenType.PLUS, TokenType.MINUS):
            op = self._advance()
            right = self._parse_term()
            if op.type is TokenType.PLUS:
                result += right
            else:
                result -= right
            self._check_finite(result, op)

        return result

    def _parse_term(self) -> float:
        """Parse term: factor ((*|/) factor)*"""
        result = self._parse_factor()

        while self._match(TokenType.STAR, TokenType.SLASH):
            op = self._advance()
            right = self._parse_factor()
            if op.type is TokenType.STAR:
                result *= right
            else:
                if right == 0:
                    raise DivisionByZero(position=op.position)
                result /= right
            self._check_finite(result, op)

        return result

    def _parse_factor(self) -> float:
        """Parse factor: NUMBER | (expression)"""
        token = self._current_token()

        if self._match(TokenType.NUMBER):
            value = self._to_float(token)
            self._advance()
            return value

        if self._match(TokenType.LPAREN):
            if self._depth >= MAX_NESTING_DEPTH:
                raise NestingTooDeep(position=token.position)
            self._advance()
            self._depth += 1
            result = self._parse_expression()
            self._depth -= 1
            if not self._match(TokenType.RPAREN):
                raise MissingClosingParenthesis(
                    position=self._current_token().position
                )
            self._advance()
            return result

        if self._match(TokenType.EOF):
            raise UnexpectedEndOfInput(position=token.position)

        raise InvalidExpression(f"unexpected {token.value!r}", token.position)

    @staticmethod
    def _check_finite(value: float, op: Token) -> None:
        if not math.isfinite(value):
            raise ArithmeticOverflow(
                f"result of {op.value!r} out of range", op.position
            )

    @staticmethod
    def _to_float(token: Token) -> float:
        try:
            value = float(token.value)
        except ValueError:
            raise InvalidNumber(token.value, token.position) from None
        # float() saturates to inf on out-of-range text
        if math.isinf(value):
            raise InvalidNumber(token.value, token.position)
        return value

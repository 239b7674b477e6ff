"""
Error types raised while evaluating an expression.

Every failure is terminal for the evaluation that raised it. The
exceptions travel unchanged from the point of detection up to the
caller of ``evaluate``.
"""


class CalcError(Exception):
    """Base class for lexer and parser errors."""

    kind = "CalcError"
    default_message = "calculation error"

    def __init__(self, message: str | None = None, position: int | None = None):
        self.message = message or self.default_message
        self.position = position
        if position is not None:
            super().__init__(f"{self.message} at position {position}")
        else:
            super().__init__(self.message)

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.kind = cls.__name__


class InvalidCharacter(CalcError):
    """A character that is not a digit, '.', operator, parenthesis or whitespace."""

    default_message = "invalid character"

    def __init__(self, char: str, position: int):
        self.char = char
        super().__init__(f"{self.default_message} {char!r}", position)


class InvalidNumber(CalcError):
    """Numeric literal text that float() rejects or that overflows."""

    default_message = "invalid number"

    def __init__(self, text: str, position: int | None = None):
        self.text = text
        super().__init__(f"{self.default_message} {text!r}", position)


class DivisionByZero(CalcError):
    default_message = "division by zero"


class MissingClosingParenthesis(CalcError):
    default_message = "missing closing parenthesis"


class UnexpectedEndOfInput(CalcError):
    default_message = "unexpected end of expression"


class InvalidExpression(CalcError):
    """A token where no grammar alternative accepts it, or trailing input."""

    default_message = "invalid expression"


class NestingTooDeep(InvalidExpression):
    """Parentheses nested beyond the parser's depth limit."""

    default_message = "parentheses nested too deeply"


class ArithmeticOverflow(CalcError):
    """An operation whose result is not a finite float."""

    default_message = "result out of range"


__all__ = [
    "CalcError",
    "InvalidCharacter",
    "InvalidNumber",
    "DivisionByZero",
    "MissingClosingParenthesis",
    "UnexpectedEndOfInput",
    "InvalidExpression",
    "NestingTooDeep",
    "ArithmeticOverflow",
]

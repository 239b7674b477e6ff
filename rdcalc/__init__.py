"""
rdcalc - A recursive descent arithmetic evaluator.

This package turns infix expressions made of decimal numbers, the
operators + - * / and parentheses into a float.

Usage:
    from rdcalc import evaluate, evaluate_series

    evaluate("3 + 5 * (2 - 8)")            # -27.0
    evaluate_series(["1 + 1", "1 / 0"])    # DataFrame of results/errors
"""

from rdcalc.errors import (
    CalcError,
    DivisionByZero,
    InvalidCharacter,
    InvalidExpression,
    InvalidNumber,
    MissingClosingParenthesis,
    UnexpectedEndOfInput,
    NestingTooDeep,
    ArithmeticOverflow,
)


# Lazy imports keep pandas out of `import rdcalc.lexer`
def __getattr__(name: str):
    if name == "evaluate":
        from rdcalc.executors import evaluate
        return evaluate
    if name == "ExpressionExecutor":
        from rdcalc.executors import ExpressionExecutor
        return ExpressionExecutor
    if name == "evaluate_series":
        from rdcalc.executors import evaluate_series
        return evaluate_series
    if name == "evaluate_frame":
        from rdcalc.executors import evaluate_frame
        return evaluate_frame
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "evaluate",
    "ExpressionExecutor",
    "evaluate_series",
    "evaluate_frame",
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

__version__ = "0.1.0"

"""
Expression Executors - Entry points for evaluating expressions.

This module provides ``evaluate`` for a single expression string and
batch helpers that evaluate a column of expressions into pandas
objects. Every evaluation gets its own lexer and parser, so nothing
carries over between calls.
"""

import logging
from typing import Any, Iterable

import numpy as np
import pandas as pd

from rdcalc.errors import CalcError, InvalidExpression
from rdcalc.parser.expression_parser import ExpressionParser

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ["expression", "result", "error", "message"]


def evaluate(expression: str) -> float:
    """
    Evaluate an arithmetic expression.

    Args:
        expression: Text such as ``"3 + 5 * (2 - 8)"``

    Returns:
        The value as a float

    Raises:
        CalcError: The subclass describing the first problem found
    """
    return ExpressionExecutor(expression).execute()


class ExpressionExecutor:
    """
    Executor for a single expression string.

    Usage:
        executor = ExpressionExecutor("10 / 2 / 5")
        result = executor.execute()
    """

    def __init__(self, expression: str):
        self.expression = expression

    def execute(self) -> float:
        """
        Parse and evaluate the expression.

        Returns:
            The resulting float
        """
        try:
            result = ExpressionParser(self.expression).parse()
        except CalcError as e:
            logger.debug("evaluate %r failed: %s (%s)", self.expression, e.kind, e)
            raise
        logger.debug("evaluate %r = %r", self.expression, result)
        return result

    def validate(self) -> CalcError | None:
        """Return the error the expression would raise, or None if it is valid."""
        try:
            self.execute()
        except CalcError as e:
            return e
        return None


def _evaluate_row(expression: Any, raise_errors: bool) -> tuple[float, str | None, str | None]:
    """Evaluate one batch entry into (result, error kind, message)."""
    if not isinstance(expression, str):
        error: CalcError = InvalidExpression(f"not an expression: {expression!r}")
        if raise_errors:
            raise error
        return np.nan, error.kind, str(error)

    try:
        return evaluate(expression), None, None
    except CalcError as e:
        if raise_errors:
            raise
        return np.nan, e.kind, str(e)


def evaluate_series(
    expressions: "pd.Series | Iterable[Any]",
    raise_errors: bool = False,
) -> pd.DataFrame:
    """
    Evaluate many expressions independently.

    Args:
        expressions: A Series or any iterable of expression strings
        raise_errors: Propagate the first failure instead of recording it

    Returns:
        DataFrame with columns expression, result, error and message.
        Failed rows have a NaN result; the index of an input Series is kept.
    """
    if isinstance(expressions, pd.Series):
        series = expressions
    else:
        series = pd.Series(list(expressions), dtype=object)

    rows = [_evaluate_row(expr, raise_errors) for expr in series]

    result = pd.DataFrame(
        {
            "expression": series.to_numpy(dtype=object),
            "result": np.array([row[0] for row in rows], dtype=np.float64),
            "error": np.array([row[1] for row in rows], dtype=object),
            "message": np.array([row[2] for row in rows], dtype=object),
        },
        index=series.index,
        columns=RESULT_COLUMNS,
    )

    failed = int(result["error"].notna().sum())
    logger.debug("evaluated %d expressions, %d failed", len(result), failed)
    return result


def evaluate_frame(
    df: pd.DataFrame,
    column: str,
    target: str = "result",
    error_column: str | None = None,
) -> pd.DataFrame:
    """
    Evaluate a column of expressions and store the values in another column.

    Args:
        df: Source DataFrame, left unmodified
        column: Column holding expression strings
        target: Column receiving the results (NaN on failure)
        error_column: Optional column receiving the error kind per row

    Returns:
        A copy of df with the new column(s)
    """
    if column not in df.columns:
        raise KeyError(f"Column not found: {column}")

    result = df.copy()
    if result.empty:
        return result

    evaluated = evaluate_series(result[column])
    result[target] = evaluated["result"].to_numpy()
    if error_column is not None:
        result[error_column] = evaluated["error"].to_numpy()

    return result

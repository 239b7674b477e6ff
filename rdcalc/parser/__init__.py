"""
Parser module for arithmetic expressions.

This module provides the recursive descent parser that evaluates a
token stream into a float.
"""

from .expression_parser import MAX_NESTING_DEPTH, ExpressionParser

__all__ = [
    "ExpressionParser",
    "MAX_NESTING_DEPTH",
]

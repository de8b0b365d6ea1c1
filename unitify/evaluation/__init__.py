"""Expression tokenizing and evaluation."""

from .tokenizer import ExpressionTokens, tokenize_line
from .evaluator import (
    ExpressionEvaluator,
    evaluate,
    evaluate_line,
    PRECEDENCE,
    INVALID_PRECEDENCE,
)

__all__ = [
    'ExpressionTokens',
    'tokenize_line',
    'ExpressionEvaluator',
    'evaluate',
    'evaluate_line',
    'PRECEDENCE',
    'INVALID_PRECEDENCE',
]

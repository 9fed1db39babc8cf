"""核心模块 - Token系统、表达式求值器、密码检查和文本计数"""
from .errors import ExpressionError, MalformedExpressionError, InvalidCharacterError
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, OPERATOR_NAMES,
    ExpressionValidator, tokenize
)
from .operators import Operators
from .expression_evaluator import ExpressionEvaluator, evaluate, results_match
from .password_checker import PasswordStrengthChecker, PasswordReport, is_strong
from .text_counter import TextCounter, count_digits, count_words
from .string_processor import StringProcessor

__all__ = [
    'ExpressionError', 'MalformedExpressionError', 'InvalidCharacterError',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_NAMES',
    'ExpressionValidator', 'tokenize', 'Operators',
    'ExpressionEvaluator', 'evaluate', 'results_match',
    'PasswordStrengthChecker', 'PasswordReport', 'is_strong',
    'TextCounter', 'count_digits', 'count_words',
    'StringProcessor'
]

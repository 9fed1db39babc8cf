"""字符串处理门面 - 统一调用密码检查、计数与表达式求值"""
from core.expression_evaluator import ExpressionEvaluator
from core.password_checker import PasswordStrengthChecker
from core.text_counter import TextCounter


class StringProcessor:

    def __init__(self, min_password_length=None):
        self.min_password_length = min_password_length

    def is_strong_password(self, password):
        return PasswordStrengthChecker.is_strong(password, self.min_password_length)

    def calculate_digits(self, sentence):
        return TextCounter.count_digits(sentence)

    def calculate_words(self, sentence):
        return TextCounter.count_words(sentence)

    def calculate_expression(self, expression):
        return ExpressionEvaluator.evaluate(expression)

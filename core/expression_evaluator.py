"""中缀表达式求值器 - 双栈（操作数栈 / 运算符栈）单趟扫描"""
import math
import logging

from config.config import EXPRESSION_CONFIG
from core.errors import MalformedExpressionError
from core.operators import Operators
from core.token_system import TokenType, ExpressionValidator, tokenize

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """评估 + - * / 与括号组成的中缀表达式"""

    @staticmethod
    def has_precedence(incoming, top):
        """
        栈顶运算符是否应在 incoming 入栈前先归约。
        栈顶是括号时不跨括号归约；只有 incoming 为 * / 且栈顶为 + - 时不归约，
        同优先级左结合。
        """
        if top.type in (TokenType.LPAREN, TokenType.RPAREN):
            return False
        return incoming.precedence <= top.precedence

    @staticmethod
    def _reduce(values, ops, expression):
        """弹出一个运算符和两个操作数，结果压回操作数栈"""
        op = ops.pop()
        if len(values) < 2:
            raise MalformedExpressionError(
                f"Insufficient operands for {op.name!r}", expression, op.position
            )
        operand2 = values.pop()
        operand1 = values.pop()
        values.append(Operators.apply(op.name, operand1, operand2))

    @staticmethod
    def evaluate(expression):
        """
        评估中缀表达式
        Args:
            expression: 表达式字符串，如 "100 * ( 2 + 12 ) / 14"
        Returns:
            float 结果；除以0按IEEE-754返回 inf / nan
        Raises:
            MalformedExpressionError: 结构错误
            InvalidCharacterError: 非法字符
        """
        if expression is None:
            raise MalformedExpressionError("Empty expression")
        max_length = EXPRESSION_CONFIG['max_length']
        if max_length and len(expression) > max_length:
            raise MalformedExpressionError(
                f"Expression longer than {max_length} characters", expression
            )

        values = []  # 操作数栈
        ops = []  # 运算符栈
        last_token = None
        depth = 0

        for token in tokenize(expression):
            ExpressionValidator.check_next(last_token, token, depth, expression)

            if token.type == TokenType.NUMBER:
                values.append(token.value)

            elif token.type == TokenType.OPERATOR:
                while ops and ExpressionEvaluator.has_precedence(token, ops[-1]):
                    ExpressionEvaluator._reduce(values, ops, expression)
                ops.append(token)

            elif token.type == TokenType.LPAREN:
                ops.append(token)
                depth += 1

            elif token.type == TokenType.RPAREN:
                while ops[-1].type != TokenType.LPAREN:
                    ExpressionEvaluator._reduce(values, ops, expression)
                ops.pop()  # 丢弃 '('
                depth -= 1

            last_token = token

        ExpressionValidator.check_end(last_token, depth, expression)

        # 处理剩余运算符
        while ops:
            ExpressionEvaluator._reduce(values, ops, expression)

        if len(values) != 1:
            raise MalformedExpressionError(
                f"Stack has {len(values)} values after evaluation, expected 1", expression
            )
        result = values[0]
        logger.debug(f"Evaluated {expression!r} = {result!r}")
        return result


def evaluate(expression):
    return ExpressionEvaluator.evaluate(expression)


def results_match(a, b, tolerance=None):
    """比较两个求值结果；两个 NaN 视为相等"""
    if tolerance is None:
        tolerance = EXPRESSION_CONFIG['tolerance']
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    if math.isinf(a) or math.isinf(b):
        return a == b
    return math.isclose(a, b, rel_tol=tolerance, abs_tol=tolerance)

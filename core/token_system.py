"""core/token_system.py"""
from enum import Enum

from core.errors import MalformedExpressionError, InvalidCharacterError


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    OPERATOR = "operator"  # + - * /
    LPAREN = "lparen"  # (
    RPAREN = "rparen"  # )


class Token:
    def __init__(self, token_type, name, value=None, precedence=0, position=None):
        self.type = token_type
        self.name = name
        self.value = value
        self.precedence = precedence  # 仅对运算符有意义
        self.position = position

    def at(self, position):
        """返回位于指定位置的同名Token副本"""
        return Token(self.type, self.name, self.value, self.precedence, position)

    def __repr__(self):
        return f"Token({self.type.value}, {self.name!r}, pos={self.position})"


# Token定义字典（数字字面量在扫描时动态生成）
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, '+', precedence=1),
    '-': Token(TokenType.OPERATOR, '-', precedence=1),
    '*': Token(TokenType.OPERATOR, '*', precedence=2),
    '/': Token(TokenType.OPERATOR, '/', precedence=2),
    '(': Token(TokenType.LPAREN, '('),
    ')': Token(TokenType.RPAREN, ')'),
}

OPERATOR_NAMES = [name for name, tk in TOKEN_DEFINITIONS.items() if tk.type == TokenType.OPERATOR]
NUMBER_CHARS = frozenset('0123456789.')
SKIP_CHARS = frozenset(' ')


def _scan_number(expression, start):
    """从start开始贪婪读取数字和小数点，返回(Token, 结束位置)"""
    end = start
    while end < len(expression) and expression[end] in NUMBER_CHARS:
        end += 1
    literal = expression[start:end]
    try:
        value = float(literal)
    except ValueError:
        raise MalformedExpressionError(
            f"Invalid numeric literal {literal!r}", expression, start
        ) from None
    return Token(TokenType.NUMBER, literal, value=value, position=start), end


def tokenize(expression):
    """
    从左到右扫描表达式，逐个产出Token（生成器，单趟）。
    空格跳过；字母表之外的字符抛出 InvalidCharacterError。
    """
    i = 0
    while i < len(expression):
        c = expression[i]
        if c in SKIP_CHARS:
            i += 1
            continue
        if c in NUMBER_CHARS:
            token, i = _scan_number(expression, i)
            yield token
            continue
        if c in TOKEN_DEFINITIONS:
            yield TOKEN_DEFINITIONS[c].at(i)
            i += 1
            continue
        raise InvalidCharacterError(c, expression, i)


class ExpressionValidator:
    """表达式结构校验：不做算术，只检查Token序列是否合法"""

    @staticmethod
    def expects_operand(last_token):
        """上一个Token之后是否需要操作数（开头、运算符、左括号之后）"""
        return last_token is None or last_token.type in (TokenType.OPERATOR, TokenType.LPAREN)

    @staticmethod
    def get_valid_next_tokens(token_sequence, depth=None):
        """返回当前状态下所有合法的下一个Token名称"""
        last_token = token_sequence[-1] if token_sequence else None
        if depth is None:
            depth = ExpressionValidator.calculate_paren_depth(token_sequence)

        if ExpressionValidator.expects_operand(last_token):
            return ['number', '(']

        valid_tokens = list(OPERATOR_NAMES)
        if depth > 0:
            valid_tokens.append(')')
        else:
            valid_tokens.append('END')
        return valid_tokens

    @staticmethod
    def calculate_paren_depth(token_sequence):
        """计算未闭合的左括号数量"""
        depth = 0
        for tk in token_sequence:
            if tk.type == TokenType.LPAREN:
                depth += 1
            elif tk.type == TokenType.RPAREN:
                depth -= 1
        return depth

    @staticmethod
    def check_next(last_token, token, depth, expression=None):
        """
        检查 token 能否跟在 last_token 之后，不合法时抛出 MalformedExpressionError。
        Args:
            last_token: 上一个Token（开头为None）
            token: 当前Token
            depth: 读入当前Token之前的括号深度
            expression: 原始表达式（用于错误信息）
        """
        if ExpressionValidator.expects_operand(last_token):
            ok = token.type in (TokenType.NUMBER, TokenType.LPAREN)
        else:
            ok = token.type == TokenType.OPERATOR or (token.type == TokenType.RPAREN and depth > 0)
        if ok:
            return

        if token.type == TokenType.RPAREN and depth == 0:
            raise MalformedExpressionError("Unmatched ')'", expression, token.position)
        expected = ExpressionValidator._describe_expected(last_token, depth)
        raise MalformedExpressionError(
            f"Unexpected {token.name!r}; expected {expected}", expression, token.position
        )

    @staticmethod
    def check_end(last_token, depth, expression=None):
        """检查表达式能否在此结束"""
        if last_token is None:
            raise MalformedExpressionError("Empty expression", expression)
        if ExpressionValidator.expects_operand(last_token):
            raise MalformedExpressionError(
                f"Expression ends with {last_token.name!r}", expression, last_token.position
            )
        if depth > 0:
            raise MalformedExpressionError(f"{depth} unclosed '('", expression)

    @staticmethod
    def _describe_expected(last_token, depth):
        names = ExpressionValidator.get_valid_next_tokens(
            [last_token] if last_token is not None else [], depth
        )
        return "one of: " + ", ".join(names)

    @staticmethod
    def validate_tokens(token_sequence, expression=None):
        """完整校验一个Token序列"""
        last_token = None
        depth = 0
        for tk in token_sequence:
            ExpressionValidator.check_next(last_token, tk, depth, expression)
            if tk.type == TokenType.LPAREN:
                depth += 1
            elif tk.type == TokenType.RPAREN:
                depth -= 1
            last_token = tk
        ExpressionValidator.check_end(last_token, depth, expression)

    @staticmethod
    def is_valid_expression(expression):
        """表达式在结构上是否合法（不求值）"""
        if expression is None:
            return False
        try:
            ExpressionValidator.validate_tokens(tokenize(expression), expression)
        except (MalformedExpressionError, InvalidCharacterError):
            return False
        return True

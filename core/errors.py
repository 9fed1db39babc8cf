"""core/errors.py - 表达式求值错误类型"""


class ExpressionError(ValueError):
    """表达式错误基类"""

    def __init__(self, message, expression=None, position=None):
        self.message = message
        self.expression = expression
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self):
        if self.position is not None:
            return f"{self.message} (at position {self.position})"
        return self.message


class MalformedExpressionError(ExpressionError):
    """
    表达式结构错误:
    - 空表达式
    - 括号不匹配
    - 连续运算符 / 以运算符开头或结尾
    - 非法数字字面量（如 1.2.3）
    - 归约时操作数栈下溢
    """
    pass


class InvalidCharacterError(ExpressionError):
    """出现字母表之外的字符"""

    def __init__(self, character, expression=None, position=None):
        self.character = character
        super().__init__(f"Invalid character {character!r}", expression, position)

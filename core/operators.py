"""core/operators.py"""
import numpy as np
import logging

logger = logging.getLogger(__name__)


class Operators:
    """所有二元算术操作符的静态方法集合（IEEE-754 双精度）"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore'):
            return float(np.float64(operand1) + np.float64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore'):
            return float(np.float64(operand1) - np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore'):
            return float(np.float64(operand1) * np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """
        除法操作符：除以0按浮点规则返回 inf / -inf / nan，不抛异常
        """
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return float(np.true_divide(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def apply(op_name, operand1, operand2):
        """按运算符符号调用对应方法，operand1 为左操作数"""
        op_method = OPERATOR_METHODS.get(op_name)
        if op_method is None:
            raise ValueError(f"Unknown binary operator: {op_name}")
        result = op_method(operand1, operand2)
        logger.debug(f"{operand1!r} {op_name} {operand2!r} = {result!r}")
        return result


OPERATOR_METHODS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
}

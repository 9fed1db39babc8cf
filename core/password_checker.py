"""core/password_checker.py - 密码强度检查"""
from dataclasses import dataclass

from config.config import PASSWORD_CONFIG

# ASCII 字符分类
UPPERCASE = frozenset('ABCDEFGHIJKLMNOPQRSTUVWXYZ')
LOWERCASE = frozenset('abcdefghijklmnopqrstuvwxyz')
DIGITS = frozenset('0123456789')


@dataclass(frozen=True)
class PasswordReport:
    length_ok: bool
    has_upper: bool
    has_lower: bool
    has_digit: bool
    has_special: bool

    @property
    def is_strong(self):
        return (self.length_ok and self.has_upper and self.has_lower
                and self.has_digit and self.has_special)

    def missing_requirements(self):
        """返回未满足的要求名称列表"""
        checks = [
            ('min_length', self.length_ok),
            ('uppercase', self.has_upper),
            ('lowercase', self.has_lower),
            ('digit', self.has_digit),
            ('special', self.has_special),
        ]
        return [name for name, ok in checks if not ok]


class PasswordStrengthChecker:

    @staticmethod
    def check(password, min_length=None):
        """
        逐字符分类（大写 -> 小写 -> 数字 -> 非字母数字即特殊字符），扫描全部字符。
        None 视为空密码。
        """
        if min_length is None:
            min_length = PASSWORD_CONFIG['min_length']
        password = password or ''

        has_upper = has_lower = has_digit = has_special = False
        for c in password:
            if c in UPPERCASE:
                has_upper = True
            elif c in LOWERCASE:
                has_lower = True
            elif c in DIGITS:
                has_digit = True
            else:
                has_special = True

        return PasswordReport(
            length_ok=len(password) >= min_length,
            has_upper=has_upper,
            has_lower=has_lower,
            has_digit=has_digit,
            has_special=has_special,
        )

    @staticmethod
    def is_strong(password, min_length=None):
        return PasswordStrengthChecker.check(password, min_length).is_strong


def is_strong(password):
    return PasswordStrengthChecker.is_strong(password)

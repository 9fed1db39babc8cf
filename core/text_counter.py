"""core/text_counter.py - 数字与单词计数"""
import re

from core.password_checker import DIGITS

# ASCII 空白分隔的非空片段
_WORD = re.compile(r'[^ \t\n\r\f\v]+')


class TextCounter:

    @staticmethod
    def count_digits(text):
        """统计 0-9 字符个数"""
        if not text:
            return 0
        return sum(1 for c in text if c in DIGITS)

    @staticmethod
    def count_words(text):
        """统计以空白分隔的单词数；None 或空白字符串返回0"""
        if not text:
            return 0
        return len(_WORD.findall(text))

    @staticmethod
    def text_statistics(text):
        return {
            'digits': TextCounter.count_digits(text),
            'words': TextCounter.count_words(text),
        }


def count_digits(text):
    return TextCounter.count_digits(text)


def count_words(text):
    return TextCounter.count_words(text)

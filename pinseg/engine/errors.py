"""
切分器异常
"""

from typing import Optional


class SegmenterError(ValueError):
    """切分器异常基类"""


class MissingInputError(SegmenterError):
    """输入为空或只有空白字符"""

    def __init__(self, message: str = "pinyin string is empty"):
        super().__init__(message)


class InvalidInputError(SegmenterError):
    """输入中包含字母和撇号以外的字符"""

    def __init__(self, text: str, char: Optional[str] = None):
        self.text = text
        self.char = char
        message = "not a valid pinyin string"
        if char is not None:
            message = f"{message}: unexpected character {char!r}"
        super().__init__(message)

"""
pinseg - 拼音音节切分器

按声母 / 韵母表做最长匹配，把不带声调的拼音串切成音节
"""

__version__ = "0.1.0"

from pinseg.engine import (
    PinyinSegmenter,
    SegmentResult,
    CharKind,
    ClassificationEntry,
    split_pinyin,
    SegmenterConfig,
    SegmenterError,
    MissingInputError,
    InvalidInputError,
    is_initial,
    is_vowel,
)

__all__ = [
    "__version__",
    # 切分
    "PinyinSegmenter",
    "SegmentResult",
    "CharKind",
    "ClassificationEntry",
    "split_pinyin",
    "SegmenterConfig",
    # 异常
    "SegmenterError",
    "MissingInputError",
    "InvalidInputError",
    # 符号表
    "is_initial",
    "is_vowel",
]

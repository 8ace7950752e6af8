from .config import SegmenterConfig, ServerConfig, DEFAULT_CONFIG
from .errors import SegmenterError, MissingInputError, InvalidInputError
from .tables import INITIALS, VOWELS, is_initial, is_vowel
from .segmenter import (
    PinyinSegmenter,
    SegmentResult,
    CharKind,
    ClassificationEntry,
    split_pinyin,
)
from .logging import setup_logging, get_logger, get_api_logger, get_engine_logger

__all__ = [
    # 切分
    'PinyinSegmenter',
    'SegmentResult',
    'CharKind',
    'ClassificationEntry',
    'split_pinyin',
    # 符号表
    'INITIALS',
    'VOWELS',
    'is_initial',
    'is_vowel',
    # 配置
    'SegmenterConfig',
    'ServerConfig',
    'DEFAULT_CONFIG',
    # 异常
    'SegmenterError',
    'MissingInputError',
    'InvalidInputError',
    # 日志
    'setup_logging',
    'get_logger',
    'get_api_logger',
    'get_engine_logger',
]

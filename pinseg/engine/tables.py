"""
声母 / 韵母符号表

两张固定的表，进程内只读。查询为精确匹配（非前缀），大小写敏感。
"""

from typing import FrozenSet, Tuple

# 声母表
INITIALS: Tuple[str, ...] = (
    'b', 'p', 'm', 'f', 'd', 't', 'n', 'l', 'g', 'k', 'h', 'j', 'q', 'x',
    'zh', 'ch', 'sh', 'r', 'z', 'c', 's', 'y', 'w',
)

# 韵母表
VOWELS: Tuple[str, ...] = (
    # 单韵母
    'a', 'e', 'i', 'o', 'u', 'v',
    # 复韵母
    'ai', 'ei', 'ui', 'ao', 'ou', 'iu', 'ie', 'ue', 'er',
    # 前鼻韵母
    'an', 'en', 'in', 'un', 'vn',
    # 后鼻韵母
    'ang', 'eng', 'ing', 'ong',
)

_INITIAL_SET: FrozenSet[str] = frozenset(INITIALS)
_VOWEL_SET: FrozenSet[str] = frozenset(VOWELS)

MAX_SYMBOL_LENGTH = max(len(s) for s in INITIALS + VOWELS)


def is_initial(s: str) -> bool:
    """是否为声母"""
    return s in _INITIAL_SET


def is_vowel(s: str) -> bool:
    """是否为韵母"""
    return s in _VOWEL_SET

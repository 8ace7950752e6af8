"""
拼音切分模块

功能：
1. 将不带声调的连续拼音字符串切分为音节
2. 按位置做最长匹配，把每个位置归类为声母或韵母
3. 声母与其后最多两个韵母合并为一个音节，纯韵母逐个输出

撇号（' 或 ’）可作为显式分隔符，只影响分类扫描的范围。
"""

import re
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .config import SegmenterConfig, DEFAULT_CONFIG
from .errors import MissingInputError, InvalidInputError
from .logging import get_engine_logger, log_execution_time
from .tables import MAX_SYMBOL_LENGTH, is_initial, is_vowel

logger = get_engine_logger()

APOSTROPHES = ("'", "’")

_NOT_PINYIN = re.compile(r"[^a-zA-Z'’]")
_SEPARATOR = re.compile(r"['’]")


class CharKind(Enum):
    """字符串的类型"""
    INITIAL = "initial"   # 声母
    VOWEL = "vowel"       # 韵母


@dataclass(frozen=True)
class ClassificationEntry:
    """分类表中某个位置的匹配结果"""
    kind: CharKind
    text: str

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass
class SegmentResult:
    """切分结果"""
    raw_pinyin: str
    tokens: List[str] = field(default_factory=list)
    elapsed_ms: float = 0.0

    def __str__(self):
        return "/".join(self.tokens)


class PinyinSegmenter:
    """拼音切分器"""

    def __init__(self, phonetic: str, config: Optional[SegmenterConfig] = None):
        """
        初始化切分器

        Args:
            phonetic: 拼音字符串，只允许 ASCII 字母和撇号
            config: 切分配置，默认 DEFAULT_CONFIG

        Raises:
            MissingInputError: 输入为空或只有空白
            InvalidInputError: 含有非法字符
        """
        if phonetic is None or not phonetic.strip():
            logger.debug("拒绝空输入")
            raise MissingInputError()

        bad = _NOT_PINYIN.search(phonetic)
        if bad:
            logger.debug(f"拒绝非法输入: {phonetic!r}, 字符={bad.group()!r}")
            raise InvalidInputError(phonetic, bad.group())

        self._phonetic = phonetic
        self.config = config or DEFAULT_CONFIG

    @property
    def phonetic(self) -> str:
        """构造时传入的原始拼音字符串"""
        return self._phonetic

    def fragments(self) -> List[str]:
        """按撇号拆分后的非空片段"""
        text = self._phonetic.lower() if self.config.normalize_case else self._phonetic
        return [s for s in _SEPARATOR.split(text) if s]

    def classify(self) -> Dict[int, ClassificationEntry]:
        """
        构建位置分类表

        每个片段内，从每个位置出发按长度递增枚举子串，命中声母或韵母就覆盖
        该位置的记录，所以最终保留最长的匹配；等长时韵母后判定，韵母优先。
        偏移量跨片段累加。

        Returns:
            偏移量 -> ClassificationEntry，无任何匹配的位置不出现
        """
        entries: Dict[int, ClassificationEntry] = {}
        offset = 0

        for fragment in self.fragments():
            length = len(fragment)
            for i in range(length):
                current = offset + i
                # 超过最长表项的子串不可能命中
                for end in range(i + 1, min(length, i + MAX_SYMBOL_LENGTH) + 1):
                    sub = fragment[i:end]
                    if is_initial(sub):
                        entries[current] = ClassificationEntry(CharKind.INITIAL, sub)
                    if is_vowel(sub):
                        entries[current] = ClassificationEntry(CharKind.VOWEL, sub)
            offset += length

        return entries

    @log_execution_time(logger)
    def split(self) -> List[str]:
        """
        切分

        过程：
        1. 当前位置是声母则取之
        2. 其后是韵母则取第一个韵母
        3. 再其后仍是韵母则取第二个韵母，之后强制结束本组
        4. 组内全是韵母则逐个输出，否则拼接成一个音节输出

        Returns:
            按输入顺序排列的音节 / 韵母列表
        """
        entries = self.classify()
        total = sum(len(s) for s in self.fragments())

        tokens: List[str] = []
        index = 0
        while index < total:
            group: List[ClassificationEntry] = []

            entry = entries.get(index)
            if entry is not None and entry.kind is CharKind.INITIAL:
                group.append(entry)
                index += entry.length

            entry = entries.get(index)
            if entry is not None and entry.kind is CharKind.VOWEL:
                group.append(entry)
                index += entry.length

                entry = entries.get(index)
                if entry is not None and entry.kind is CharKind.VOWEL:
                    group.append(entry)
                    index += entry.length

            if not group:
                # 无法分类的位置，跳过一个字符
                if self.config.warn_on_gap:
                    logger.warning(
                        f"无法分类的位置: {self._phonetic!r} offset={index}, 跳过"
                    )
                index += 1
                continue

            if all(e.kind is CharKind.VOWEL for e in group):
                tokens.extend(e.text for e in group)
            else:
                tokens.append("".join(e.text for e in group))

        return tokens

    def segment(self) -> SegmentResult:
        """切分并附带耗时"""
        start = time.perf_counter()
        tokens = self.split()
        elapsed = (time.perf_counter() - start) * 1000
        return SegmentResult(raw_pinyin=self._phonetic, tokens=tokens, elapsed_ms=elapsed)


def split_pinyin(text: str, config: Optional[SegmenterConfig] = None) -> List[str]:
    """
    切分一个拼音字符串

    Args:
        text: 拼音字符串
        config: 切分配置

    Returns:
        音节列表
    """
    return PinyinSegmenter(text, config).split()

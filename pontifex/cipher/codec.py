"""
Solitaire文本编解码.

把消息规范化为A-Z大写字母，从牌组取等长密钥流，
逐字母做模26加法(加密)或减法(解密)。结果只在1-26闭区间内取值.
"""

import logging
import string

from ..core.deck import Deck
from ..core.keystream import ALPHABET_SIZE, generate_keystream

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase
GROUP_SIZE = 5


def normalize(message: str) -> str:
    """转为大写并丢弃A-Z以外的所有字符(空格、数字、标点等)"""
    return "".join(c for c in message.upper() if c in ALPHABET)


def char_to_number(char: str) -> int:
    """
    字母在字母表中的位置，A=1 ... Z=26.

    Raises:
        ValueError: 当参数不是单个A-Z大写字母时
    """
    if len(char) != 1 or char not in ALPHABET:
        raise ValueError(f"只能转换单个A-Z字母: {char!r}")
    return ALPHABET.index(char) + 1


def number_to_char(number: int) -> str:
    """任意整数先映射到1-26(((n - 1) mod 26) + 1)，再转为字母"""
    return ALPHABET[(number - 1) % ALPHABET_SIZE]


def combine(char_value: int, key_value: int, encrypting: bool) -> int:
    """
    合并一个字母值和一个密钥值，结果在1-26之间.

    加密: c + k；解密: c - k + 26。取模结果为0时用26代替.
    """
    if encrypting:
        raw = char_value + key_value
    else:
        raw = char_value - key_value + ALPHABET_SIZE

    reduced = raw % ALPHABET_SIZE
    return reduced or ALPHABET_SIZE


def process(message: str, encrypting: bool, deck: Deck) -> str:
    """
    加密或解密消息.

    Args:
        message: 原始消息，非字母字符会被丢弃
        encrypting: True为加密，False为解密
        deck: 密钥牌组，会被原地消费

    Returns:
        str: 与规范化消息等长的大写字母串
    """
    letters = normalize(message)
    if not letters:
        # 空消息不消费任何密钥流
        logger.info("[编解码] 消息中没有字母，返回空结果")
        return ""

    keystream = generate_keystream(deck, len(letters))

    result = []
    for letter, key in zip(letters, keystream):
        result.append(number_to_char(combine(char_to_number(letter), key, encrypting)))

    mode = "加密" if encrypting else "解密"
    logger.info(f"[编解码] {mode}完成，共 {len(letters)} 个字母")
    return "".join(result)


def encrypt(message: str, deck: Deck) -> str:
    return process(message, True, deck)


def decrypt(message: str, deck: Deck) -> str:
    return process(message, False, deck)


def group_letters(text: str, size: int = GROUP_SIZE) -> str:
    """
    按固定长度分组显示，如"EXKYI ZSGEH".

    Raises:
        ValueError: 当size不是正数时
    """
    if size <= 0:
        raise ValueError(f"分组长度必须大于0: {size}")
    return " ".join(text[i:i + size] for i in range(0, len(text), size))

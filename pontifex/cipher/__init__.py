"""
文本编解码模块
"""

from .codec import (
    normalize, char_to_number, number_to_char, combine,
    process, encrypt, decrypt, group_letters
)

__all__ = [
    'normalize', 'char_to_number', 'number_to_char', 'combine',
    'process', 'encrypt', 'decrypt', 'group_letters',
]

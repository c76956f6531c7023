#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pontifex (Solitaire) 流密码
用54张牌(含两张王牌)的排列生成密钥流，对A-Z字母做模26加减

模块结构：
- core: 卡牌、牌组、密钥流、配置和异常
- cipher: 文本规范化与加解密
- storage: JSON牌组文件读写
- cli: 命令行界面
"""

from .core import (
    Suit, Rank, CardKind, ValueScheme, JokerWrap,
    Card, card_value, bridge_value,
    Deck, build_deck, JOKER_A, JOKER_B,
    KeystreamGenerator, generate_keystream,
    CipherConfig,
    PontifexError, InvalidCardError, InvalidDeckError,
    CipherConfigError, DeckFileError
)

from .cipher import (
    normalize, char_to_number, number_to_char,
    process, encrypt, decrypt, group_letters
)

from .storage import load_deck, save_deck, generate_deck_file

__version__ = "1.0.0"

__all__ = [
    # 核心基础组件
    'Suit', 'Rank', 'CardKind', 'ValueScheme', 'JokerWrap',
    'Card', 'card_value', 'bridge_value',
    'Deck', 'build_deck', 'JOKER_A', 'JOKER_B',
    'KeystreamGenerator', 'generate_keystream',
    'CipherConfig',
    'PontifexError', 'InvalidCardError', 'InvalidDeckError',
    'CipherConfigError', 'DeckFileError',

    # 文本编解码
    'normalize', 'char_to_number', 'number_to_char',
    'process', 'encrypt', 'decrypt', 'group_letters',

    # 牌组文件
    'load_deck', 'save_deck', 'generate_deck_file',
]

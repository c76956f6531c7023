#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
核心基础组件模块
包含枚举、卡牌、牌组、密钥流、配置等基础组件
"""

from .types import Suit, Rank, CardKind, ValueScheme, JokerWrap
from .card import Card, card_value, bridge_value
from .config import CipherConfig, DECK_SIZE
from .deck import Deck, build_deck, JOKER_A, JOKER_B
from .keystream import KeystreamGenerator, generate_keystream
from .exceptions import (
    PontifexError, InvalidCardError, InvalidDeckError,
    CipherConfigError, DeckFileError
)

__all__ = [
    # 枚举类型
    'Suit', 'Rank', 'CardKind', 'ValueScheme', 'JokerWrap',

    # 卡牌和牌组
    'Card', 'card_value', 'bridge_value',
    'Deck', 'build_deck', 'JOKER_A', 'JOKER_B',

    # 密钥流
    'KeystreamGenerator', 'generate_keystream',

    # 配置相关
    'CipherConfig', 'DECK_SIZE',

    # 异常类型
    'PontifexError', 'InvalidCardError', 'InvalidDeckError',
    'CipherConfigError', 'DeckFileError',
]

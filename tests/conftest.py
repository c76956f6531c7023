"""
Pontifex测试配置 - pytest配置文件

提供通用的测试fixture:
- 未加密钥的新牌序牌组及其字符串列表
- 固定种子洗牌得到的密钥牌组
- 写入临时目录的牌组文件
"""

import json
import random
from typing import List

import pytest

from pontifex.core import Deck


@pytest.fixture
def new_order_tokens() -> List[str]:
    """新牌序的54个字符串: 梅花、方块、红桃、黑桃各A到K，然后两张王牌"""
    return Deck.new_deck_order().tokens()


@pytest.fixture
def standard_tokens(new_order_tokens) -> List[str]:
    """新牌序中的52张普通牌"""
    return new_order_tokens[:52]


@pytest.fixture
def unkeyed_deck() -> Deck:
    """未加密钥的牌组fixture"""
    return Deck.new_deck_order()


@pytest.fixture
def keyed_deck() -> Deck:
    """固定种子洗牌得到的牌组fixture"""
    return Deck.shuffled(random.Random(2024))


@pytest.fixture
def unkeyed_deck_file(tmp_path, new_order_tokens):
    """写有新牌序的牌组文件"""
    path = tmp_path / "deck.json"
    path.write_text(json.dumps(new_order_tokens), encoding="utf-8")
    return path

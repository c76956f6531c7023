"""
牌组文件读写.

牌组文件是由54个卡牌字符串组成的JSON数组，例如:
["AC", "2C", ..., "KS", "JOKER_A", "JOKER_B"]
"""

import json
import logging
import random
from pathlib import Path
from typing import Optional, Union

from .core.config import CipherConfig
from .core.deck import Deck, build_deck
from .core.exceptions import DeckFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_deck(path: PathLike, config: Optional[CipherConfig] = None) -> Deck:
    """
    从JSON文件加载牌组.

    Args:
        path: 牌组文件路径
        config: 规则配置

    Returns:
        Deck: 校验通过的牌组

    Raises:
        DeckFileError: 文件无法读取、不是合法JSON或不是字符串数组
        InvalidDeckError: 文件内容违反牌组不变量
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise DeckFileError(f"无法读取牌组文件 {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DeckFileError(f"牌组文件不是合法的JSON {path}: {e}") from e

    if not isinstance(data, list):
        raise DeckFileError(f"牌组文件必须是JSON数组 {path}，实际: {type(data).__name__}")

    deck = build_deck(data, config)
    logger.info(f"[牌组文件] 已从 {path} 加载牌组")
    return deck


def save_deck(deck: Deck, path: PathLike) -> None:
    """
    把牌组写入JSON文件.

    Raises:
        DeckFileError: 文件无法写入
    """
    path = Path(path)
    try:
        path.write_text(json.dumps(deck.tokens()), encoding="utf-8")
    except OSError as e:
        raise DeckFileError(f"无法写入牌组文件 {path}: {e}") from e
    logger.info(f"[牌组文件] 牌组已保存到 {path}")


def generate_deck_file(path: PathLike, seed: Optional[int] = None) -> Deck:
    """
    生成随机牌组并保存.

    Args:
        path: 输出文件路径
        seed: 随机种子，用于可重现的牌组；为None时使用系统随机源

    Returns:
        Deck: 生成的牌组
    """
    rng = random.Random(seed) if seed is not None else None
    deck = Deck.shuffled(rng)
    save_deck(deck, path)
    return deck

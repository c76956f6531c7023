"""
Pontifex牌组相关类型定义.

定义花色、点数、卡牌种类以及牌组规则相关的枚举类型.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    扑克牌花色枚举.

    定义顺序即桥牌花色顺序(梅花、方块、红桃、黑桃)，新牌序和桥牌点值都依赖这个顺序.
    """

    CLUBS = "C"       # 梅花
    DIAMONDS = "D"    # 方块
    HEARTS = "H"      # 红桃
    SPADES = "S"      # 黑桃

    def __str__(self) -> str:
        return self.value

    @property
    def bridge_index(self) -> int:
        """返回花色在桥牌顺序中的位置(0-3)"""
        return list(Suit).index(self)


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    A最小(1)，K最大(13)，数值即Solitaire中的点数.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        """返回点数的简短表示"""
        return {
            1: "A",
            11: "J",
            12: "Q",
            13: "K",
        }.get(self.value, str(self.value))

    @classmethod
    def from_str(cls, rank_str: str) -> 'Rank':
        """
        从字符串创建Rank对象.

        Args:
            rank_str: "A", "2"-"10", "J", "Q", "K"

        Raises:
            ValueError: 当字符串不是合法点数时
        """
        for rank in cls:
            if str(rank) == rank_str:
                return rank
        raise ValueError(f"无效的点数: {rank_str!r}")


class CardKind(Enum):
    """卡牌种类标签: 两张可区分的王牌和普通牌"""
    JOKER_A = "JOKER_A"
    JOKER_B = "JOKER_B"
    STANDARD = "STANDARD"


class ValueScheme(Enum):
    """
    计数切牌和输出牌查找时使用的点值方案.

    BRIDGE: 桥牌顺序，梅花1-13、方块14-26、红桃27-39、黑桃40-52
    RANK: 只看点数(1-13)，忽略花色
    两种方案中王牌都是53.
    """
    BRIDGE = "bridge"
    RANK = "rank"


class JokerWrap(Enum):
    """
    王牌下移越过牌底时的回绕方式.

    CLASSIC: 回绕后落在顶牌之下，王牌永远不会成为顶牌
    MODULAR: 目标位置直接对牌组张数取模
    """
    CLASSIC = "classic"
    MODULAR = "modular"


def get_all_suits() -> List[Suit]:
    """获取所有花色(桥牌顺序)"""
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """获取所有点数(A到K)"""
    return list(Rank)

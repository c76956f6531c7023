"""
Solitaire卡牌数据结构.

定义不可变的Card类，一张牌要么是王牌A、王牌B，要么是带点数和花色的普通牌.
"""

from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidCardError
from .types import CardKind, Rank, Suit

JOKER_VALUE = 53


@dataclass(frozen=True)
class Card:
    """
    表示一张Solitaire卡牌.

    使用CardKind标签区分王牌和普通牌，王牌不携带点数和花色.
    相等性和哈希只依赖标签及点数花色，与牌在牌组中的位置无关.

    Attributes:
        kind: 卡牌种类
        rank: 点数(仅普通牌)
        suit: 花色(仅普通牌)

    Examples:
        >>> str(Card.standard(Rank.TEN, Suit.HEARTS))
        '10H'
        >>> Card.from_str("JOKER_A").is_joker
        True
    """

    kind: CardKind
    rank: Optional[Rank] = None
    suit: Optional[Suit] = None

    def __post_init__(self) -> None:
        """
        验证卡牌数据的有效性.

        Raises:
            TypeError: 当种类、点数或花色类型无效时
            InvalidCardError: 当标签与点数花色组合不一致时
        """
        if not isinstance(self.kind, CardKind):
            raise TypeError(f"种类必须是CardKind类型，实际: {type(self.kind)}")
        if self.kind is CardKind.STANDARD:
            if not isinstance(self.rank, Rank):
                raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
            if not isinstance(self.suit, Suit):
                raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        elif self.rank is not None or self.suit is not None:
            raise InvalidCardError(f"王牌不能带有点数或花色: {self.kind.value}")

    @classmethod
    def joker_a(cls) -> 'Card':
        return cls(CardKind.JOKER_A)

    @classmethod
    def joker_b(cls) -> 'Card':
        return cls(CardKind.JOKER_B)

    @classmethod
    def standard(cls, rank: Rank, suit: Suit) -> 'Card':
        return cls(CardKind.STANDARD, rank, suit)

    @property
    def is_joker(self) -> bool:
        """检查是否为王牌(A或B)"""
        return self.kind is not CardKind.STANDARD

    def to_str(self) -> str:
        """
        返回牌组文件中使用的字符串.

        Returns:
            str: "JOKER_A"、"JOKER_B"或"点数花色"，如"10H"、"KC"
        """
        if self.is_joker:
            return self.kind.value
        # IntEnum的format走int.__format__，这里必须显式调用str
        return str(self.rank) + str(self.suit)

    @classmethod
    def from_str(cls, token: str) -> 'Card':
        """
        从牌组文件中的字符串创建卡牌.

        只接受规范写法: "JOKER_A"、"JOKER_B"，或点数(A,2-10,J,Q,K)加花色(C,D,H,S).

        Raises:
            InvalidCardError: 当字符串无法识别时
        """
        if not isinstance(token, str):
            raise InvalidCardError(f"卡牌必须是字符串，实际: {type(token)}")

        if token == CardKind.JOKER_A.value:
            return cls.joker_a()
        if token == CardKind.JOKER_B.value:
            return cls.joker_b()

        if len(token) not in (2, 3):
            raise InvalidCardError(f"卡牌字符串格式错误: {token!r}")

        rank_str, suit_str = token[:-1], token[-1]
        try:
            rank = Rank.from_str(rank_str)
            suit = Suit(suit_str)
        except ValueError as e:
            raise InvalidCardError(f"无法解析卡牌字符串 {token!r}: {e}") from e
        return cls.standard(rank, suit)

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        if self.is_joker:
            return f"Card({self.kind.name})"
        return f"Card({self.rank.name}, {self.suit.name})"


def card_value(card: Card) -> int:
    """
    卡牌点值: 王牌为53，普通牌为点数1-13，与花色无关.
    """
    if card.is_joker:
        return JOKER_VALUE
    return int(card.rank)


def bridge_value(card: Card) -> int:
    """
    桥牌顺序点值: 梅花1-13、方块14-26、红桃27-39、黑桃40-52，王牌为53.
    """
    if card.is_joker:
        return JOKER_VALUE
    return int(card.rank) + 13 * card.suit.bridge_index

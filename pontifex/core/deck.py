"""
Solitaire牌组管理.

定义Deck类: 54张牌(52张普通牌加两张王牌)的有序序列，
提供生成密钥流所需的四个原地变换操作.
"""

import logging
import random
from collections import Counter
from typing import Iterable, Iterator, List, Optional, Sequence

from .card import Card
from .config import CipherConfig
from .exceptions import InvalidCardError, InvalidDeckError
from .types import JokerWrap, get_all_ranks, get_all_suits

logger = logging.getLogger(__name__)

JOKER_A = Card.joker_a()
JOKER_B = Card.joker_b()

JOKER_A_MOVE = 1
JOKER_B_MOVE = 2


class Deck:
    """
    表示一副Solitaire牌组(即密钥).

    牌组在构造时校验不变量: 恰好54张、两两不同、王牌A和王牌B各一张.
    所有变换操作只重排牌序，不增删任何牌.
    索引0为顶牌，最后一张为底牌.

    Attributes:
        _cards: 当前牌序
        config: 点值方案和王牌回绕规则

    Examples:
        >>> deck = Deck.new_deck_order()
        >>> deck.advance()
        >>> deck.output_card()
        4
    """

    def __init__(self, cards: Iterable[Card], config: Optional[CipherConfig] = None) -> None:
        """
        初始化牌组.

        Args:
            cards: 按顶到底顺序排列的卡牌
            config: 规则配置，为None时使用经典规则

        Raises:
            InvalidDeckError: 当牌组违反不变量时
        """
        self.config = config or CipherConfig()
        self._cards: List[Card] = list(cards)
        self._validate()

    def _validate(self) -> None:
        """检查张数、重复牌和王牌数量."""
        for card in self._cards:
            if not isinstance(card, Card):
                raise InvalidDeckError(f"牌组只能包含Card对象，实际: {type(card)}")

        if len(self._cards) != self.config.deck_size:
            raise InvalidDeckError(
                f"牌组必须有{self.config.deck_size}张牌，实际: {len(self._cards)}"
            )

        counts = Counter(self._cards)
        for joker in (JOKER_A, JOKER_B):
            if counts[joker] == 0:
                raise InvalidDeckError(f"牌组缺少{joker}")

        duplicates = sorted(str(card) for card, n in counts.items() if n > 1)
        if duplicates:
            raise InvalidDeckError(f"牌组存在重复的牌: {', '.join(duplicates)}")

    @classmethod
    def from_tokens(cls, tokens: Sequence[str], config: Optional[CipherConfig] = None) -> 'Deck':
        """
        从牌组文件的字符串序列构建牌组.

        Args:
            tokens: 54个字符串，如"JOKER_A"、"10H"、"KC"
            config: 规则配置

        Returns:
            Deck: 校验通过的牌组

        Raises:
            InvalidDeckError: 当存在无法识别的字符串或违反牌组不变量时
        """
        if isinstance(tokens, (str, bytes)):
            raise InvalidDeckError("牌组必须是字符串序列，而不是单个字符串")
        try:
            items = list(tokens)
        except TypeError as e:
            raise InvalidDeckError(f"牌组必须是字符串序列，实际: {type(tokens).__name__}") from e

        cards = []
        for position, token in enumerate(items):
            try:
                cards.append(Card.from_str(token))
            except InvalidCardError as e:
                raise InvalidDeckError(f"第{position}张牌无法识别: {e}") from e
        return cls(cards, config)

    @classmethod
    def new_deck_order(cls, config: Optional[CipherConfig] = None) -> 'Deck':
        """
        未加密钥的新牌序: 梅花、方块、红桃、黑桃各A到K，然后王牌A、王牌B.
        """
        cards = [
            Card.standard(rank, suit)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]
        cards.extend([JOKER_A, JOKER_B])
        return cls(cards, config)

    @classmethod
    def shuffled(cls, rng: Optional[random.Random] = None,
                 config: Optional[CipherConfig] = None) -> 'Deck':
        """
        生成随机牌序的牌组.

        Args:
            rng: 随机数生成器，用于可重现的洗牌结果。为None时使用SystemRandom
            config: 规则配置
        """
        rng = rng or random.SystemRandom()
        deck = cls.new_deck_order(config)
        rng.shuffle(deck._cards)
        return deck

    def copy(self) -> 'Deck':
        """返回牌序和配置都相同的独立副本"""
        return Deck(self._cards, self.config)

    def tokens(self) -> List[str]:
        """返回牌组文件格式的字符串列表"""
        return [card.to_str() for card in self._cards]

    @property
    def cards(self) -> List[Card]:
        """当前牌序的快照(修改它不会影响牌组)"""
        return list(self._cards)

    @property
    def top(self) -> Card:
        return self._cards[0]

    @property
    def bottom(self) -> Card:
        return self._cards[-1]

    def value(self, card: Card) -> int:
        """按配置的点值方案计算卡牌点值"""
        return self.config.value_of(card)

    def index_of(self, card: Card) -> Optional[int]:
        """
        查找卡牌位置.

        Returns:
            Optional[int]: 0开始的位置，不在牌组中时返回None
        """
        try:
            return self._cards.index(card)
        except ValueError:
            return None

    def _joker_target(self, index: int, positions: int) -> int:
        size = len(self._cards)
        target = index + positions
        if self.config.joker_wrap is JokerWrap.MODULAR:
            return target % size
        # 越过牌底后从顶牌下方继续，顶部位置不参与回绕
        while target >= size:
            target -= size - 1
        return target

    def move_joker(self, joker: Card, positions: int) -> None:
        """
        将王牌向下移动若干位置.

        Args:
            joker: 要移动的王牌
            positions: 下移的位置数(王牌A为1，王牌B为2)
        """
        index = self.index_of(joker)
        if index is None:
            return

        target = self._joker_target(index, positions)
        self._cards.pop(index)
        self._cards.insert(target, joker)

    def triple_cut(self) -> None:
        """
        三段切牌: 以两张王牌为界，交换第一张王牌之上和第二张王牌之下的两段.
        两张王牌及其之间的牌保持原有相对顺序.
        """
        index_a = self.index_of(JOKER_A)
        index_b = self.index_of(JOKER_B)
        if index_a is None or index_b is None:
            return

        lo, hi = min(index_a, index_b), max(index_a, index_b)
        top = self._cards[:lo]
        middle = self._cards[lo:hi + 1]
        bottom = self._cards[hi + 1:]
        self._cards = bottom + middle + top

    def count_cut(self) -> None:
        """
        计数切牌: 按底牌点值v，把顶部v张牌移到底牌之上，底牌保持在最后.
        """
        count = self.value(self.bottom)
        if count >= len(self._cards):
            return

        self._cards = self._cards[count:-1] + self._cards[:count] + [self._cards[-1]]

    def output_card(self) -> Optional[int]:
        """
        查找输出牌.

        按顶牌点值v，查看位置v(顶牌为位置0)上的牌.

        Returns:
            Optional[int]: 该牌的点值；如果是王牌则返回None(本轮作废)
        """
        count = self.value(self.top)
        if count >= len(self._cards):
            return None

        card = self._cards[count]
        if card.is_joker:
            return None
        return self.value(card)

    def advance(self) -> None:
        """执行一轮变换: 移动王牌A、移动王牌B、三段切牌、计数切牌"""
        self.move_joker(JOKER_A, JOKER_A_MOVE)
        self.move_joker(JOKER_B, JOKER_B_MOVE)
        self.triple_cut()
        self.count_cut()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards and self.config == other.config

    __hash__ = None

    def __str__(self) -> str:
        return " ".join(self.tokens())

    def __repr__(self) -> str:
        return f"Deck(top={self.top}, bottom={self.bottom}, cards={len(self._cards)})"


def build_deck(tokens: Sequence[str], config: Optional[CipherConfig] = None) -> Deck:
    """
    根据字符串序列构建牌组，违反不变量时抛出InvalidDeckError.
    """
    deck = Deck.from_tokens(tokens, config)
    logger.debug(f"[牌组] 已构建牌组: 顶牌 {deck.top}，底牌 {deck.bottom}")
    return deck

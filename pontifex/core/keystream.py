"""
Solitaire密钥流生成器.

每轮对牌组执行四步变换后查找输出牌，王牌作为输出牌时本轮作废(未命中).
生成器会永久改变牌组，需要重复同一操作的调用者应先保存牌组副本.
"""

import logging
from typing import Iterator, List, Optional

from .deck import Deck

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26


def reduce_output(value: int) -> int:
    """把输出牌点值映射到1-26: 大于26时减去26，不会产生0."""
    if value > ALPHABET_SIZE:
        return value - ALPHABET_SIZE
    return value


class KeystreamGenerator:
    """
    逐步推进牌组的密钥流生成器.

    step()执行一轮变换并返回本轮输出(未命中时为None)，
    因此测试可以在每轮之后检查牌组的中间状态.

    Attributes:
        deck: 被消费的牌组(原地修改)
        cycles: 已执行的轮数
        misses: 未命中的轮数
    """

    def __init__(self, deck: Deck) -> None:
        self.deck = deck
        self.cycles = 0
        self.misses = 0

    def step(self) -> Optional[int]:
        """
        执行一轮四步变换并查找输出牌.

        Returns:
            Optional[int]: 1-26的密钥值；输出牌为王牌时返回None
        """
        self.deck.advance()
        self.cycles += 1

        output = self.deck.output_card()
        if output is None:
            self.misses += 1
            logger.debug(f"[密钥流] 第{self.cycles}轮未命中，顶牌 {self.deck.top}")
            return None

        key = reduce_output(output)
        logger.debug(f"[密钥流] 第{self.cycles}轮输出 {output} -> {key}")
        return key

    def next_value(self) -> int:
        """持续推进牌组直到得到一个密钥值"""
        while True:
            key = self.step()
            if key is not None:
                return key

    def take(self, count: int) -> List[int]:
        """
        生成指定数量的密钥值.

        Raises:
            ValueError: 当count为负数时
        """
        if count < 0:
            raise ValueError(f"密钥流长度不能为负数: {count}")
        return [self.next_value() for _ in range(count)]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_value()


def generate_keystream(deck: Deck, count: int) -> List[int]:
    """
    从牌组生成count个1-26的密钥值，牌组被原地消费.
    """
    generator = KeystreamGenerator(deck)
    keystream = generator.take(count)
    if count:
        logger.info(
            f"[密钥流] 生成 {count} 个密钥值，共 {generator.cycles} 轮，未命中 {generator.misses} 轮"
        )
    return keystream

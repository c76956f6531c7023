"""
密码配置相关类的实现
包含点值方案和王牌回绕规则
"""

from dataclasses import dataclass
from typing import Callable

from .card import Card, bridge_value, card_value
from .exceptions import CipherConfigError
from .types import JokerWrap, ValueScheme

DECK_SIZE = 54


@dataclass(frozen=True)
class CipherConfig:
    """
    Solitaire规则配置

    默认值即经典Solitaire规则，可以复现公开的测试向量.
    """
    value_scheme: ValueScheme = ValueScheme.BRIDGE   # 计数切牌/输出牌使用的点值
    joker_wrap: JokerWrap = JokerWrap.CLASSIC        # 王牌越过牌底时的回绕方式
    deck_size: int = DECK_SIZE                       # 牌组张数，只支持54

    def __post_init__(self):
        """验证配置的有效性"""
        if not isinstance(self.value_scheme, ValueScheme):
            raise CipherConfigError(f"无效的点值方案: {self.value_scheme}")

        if not isinstance(self.joker_wrap, JokerWrap):
            raise CipherConfigError(f"无效的王牌回绕方式: {self.joker_wrap}")

        if self.deck_size != DECK_SIZE:
            raise CipherConfigError(f"牌组张数必须为{DECK_SIZE}: {self.deck_size}")

    @property
    def value_of(self) -> Callable[[Card], int]:
        """返回当前方案对应的点值函数"""
        if self.value_scheme is ValueScheme.RANK:
            return card_value
        return bridge_value

    @classmethod
    def classic(cls) -> 'CipherConfig':
        """经典Solitaire规则: 桥牌点值，王牌不会回绕到顶部"""
        return cls()

    @classmethod
    def literal(cls) -> 'CipherConfig':
        """
        按点数计值并对张数取模回绕的变体
        与经典规则生成不同的密钥流
        """
        return cls(value_scheme=ValueScheme.RANK, joker_wrap=JokerWrap.MODULAR)

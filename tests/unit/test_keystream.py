"""
密钥流生成器单元测试
使用新牌序牌组的已知密钥流验证逐轮输出和未命中处理
"""

import pytest

from pontifex.core import CipherConfig, Deck, KeystreamGenerator, generate_keystream
from pontifex.core.keystream import reduce_output

# 新牌序牌组前11轮的输出牌点值(None为王牌未命中)
NEW_DECK_OUTPUTS = [4, 49, 10, None, 24, 8, 51, 44, 6, 4, 33]
NEW_DECK_KEYSTREAM = [4, 23, 10, 24, 8, 25, 18, 6, 4, 7]


@pytest.mark.unit
@pytest.mark.fast
class TestReduceOutput:
    """输出值映射测试"""

    @pytest.mark.parametrize("value, expected", [
        (1, 1), (13, 13), (26, 26), (27, 1), (39, 13), (52, 26),
    ])
    def test_reduce_output(self, value, expected):
        assert reduce_output(value) == expected


@pytest.mark.unit
@pytest.mark.fast
class TestKeystreamGenerator:
    """逐轮生成测试"""

    def test_step_by_step(self, unkeyed_deck):
        generator = KeystreamGenerator(unkeyed_deck)
        expected = [None if v is None else reduce_output(v) for v in NEW_DECK_OUTPUTS]
        assert [generator.step() for _ in expected] == expected
        assert generator.cycles == 11
        assert generator.misses == 1

    def test_deck_state_after_first_step(self, unkeyed_deck, standard_tokens):
        generator = KeystreamGenerator(unkeyed_deck)
        assert generator.step() == 4
        assert unkeyed_deck.tokens() == standard_tokens[1:] + ["JOKER_A", "JOKER_B", "AC"]

    def test_next_value_skips_miss(self, unkeyed_deck):
        generator = KeystreamGenerator(unkeyed_deck)
        assert [generator.next_value() for _ in range(4)] == [4, 23, 10, 24]
        assert generator.cycles == 5
        assert generator.misses == 1

    def test_take(self, unkeyed_deck):
        assert KeystreamGenerator(unkeyed_deck).take(10) == NEW_DECK_KEYSTREAM

    def test_iterator_protocol(self, unkeyed_deck):
        generator = KeystreamGenerator(unkeyed_deck)
        values = [value for _, value in zip(range(3), generator)]
        assert values == [4, 23, 10]

    def test_take_zero_leaves_deck_untouched(self, unkeyed_deck):
        assert KeystreamGenerator(unkeyed_deck).take(0) == []
        assert unkeyed_deck == Deck.new_deck_order()

    def test_take_negative(self, unkeyed_deck):
        with pytest.raises(ValueError):
            KeystreamGenerator(unkeyed_deck).take(-1)

    def test_generation_is_consuming(self, unkeyed_deck):
        first = generate_keystream(unkeyed_deck, 5)
        second = generate_keystream(unkeyed_deck, 5)
        assert first + second == NEW_DECK_KEYSTREAM

    def test_literal_config_keystream(self):
        deck = Deck.new_deck_order(CipherConfig.literal())
        generator = KeystreamGenerator(deck)
        assert generator.step() is None
        assert generator.take(5) == [6, 10, 6, 9, 3]


@pytest.mark.unit
class TestKeystreamRange:
    """密钥值范围测试"""

    def test_values_in_range(self, keyed_deck):
        keystream = generate_keystream(keyed_deck, 2000)
        assert len(keystream) == 2000
        assert all(1 <= k <= 26 for k in keystream)

    def test_values_in_range_literal(self):
        deck = Deck.new_deck_order(CipherConfig.literal())
        assert all(1 <= k <= 26 for k in generate_keystream(deck, 500))

"""
Tests for the token engines
===========================
"""

import pytest

from dicebits.core.entropy import MAX_DRAW_BITS, EntropyBuffer, ReplayEntropySource
from dicebits.core.generator import (
    BASE64_ALPHABET,
    HEX_ALPHABET,
    Engine,
    calculate_entropy,
    generate_line,
    generate_tokens,
)
from dicebits.core.wordlist import WORDLIST


class TestEngines:

    def test_engine_parameters(self):
        assert (Engine.WORDS.bits, Engine.WORDS.default_count, Engine.WORDS.separator) == (13, 5, " ")
        assert (Engine.BASE64.bits, Engine.BASE64.default_count, Engine.BASE64.separator) == (6, 16, "")
        assert (Engine.HEX.bits, Engine.HEX.default_count, Engine.HEX.separator) == (4, 16, "")

    @pytest.mark.parametrize("engine", list(Engine))
    def test_bits_within_draw_limit(self, engine):
        assert 1 <= engine.bits <= MAX_DRAW_BITS

    def test_alphabets(self):
        assert BASE64_ALPHABET == (
            "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
        )
        assert HEX_ALPHABET == "0123456789abcdef"

    def test_base64_render_index_aligned(self):
        assert [Engine.BASE64.render(i) for i in range(64)] == list(BASE64_ALPHABET)

    def test_hex_render_index_aligned(self):
        assert [Engine.HEX.render(i) for i in range(16)] == list(HEX_ALPHABET)

    def test_words_render_total(self):
        rendered = [Engine.WORDS.render(i) for i in range(Engine.WORDS.size)]
        assert rendered == list(WORDLIST)
        assert len(set(rendered)) == 8192

    @pytest.mark.parametrize("engine", list(Engine))
    def test_render_rejects_out_of_range(self, engine):
        with pytest.raises(IndexError):
            engine.render(engine.size)
        with pytest.raises(IndexError):
            engine.render(-1)


class TestGenerateLine:

    def test_hex_from_known_stream(self):
        buf = EntropyBuffer(ReplayEntropySource(b"\x21\x43"))
        assert generate_line(Engine.HEX, 4, buf) == "1234\n"

    def test_base64_from_known_stream(self):
        buf = EntropyBuffer(ReplayEntropySource(b"\xff\xff\xff\x00\x00\x00"))
        assert generate_line(Engine.BASE64, 8, buf) == "////AAAA\n"

    def test_words_joined_by_space(self, scripted_buffer):
        buf = scripted_buffer([0, 8191, 1])
        line = generate_line(Engine.WORDS, 3, buf)
        assert line == f"{WORDLIST[0]} {WORDLIST[8191]} {WORDLIST[1]}\n"
        assert buf.requested == [13, 13, 13]

    def test_default_count(self, scripted_buffer):
        line = generate_line(Engine.HEX, buffer=scripted_buffer([3] * 16))
        assert line == "3" * 16 + "\n"

    def test_single_token_has_no_separator(self, scripted_buffer):
        assert generate_line(Engine.WORDS, 1, scripted_buffer([5])) == WORDLIST[5] + "\n"

    def test_system_buffer_by_default(self):
        line = generate_line(Engine.BASE64, 24)
        assert line.endswith("\n") and line.count("\n") == 1
        assert len(line) == 25
        assert set(line[:-1]) <= set(BASE64_ALPHABET)

    def test_words_default_shape(self):
        words = generate_line().rstrip("\n").split(" ")
        assert len(words) == 5
        assert all(w in WORDLIST for w in words)

    def test_rejects_non_positive_count(self, scripted_buffer):
        with pytest.raises(ValueError):
            generate_line(Engine.HEX, 0, scripted_buffer([]))

    def test_generate_tokens_draws_once_per_token(self, scripted_buffer):
        buf = scripted_buffer([0, 63, 1])
        assert generate_tokens(Engine.BASE64, 3, buf) == ["A", "/", "B"]
        assert buf.requested == [6, 6, 6]


class TestEntropyEstimate:

    def test_default_strengths(self):
        assert calculate_entropy(Engine.WORDS, 5) == pytest.approx(65.0)
        assert calculate_entropy(Engine.BASE64, 16) == pytest.approx(96.0)
        assert calculate_entropy(Engine.HEX, 16) == pytest.approx(64.0)

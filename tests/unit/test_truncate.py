"""Unit tests for character-exact truncation."""

import itertools
import logging
from collections.abc import Iterator

import pytest

from lazytext import concat, concat_once, once, to_uppercase, truncate_chars
from lazytext.config import EncodingConfig, LazyTextConfig, set_config
from lazytext.core.sinks import SinkWriteError, StringSink
from lazytext.core.truncate import TruncateChars, TruncatingSink

MULTIBYTE = "añ€😀z"


class TestTruncateChars:
    """Tests for truncate_chars over text fragments."""

    def test_counts_characters_not_bytes(self) -> None:
        """Test that a two-byte character counts as one."""
        assert str(truncate_chars("héllo", 2)) == "hé"

    def test_cut_across_concatenated_parts(self) -> None:
        """Test truncating inside the second of two parts."""
        assert str(truncate_chars(concat(["abc", "123"]), 4)) == "abc1"

    def test_prefix_law_for_every_length(self) -> None:
        """Test every budget yields exactly the leading characters."""
        for n in range(len(MULTIBYTE) + 3):
            assert str(truncate_chars(MULTIBYTE, n)) == MULTIBYTE[:n], f"length {n}"

    def test_prefix_law_three_parts(self, chunks) -> None:
        """Test every budget over three separately written parts."""
        expected = "abc123xyz"
        value = chunks("abc", "123", "xyz")

        for n in range(len(expected) + 1):
            assert str(truncate_chars(value, n)) == expected[:n], f"length {n}"

    def test_zero_emits_nothing(self, fragments_of) -> None:
        """Test N = 0 produces no fragments at all."""
        assert fragments_of(truncate_chars("hola", 0)) == []

    def test_budget_larger_than_output(self) -> None:
        """Test that a generous budget leaves output unchanged."""
        assert str(truncate_chars("hola", 100)) == "hola"

    def test_exact_budget(self) -> None:
        """Test a budget equal to the character count."""
        assert str(truncate_chars("hola", 4)) == "hola"

    def test_empty_inner_output(self) -> None:
        """Test that an empty inner value succeeds for any budget."""
        assert str(truncate_chars("", 0)) == ""
        assert str(truncate_chars(concat([]), 3)) == ""

    def test_non_string_value(self) -> None:
        """Test truncating an arbitrary value's str()."""
        assert str(truncate_chars(12345, 2)) == "12"

    def test_combining_marks_count_individually(self) -> None:
        """Test that a combining accent is its own character."""
        assert str(truncate_chars("e\u0301cole", 1)) == "e"
        assert str(truncate_chars("e\u0301cole", 2)) == "e\u0301"

    def test_forwards_only_the_kept_fragments(self, chunks, fragments_of) -> None:
        """Test fragments after the cut never reach the sink."""
        value = truncate_chars(chunks("abc", "123", "xyz"), 4)

        assert fragments_of(value) == ["abc", "1"]

    def test_siblings_after_truncation_still_render(self) -> None:
        """Test that truncation does not abort the surrounding tree."""
        value = concat([truncate_chars("abcdef", 2), "|", "XYZ"])

        assert str(value) == "ab|XYZ"

    def test_nested_truncation(self) -> None:
        """Test the tighter of two nested budgets wins."""
        assert str(truncate_chars(truncate_chars("abcdef", 4), 2)) == "ab"
        assert str(truncate_chars(truncate_chars("abcdef", 2), 4)) == "ab"

    def test_rendering_is_repeatable(self) -> None:
        """Test that a truncated value renders identically each time."""
        value = truncate_chars(concat(["hé", "llo", " wörld"]), 7)

        assert str(value) == str(value) == "héllo w"

    def test_usable_in_format_spec(self) -> None:
        """Test f-string formatting of a truncated value."""
        assert f"{truncate_chars('hello', 2):>4}" == "  he"

    def test_negative_limit_rejected(self) -> None:
        """Test that a negative budget is a constructor error."""
        with pytest.raises(ValueError, match="non-negative"):
            truncate_chars("hola", -1)

    def test_non_integer_limit_rejected(self) -> None:
        """Test that non-integer budgets are rejected."""
        with pytest.raises(TypeError):
            truncate_chars("hola", 2.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            truncate_chars("hola", True)

    def test_repr(self) -> None:
        assert repr(truncate_chars("ab", 1)) == "TruncateChars('ab', 1)"


class TestTruncateEncodedFragments:
    """Tests for truncation of byte fragments that split characters."""

    def test_single_byte_chunks(self, byte_chunks) -> None:
        """Test every budget when each byte arrives on its own."""
        text = "héllo wörld €😀"
        value = byte_chunks(text, 1)

        for n in range(len(text) + 2):
            assert str(truncate_chars(value, n)) == text[:n], f"length {n}"

    def test_odd_chunk_sizes(self, byte_chunks) -> None:
        """Test chunk sizes that cut characters at varying offsets."""
        text = "añ€😀z" * 3

        for size in (2, 3, 5, 7):
            value = byte_chunks(text, size)
            for n in (0, 1, 4, 9, len(text)):
                assert str(truncate_chars(value, n)) == text[:n], f"size {size}, length {n}"

    def test_split_character_at_the_cut(self, chunks) -> None:
        """Test a character split across writes right at the budget edge."""
        value = chunks(b"h\xc3", b"\xa9llo")

        assert str(truncate_chars(value, 2)) == "hé"
        assert str(truncate_chars(value, 1)) == "h"

    def test_mixed_text_and_bytes(self, chunks) -> None:
        """Test text and encoded fragments interleaved."""
        value = chunks("ab", "ç".encode(), "d", b"\xe2\x82", b"\xac")

        assert str(truncate_chars(value, 4)) == "abçd"
        assert str(truncate_chars(value, 5)) == "abçd€"

    def test_incomplete_trailing_bytes_replaced(self, chunks) -> None:
        """Test unterminated bytes become one replacement character."""
        value = chunks(b"ab\xe2\x82")

        assert str(truncate_chars(value, 5)) == "ab\ufffd"

    def test_incomplete_bytes_strict_policy(self, chunks) -> None:
        """Test a strict error policy reports undecodable bytes as a sink failure."""
        set_config(LazyTextConfig(encoding=EncodingConfig(errors="strict")))
        value = chunks(b"ab\xe2\x82")

        with pytest.raises(SinkWriteError, match="decode"):
            str(truncate_chars(value, 5))

    def test_incomplete_bytes_past_the_cut_ignored(self, chunks) -> None:
        """Test garbage after the budget is never decoded."""
        set_config(LazyTextConfig(encoding=EncodingConfig(errors="strict")))
        value = chunks(b"ab\xe2\x82")

        assert str(truncate_chars(value, 2)) == "ab"

    def test_text_write_ends_partial_character(self) -> None:
        """Test a text fragment arriving mid-character flushes the partial bytes."""
        inner = StringSink()
        sink = TruncatingSink(inner, 5)

        sink.write(b"\xc3")
        sink.write("x")
        sink.finish()

        assert inner.getvalue() == "\ufffdx"
        assert sink.remaining == 3


class TestTruncatingSink:
    """Tests for the budget-tracking sink itself."""

    def test_tracks_budget(self) -> None:
        """Test remaining, written and truncated bookkeeping."""
        inner = StringSink()
        sink = TruncatingSink(inner, 3)

        sink.write("he")
        assert sink.remaining == 1
        assert sink.truncated is False

        sink.write("llo")
        assert sink.remaining == 0
        assert sink.written == 3
        assert sink.truncated is True
        assert inner.getvalue() == "hel"

    def test_exhausted_writes_succeed(self) -> None:
        """Test that writes after exhaustion are silently dropped."""
        inner = StringSink()
        sink = TruncatingSink(inner, 0)

        sink.write("abc")
        sink.write(b"\xff")
        sink.finish()

        assert inner.getvalue() == ""
        assert sink.saturated is True

    def test_saturation_follows_inner_sink(self) -> None:
        """Test an outer budget saturates an inner truncating sink."""
        outer = TruncatingSink(StringSink(), 0)
        inner = TruncatingSink(outer, 10)

        assert inner.saturated is True

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValueError):
            TruncatingSink(StringSink(), -3)


class TestTruncateInfiniteProducers:
    """Tests for truncating single-use producers that never end."""

    def test_infinite_iterator(self) -> None:
        """Test an endless generator stops once the budget is spent."""
        value = truncate_chars(concat_once(itertools.cycle("ab")), 5)

        assert str(value) == "ababa"

    def test_infinite_counter(self) -> None:
        """Test an endless counter with multi-character items."""
        assert str(truncate_chars(once(itertools.count(8)), 6)) == "891011"

    def test_saturation_through_case_conversion(self) -> None:
        """Test saturation is visible through a transforming sink."""
        value = truncate_chars(to_uppercase(concat_once(itertools.cycle("ab"))), 3)

        assert str(value) == "ABA"

    def test_zero_budget_still_consumes(self) -> None:
        """Test that the inner single-use value is consumed even when nothing is kept."""
        inner = once(["a", "b"])
        value = truncate_chars(inner, 0)

        assert str(value) == ""
        assert inner.consumed is True
        assert str(inner) == ""

    def test_items_past_the_cut_not_pulled(self) -> None:
        """Test the producer is not advanced once the budget is spent."""
        pulled: list[str] = []

        def produce() -> Iterator[str]:
            for word in ("ab", "cd", "ef"):
                pulled.append(word)
                yield word

        assert str(truncate_chars(concat_once(produce()), 2)) == "ab"
        assert pulled == ["ab"]

        inner = concat_once(produce())
        pulled.clear()
        assert str(truncate_chars(inner, 0)) == ""
        assert pulled == []
        assert str(inner) == ""


class TestTruncateLogging:
    """Tests for truncation debug logging."""

    def test_logs_budget_exhaustion(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that exhausting the budget emits a debug record."""
        caplog.set_level(logging.DEBUG, logger="lazytext")

        str(truncate_chars("abcdef", 2))

        assert "Character budget exhausted" in caplog.text

    def test_returns_truncate_chars(self) -> None:
        assert isinstance(truncate_chars("a", 1), TruncateChars)

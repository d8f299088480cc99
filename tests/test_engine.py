"""Tests for the byte-to-symbol mapping engine."""

import io
from collections import Counter

import pytest

from randoid import alphabets
from randoid.alphabet import Alphabet
from randoid.engine import BUFFER_SIZE, write_symbols
from randoid.random_source import RandFn, SeededRandomSource


def generate(alphabet: Alphabet, random, size: int) -> str:
    out = io.StringIO()
    write_symbols(alphabet, random, size, out)
    return out.getvalue()


class TestZeroLength:
    """Tests for the empty-output short-circuit."""

    @pytest.mark.parametrize("alphabet", [alphabets.HEX, Alphabet("abc")])
    def test_no_randomness_drawn(self, alphabet: Alphabet, exploding_source):
        """Test that size zero never touches the random source or the sink."""
        writes = []

        class RecordingSink:
            def write(self, text):
                writes.append(text)

        write_symbols(alphabet, exploding_source, 0, RecordingSink())
        assert writes == []


class TestFastPath:
    """Tests for power-of-two alphabets."""

    def test_masks_high_bits(self, scripted_source):
        """Test that only the low bits of each byte select the symbol."""
        source = scripted_source([0x39, 0xA0, 0x55, 0xFC, 0x12, 0x77, 0x46, 0xE1])
        assert generate(alphabets.HEX, source, 8) == "905c2761"

    @pytest.mark.parametrize("size", [1, 21, BUFFER_SIZE - 1, BUFFER_SIZE, BUFFER_SIZE + 1, 200])
    def test_one_byte_per_symbol(self, size: int, counting_source):
        """Test that exactly one random byte is consumed per symbol."""
        source = counting_source(SeededRandomSource(size))
        result = generate(alphabets.URL, source, size)
        assert len(result) == size
        assert source.consumed == size
        assert all(fill <= BUFFER_SIZE for fill in source.fills)

    def test_batches_long_output(self, counting_source):
        """Test that output longer than the buffer is produced in several fills."""
        source = counting_source(SeededRandomSource(0))
        generate(alphabets.HEX, source, 2 * BUFFER_SIZE + 10)
        assert source.fills == [BUFFER_SIZE, BUFFER_SIZE, 10]

    def test_every_byte_maps_to_a_symbol(self):
        """Test that all 256 byte values are valid on the fast path."""
        alphabet = Alphabet("ab")

        def every_byte(buffer):
            buffer[:] = bytes(range(len(buffer)))

        # Two fills of 64 bytes each cover 0..63 twice; check alternation.
        result = generate(alphabet, RandFn(every_byte), 128)
        assert result == "ab" * 64


class TestGenericPath:
    """Tests for rejection sampling on arbitrary alphabet sizes."""

    def test_rejects_out_of_range_bytes(self, scripted_source):
        """Test that masked values past the last symbol are skipped."""
        # mask is 3 for a 3-symbol alphabet; 3 and 7 mask to 3 and are rejected
        source = scripted_source([3, 7, 0, 1, 2])
        assert generate(Alphabet("abc"), source, 3) == "abc"
        assert source.consumed == 5

    def test_step_sizing(self, scripted_source):
        """Test that batches are sized at about 8/5 of the remaining length."""
        source = scripted_source([0] * 16)
        generate(Alphabet("abc"), source, 10)
        assert source.fills == [16]

    def test_step_capped_by_buffer(self, counting_source):
        source = counting_source(SeededRandomSource(4))
        generate(Alphabet("0123456789"), source, 1000)
        assert max(source.fills) == BUFFER_SIZE

    def test_never_exceeds_requested_length(self):
        """Test that surplus accepted bytes in the last batch are dropped."""

        def zeros(buffer):
            buffer[:] = bytes(len(buffer))

        assert generate(Alphabet("abc"), RandFn(zeros), 5) == "aaaaa"

    def test_refills_after_rejections(self, scripted_source):
        """Test that the engine keeps drawing until enough symbols are accepted."""
        # first fill of 4 bytes yields one symbol, the rest are rejected
        source = scripted_source([3, 3, 3, 1, 3, 2, 0])
        assert generate(Alphabet("abc"), source, 3) == "bca"
        assert source.fills == [4, 3]

    @pytest.mark.parametrize("size", [1, 7, 40, 41, 500])
    def test_length_and_containment(self, size: int):
        alphabet = Alphabet(alphabets.URL.symbols[:62])
        result = generate(alphabet, SeededRandomSource(size), size)
        assert len(result) == size
        assert set(result) <= set(alphabet)

    def test_uniformity(self):
        """Test that symbol frequencies fit a uniform distribution (chi-square)."""
        alphabet = Alphabet("0123456789")
        source = SeededRandomSource(12345)
        samples = 100_000
        counts = Counter(generate(alphabet, source, samples))

        assert set(counts) == set(alphabet)
        expected = samples / len(alphabet)
        chi_square = sum((counts[symbol] - expected) ** 2 / expected for symbol in alphabet)
        # 9 degrees of freedom, p = 0.0001
        assert chi_square < 33.72


    def test_largest_alphabet_rejects_only_top_byte(self, scripted_source):
        """Test the 255-symbol boundary: mask 255, only byte 0xFF is discarded."""
        alphabet = Alphabet(chr(0x100 + i) for i in range(255))
        assert alphabet.mask == 255
        source = scripted_source([0xFF, 0x00, 0xFE])
        assert generate(alphabet, source, 2) == chr(0x100) + chr(0x100 + 254)
        assert source.consumed == 3
        assert source.fills == [3]


class TestMultiCharacterSymbols:
    """Tests for alphabets whose symbols are longer than one character."""

    def test_symbols_are_written_whole(self, scripted_source):
        alphabet = Alphabet(["ab", "cd", "ef"])
        source = scripted_source([2, 0, 3, 1])
        assert generate(alphabet, source, 3) == "efabcd"

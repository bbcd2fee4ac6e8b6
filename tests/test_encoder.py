import pytest

from vocab_generator.encoder import (
  ENCODERS, FrontCodingEncoder, LinesEncoder, OptimizedFrontCodingEncoder,
  TrieEncoder, common_prefix_length, front_coding, get_encoder)
from vocab_generator.errors import ConfigError, DecodeError, EncodeError

WORDS = ["abc", "abd", "acd", "bcd"]

SHARD = sorted(set([
  "baisse", "baisser", "bandon", "battre", "battue", "battus", "bces", "bdomen",
  "beille", "berrer", "bimer", "bject", "boyer", "bricot", "brupte",
]))
SHARD = [w for w in SHARD if len(w) == 6]


def test_common_prefix_length():
  assert common_prefix_length("", "abc") == 0
  assert common_prefix_length("abc", "abd") == 2
  assert common_prefix_length("abc", "abc") == 3
  assert common_prefix_length("abaisse", "abaisser") == 7
  assert common_prefix_length("bca", "abc") == 0


def test_front_coding_scenario():
  words = sorted(["abaisse", "abaisser", "abandon"])
  assert list(front_coding(words)) == [(0, "abaisse"), (7, "r"), (3, "ndon")]


def test_front_coding_first_word_is_whole():
  assert list(front_coding([""])) == [(0, "")]
  assert list(front_coding([])) == []


def test_lines():
  encoder = LinesEncoder()
  assert encoder.encode(WORDS) == "abc\nabd\nacd\nbcd\n"
  assert encoder.decode("abc\nabd\nacd\nbcd\n", 3) == WORDS


def test_lines_decode_errors():
  with pytest.raises(DecodeError):
    LinesEncoder().decode("abc\nabd", 3)
  with pytest.raises(DecodeError):
    LinesEncoder().decode("abc\nab\n", 3)


def test_front():
  assert FrontCodingEncoder().encode(WORDS) == "abc\nd\ncd\nbcd"
  assert FrontCodingEncoder().decode("abc\nd\ncd\nbcd", 3) == WORDS


def test_front_decode_errors():
  with pytest.raises(DecodeError):
    FrontCodingEncoder().decode("ab\nc", 3)
  with pytest.raises(DecodeError):
    FrontCodingEncoder().decode("abc\nabcd", 3)


def test_frontopt():
  assert OptimizedFrontCodingEncoder().encode(WORDS) == "abcd1cd2bcd"
  assert OptimizedFrontCodingEncoder().decode("abcd1cd2bcd", 3) == WORDS


def test_frontopt_multi_digit_offset():
  words = ["a" * 12, "b" * 12]
  text = OptimizedFrontCodingEncoder().encode(words)
  assert text == "a" * 12 + "11" + "b" * 12
  assert OptimizedFrontCodingEncoder().decode(text, 12) == words


def test_frontopt_empty_suffix_writes_nothing():
  assert OptimizedFrontCodingEncoder().encode(["abc", "abc", "abd"]) == "abcd"


def test_frontopt_decode_errors():
  with pytest.raises(DecodeError):
    OptimizedFrontCodingEncoder().decode("ab", 3)
  with pytest.raises(DecodeError):
    OptimizedFrontCodingEncoder().decode("abc5de", 3)


def test_trie():
  assert TrieEncoder().encode(["bac", "bad", "cab"]) == "b1a2cdc1a1b"
  assert TrieEncoder().decode("b1a2cdc1a1b", 3) == ["bac", "bad", "cab"]


def test_trie_orders_children():
  assert TrieEncoder().encode(["cab", "bad", "bac"]) == "b1a2cdc1a1b"


def test_trie_decode_errors():
  with pytest.raises(DecodeError):
    TrieEncoder().decode("b2a", 2)
  with pytest.raises(DecodeError):
    TrieEncoder().decode("ba", 2)
  with pytest.raises(DecodeError):
    TrieEncoder().decode("1b", 1)


@pytest.mark.parametrize("name", sorted(ENCODERS))
@pytest.mark.parametrize("words", [[], ["abandon"], SHARD])
def test_round_trip(name, words):
  encoder = get_encoder(name)
  length = len(words[0]) if words else 6
  assert encoder.decode(encoder.encode(words), length) == words


@pytest.mark.parametrize("name", sorted(ENCODERS))
def test_empty_words_round_trip(name):
  encoder = get_encoder(name)
  assert encoder.decode(encoder.encode([""]), 0) == [""]


@pytest.mark.parametrize("name", ["front", "frontopt", "trie"])
def test_empty_words_reject_data(name):
  with pytest.raises(DecodeError):
    get_encoder(name).decode("a", 0)


@pytest.mark.parametrize("name", sorted(ENCODERS))
def test_rejects_mixed_lengths(name):
  with pytest.raises(EncodeError):
    get_encoder(name).encode(["abc", "abcd"])


@pytest.mark.parametrize("encoder", [OptimizedFrontCodingEncoder(), TrieEncoder()])
def test_compact_encoders_reject_digits(encoder):
  with pytest.raises(EncodeError):
    encoder.encode(["ab1", "abc"])


def test_compact_encoders_are_smaller():
  sizes = dict((name, len(get_encoder(name).encode(SHARD))) for name in ENCODERS)
  assert sizes['front'] < sizes['lines']
  assert sizes['frontopt'] < sizes['front']


def test_write(tmp_path):
  path = tmp_path / "3a.txt"
  size = FrontCodingEncoder().write(str(path), WORDS)
  assert path.read_bytes() == b"abc\nd\ncd\nbcd"
  assert size == len(b"abc\nd\ncd\nbcd")


def test_get_encoder():
  assert isinstance(get_encoder('lines'), LinesEncoder)
  assert isinstance(get_encoder('front'), FrontCodingEncoder)
  assert isinstance(get_encoder('frontopt'), OptimizedFrontCodingEncoder)
  assert isinstance(get_encoder('trie'), TrieEncoder)


def test_get_encoder_unknown():
  with pytest.raises(ConfigError, match="unknown encoding method 'zip'"):
    get_encoder('zip')

"""Word list encoders for dictionary shards.

Every encoder takes words of one fixed length and produces a single text
stream. The matching `decode` needs that length back, it is never stored in
the stream itself (shard files carry it in their name).

The compact encodings (`frontopt`, `trie`) mix decimal counts with letters and
can only be read back because words never contain digits.
"""
from .errors import ConfigError, DecodeError, EncodeError
from .reader import ShardReader
from .trie import Trie


def common_prefix_length(s1, s2):
  n = 0
  for x, y in zip(s1, s2):
    if x != y:
      break
    n += 1
  return n


def front_coding(words):
  """Yield (prefix_length, suffix) of every word against the one before it."""
  previous = ''
  for i, current in enumerate(words):
    prefix_length = common_prefix_length(previous, current) if i else 0
    yield prefix_length, current[prefix_length:]
    previous = current


def check_words(words, alphabetic=False):
  length = None
  for word in words:
    if length is None:
      length = len(word)
    elif len(word) != length:
      raise EncodeError("word {!r} has length {}, expected {}".format(
        word, len(word), length))
    if alphabetic and any(c.isdigit() for c in word):
      raise EncodeError("word {!r} contains digits".format(word))


class Encoder:
  name = None

  def encode(self, words):
    raise NotImplementedError

  def decode(self, text, length):
    raise NotImplementedError

  def decode_empty_words(self, text):
    """Shards of zero-length words hold at most the empty word, encoded as nothing."""
    if text:
      raise DecodeError("unexpected data for empty words: {!r}".format(text))
    return [""]

  def write(self, path, words):
    data = self.encode(words).encode('utf-8')
    with open(path, 'wb') as fp:
      fp.write(data)
    return len(data)

  def __repr__(self):
    return "{}()".format(type(self).__name__)


class LinesEncoder(Encoder):
  """One word per line, uncompressed. Size baseline for the other encoders."""
  name = 'lines'

  def encode(self, words):
    words = list(words)
    check_words(words)
    return "".join(word + "\n" for word in words)

  def decode(self, text, length):
    if not text:
      return []
    if not text.endswith("\n"):
      raise DecodeError("missing final newline")
    words = text[:-1].split("\n")
    for word in words:
      if len(word) != length:
        raise DecodeError("word {!r} is not {} characters long".format(word, length))
    return words


class FrontCodingEncoder(Encoder):
  """Only the suffix not shared with the previous word, one per line."""
  name = 'front'

  def encode(self, words):
    words = list(words)
    check_words(words)
    return "\n".join(suffix for _, suffix in front_coding(words))

  def decode(self, text, length):
    if length == 0:
      return self.decode_empty_words(text)
    if not text:
      return []
    words = []
    previous = ''
    for suffix in text.split("\n"):
      if len(suffix) > length:
        raise DecodeError("suffix {!r} longer than {}".format(suffix, length))
      word = previous[:length - len(suffix)] + suffix
      if len(word) != length:
        raise DecodeError("record {!r} has no word to extend".format(suffix))
      words.append(word)
      previous = word
    return words


class OptimizedFrontCodingEncoder(Encoder):
  """Front coding without delimiters.

  After the first word, a suffix longer than one character is preceded by its
  length minus one in decimal. A bare letter means a one character suffix.
  """
  name = 'frontopt'

  def encode(self, words):
    words = list(words)
    check_words(words, alphabetic=True)
    out = []
    for i, (_, suffix) in enumerate(front_coding(words)):
      if i and len(suffix) > 1:
        out.append(str(len(suffix) - 1))
      out.append(suffix)
    return "".join(out)

  def decode(self, text, length):
    if length == 0:
      return self.decode_empty_words(text)
    reader = ShardReader(text)
    words = []
    previous = ''
    while not reader.at_end():
      if not words:
        suffix_length = length
      else:
        offset = reader.read_optional_int()
        suffix_length = 1 if offset is None else offset + 1
      if suffix_length > length:
        raise DecodeError("suffix length {} longer than {}".format(suffix_length, length))
      word = previous[:length - suffix_length] + reader.read_letters(suffix_length)
      words.append(word)
      previous = word
    return words


class TrieEncoder(Encoder):
  """Pre-order trie dump, `{char}{num_children}` per node.

  Leaves skip the count: with a known word length the decoder stops
  descending at the last character anyway.
  """
  name = 'trie'

  def encode(self, words):
    words = list(words)
    check_words(words, alphabetic=True)
    return Trie(words).serialize()

  def decode(self, text, length):
    if length == 0:
      return self.decode_empty_words(text)
    reader = ShardReader(text)
    words = []
    while not reader.at_end():
      self._read_node(reader, length, words)
    return words

  def _read_node(self, reader, length, words, depth=0, prefix=''):
    char = reader.read_letters(1)
    if depth == length - 1:
      words.append(prefix + char)
      return
    for _ in range(reader.read_int()):
      self._read_node(reader, length, words, depth+1, prefix + char)


ENCODERS = {
  encoder.name: encoder
  for encoder in [LinesEncoder, FrontCodingEncoder, OptimizedFrontCodingEncoder, TrieEncoder]
}


def get_encoder(name):
  if name not in ENCODERS:
    raise ConfigError("unknown encoding method {!r}".format(name))
  return ENCODERS[name]()

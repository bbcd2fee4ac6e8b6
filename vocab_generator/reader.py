from .errors import DecodeError


class ShardReader:
  """Cursor over an encoded shard, reading letter runs and decimal counts."""

  def __init__(self, text):
    self.text = text
    self.i = 0

  def read(self, num_chars):
    chars = self.text[self.i:self.i+num_chars]
    if len(chars) != num_chars:
      raise DecodeError("expected {} characters at offset {}, got {!r}".format(
        num_chars, self.i, chars))
    self.i += num_chars
    return chars

  def read_letters(self, num_chars):
    letters = self.read(num_chars)
    if num_chars and not letters.isalpha():
      raise DecodeError("expected letters at offset {}, got {!r}".format(
        self.i - num_chars, letters))
    return letters

  def peek_digit(self):
    return self.i < len(self.text) and self.text[self.i].isdigit()

  def read_int(self):
    start = self.i
    while self.peek_digit():
      self.i += 1
    if start == self.i:
      raise DecodeError("expected a count at offset {}".format(start))
    return int(self.text[start:self.i])

  def read_optional_int(self):
    return self.read_int() if self.peek_digit() else None

  def at_end(self):
    return self.i >= len(self.text)

  def __len__(self):
    return len(self.text)

"""Counter-based middle-square random number generator.

Bernard Widynski, "Squares: A Fast Counter-Based RNG"
(https://arxiv.org/abs/2004.06278). Output depends only on (counter, key), so
any draw can be reproduced without replaying the ones before it.
"""
from bitstring import BitArray, Bits

MASK32 = 0xffffffff
MASK64 = 0xffffffffffffffff

DEFAULT_KEY = 0x548c9decbce65297


def swap(x):
  x &= MASK64
  return ((x >> 32) | (x << 32)) & MASK64


def squares_32(counter, key):
  x = (counter * key) & MASK64
  y = x
  z = (y + key) & MASK64

  x = swap(x * x + y)
  x = swap(x * x + z)
  x = swap(x * x + y)

  return ((x * x + z) & MASK64) >> 32


def squares_64(counter, key):
  x = (counter * key) & MASK64
  y = x
  z = (y + key) & MASK64

  x = swap(x * x + y)
  x = swap(x * x + z)
  x = swap(x * x + y)

  t = (x * x + z) & MASK64
  x = swap(t)

  return t ^ (((x * x + y) & MASK64) >> 32)


class SquaresRng:
  def __init__(self, counter=0, key=DEFAULT_KEY):
    self.seed(counter, key)

  @classmethod
  def from_seed(cls, seed):
    if len(seed) != 8:
      raise ValueError("seed must be 8 bytes, got {}".format(len(seed)))
    return cls(0, Bits(seed).uintle)

  @classmethod
  def seed_from_u64(cls, seed):
    return cls.from_seed(Bits(uintle=seed & MASK64, length=64).tobytes())

  def seed(self, counter, key):
    self.counter = counter & MASK64
    self.key = key & MASK64

  def next_u32(self):
    result = squares_32(self.counter, self.key)
    self.counter = (self.counter + 1) & MASK64
    return result

  def next_u64(self):
    result = squares_64(self.counter, self.key)
    self.counter = (self.counter + 1) & MASK64
    return result

  def fill_bytes(self, size):
    """Return `size` random bytes made of little-endian draws.

    Whole 8-byte chunks take one 64-bit draw each. A tail of 5 to 7 bytes is
    cut from one more 64-bit draw, a tail of 1 to 4 bytes from a 32-bit draw.
    """
    bits = BitArray()
    for _ in range(size // 8):
      bits.append(Bits(uintle=self.next_u64(), length=64))
    tail = size % 8
    if tail > 4:
      bits.append(Bits(uintle=self.next_u64(), length=64)[:tail * 8])
    elif tail > 0:
      bits.append(Bits(uintle=self.next_u32(), length=32)[:tail * 8])
    return bits.tobytes()

  def gen_index(self, bound):
    """Uniform integer in [0, bound).

    Widening multiply of a 32-bit draw by `bound`, rejecting draws whose low
    word falls above the acceptance zone. Published challenges depend on this
    exact procedure, do not change it.
    """
    if bound <= 0 or bound > MASK32:
      raise ValueError("bound out of range: {}".format(bound))
    zone = ((bound << (32 - bound.bit_length())) - 1) & MASK32
    while True:
      m = self.next_u32() * bound
      if m & MASK32 <= zone:
        return m >> 32

  def choose(self, sequence):
    if not sequence:
      raise ValueError("cannot choose from an empty sequence")
    return sequence[self.gen_index(len(sequence))]

  def __repr__(self):
    return "SquaresRng(counter={:#x}, key={:#x})".format(self.counter, self.key)

import collections
import logging
import os

from .errors import EncodeError

logger = logging.getLogger(__name__)


def first_letters(candidates):
  return sorted(set(word[0] for word in candidates if word))


def shard_name(length, letter):
  return "{}{}".format(length, letter)


def shards(dictionary, candidates, min_length, max_length):
  """Yield ((length, letter), body) for each non-empty dictionary shard.

  Only letters starting some candidate word get a shard. Bodies keep
  dictionary order and drop the first letter, which the shard key implies.
  """
  groups = collections.defaultdict(list)
  for word in dictionary:
    if word:
      groups[(len(word), word[0])].append(word[1:])

  letters = first_letters(candidates)
  for length in range(min_length, max_length + 1):
    for letter in letters:
      body = groups.get((length, letter))
      if not body:
        continue
      yield (length, letter), body


def write_dictionary(directory, shard_iter, encoder, verify=False):
  """Encode every shard to `{length}{letter}.txt`, return bytes per shard name."""
  os.makedirs(directory, exist_ok=True)
  sizes = {}
  for (length, letter), body in shard_iter:
    name = shard_name(length, letter)
    path = os.path.join(directory, name + ".txt")
    sizes[name] = encoder.write(path, body)
    logger.debug("Wrote %s: %d words, %d bytes", name, len(body), sizes[name])

    if verify:
      with open(path, 'r', encoding='utf-8', newline='') as fp:
        decoded = encoder.decode(fp.read(), length - 1)
      if decoded != list(body):
        raise EncodeError("shard {} does not decode to its words".format(name))

  logger.info("Wrote %d dictionary shards to %s", len(sizes), directory)
  return sizes

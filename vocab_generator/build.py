"""Build the static files of the game.

Output structure:

- `{dictionary_dir}/{length}{letter}.txt`: accepted words of `length`
  characters starting with `letter`, first letter stripped, encoded.
- `challenge-count.txt`: number of challenges.
- `{challenge_dir}/{index}.txt`: solution of challenge `index` (1-based).
- `{challenge_dir}/{YYYY-MM-DD}.txt`: solution of the daily challenge.
"""
import datetime
import logging
import math
import os

from . import challenge, lexique, partition
from .encoder import get_encoder
from .errors import ConfigError
from .squares import DEFAULT_KEY

logger = logging.getLogger(__name__)

MIN_LENGTH = 6
MAX_LENGTH = 10
NUM_DAILY_CHALLENGES = 365 * 2

# Adjectif, adverbe, nom commun, verbe.
DICTIONARY_CGRAMS = frozenset(['ADJ', 'ADV', 'NOM', 'VER'])

MIN_FREQUENCY = 1.0


class Config:
  def __init__(self,
               database_path='Lexique383.tsv',
               encoder_name='front',
               output_path='public',
               challenge_dir='challenge',
               dictionary_dir='dictionary',
               write_challenge=True,
               write_dictionary=True,
               random_seed=DEFAULT_KEY,
               min_length=MIN_LENGTH,
               max_length=MAX_LENGTH,
               num_daily_challenges=NUM_DAILY_CHALLENGES,
               start_date=None,
               verify=False):
    self.database_path = database_path
    self.encoder_name = encoder_name
    self.output_path = output_path
    self.challenge_dir = challenge_dir
    self.dictionary_dir = dictionary_dir
    self.write_challenge = write_challenge
    self.write_dictionary = write_dictionary
    self.random_seed = random_seed
    self.min_length = min_length
    self.max_length = max_length
    self.num_daily_challenges = num_daily_challenges
    self.start_date = start_date
    self.verify = verify

  def today(self):
    return self.start_date or datetime.datetime.now(datetime.timezone.utc).date()


class Report:
  def __init__(self, encoder_name):
    self.encoder_name = encoder_name
    self.dictionary_words = 0
    self.challenge_words = 0
    self.daily_challenges = 0
    self.shard_sizes = {}

  def print_debug(self):
    print("Encoder:", self.encoder_name)
    print("Dictionary Words:", self.dictionary_words)
    print("Challenge Words:", self.challenge_words)
    print("Daily Challenges:", self.daily_challenges)
    print("Shards:", len(self.shard_sizes))
    if self.shard_sizes:
      total = sum(self.shard_sizes.values())
      largest = max(self.shard_sizes, key=self.shard_sizes.get)
      print("Largest Shard: {} ({} Bytes)".format(largest, self.shard_sizes[largest]))
      print("Dictionary (Bytes):", total)
      print("Dictionary (KiB): {}".format(math.ceil(total / 1024)))
    print("")


def sort_dedup(words):
  return sorted(set(words))


def is_dictionary_record(record, min_length, max_length):
  return (record.cgram in DICTIONARY_CGRAMS and
          min_length <= len(record.word) <= max_length and
          record.word.isascii() and record.word.isalpha())


def is_challenge_record(record):
  if record.freqfilms2 < MIN_FREQUENCY or record.freqlivres < MIN_FREQUENCY:
    return False
  if record.cgram == 'NOM':
    return True
  if record.cgram == 'VER':
    # Infinitive, present or past participle.
    for infover in record.infover:
      if infover.mode == 'inf':
        return True
      if infover.mode == 'par' and infover.temps in ('pre', 'pas'):
        return True
  return False


def select_words(records, min_length, max_length):
  """Split records into (dictionary, candidates), both sorted and deduplicated.

  Only records of a dictionary category get normalized, so an odd character
  in a discarded row (an onomatopoeia, a pronoun) never stops the build.
  """
  records = [r._replace(word=lexique.normalize(r.ortho))
             for r in records if r.cgram in DICTIONARY_CGRAMS]
  records = [r for r in records if is_dictionary_record(r, min_length, max_length)]
  dictionary = sort_dedup(r.word for r in records)
  candidates = sort_dedup(r.word for r in records if is_challenge_record(r))
  return dictionary, candidates


def check_config(config):
  encoder = get_encoder(config.encoder_name)
  if config.min_length < 1 or config.min_length > config.max_length:
    raise ConfigError("invalid word length range {}..{}".format(
      config.min_length, config.max_length))
  if config.num_daily_challenges < 0:
    raise ConfigError("negative number of daily challenges: {}".format(
      config.num_daily_challenges))
  return encoder


def build(config):
  encoder = check_config(config)
  report = Report(encoder.name)

  records = lexique.load(config.database_path)
  dictionary, candidates = select_words(records, config.min_length, config.max_length)
  report.dictionary_words = len(dictionary)
  report.challenge_words = len(candidates)
  logger.info("Selected %d dictionary words and %d challenge words",
    len(dictionary), len(candidates))

  if config.write_challenge:
    challenge.write_challenges(
      config.output_path, config.challenge_dir, candidates, config.random_seed,
      config.today(), config.num_daily_challenges)
    report.daily_challenges = config.num_daily_challenges

  if config.write_dictionary:
    shards = partition.shards(dictionary, candidates, config.min_length, config.max_length)
    report.shard_sizes = partition.write_dictionary(
      os.path.join(config.output_path, config.dictionary_dir), shards, encoder,
      verify=config.verify)

  return report

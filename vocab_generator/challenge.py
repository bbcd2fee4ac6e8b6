"""Daily and indexed challenges.

Each day gets its own generator seeded with the number of days between the
Unix epoch and that date, so a rebuild never changes a published day as long
as the candidate list and the key stay the same.
"""
import datetime
import logging
import os

from .errors import VocabError
from .squares import SquaresRng

logger = logging.getLogger(__name__)

EPOCH = datetime.date(1970, 1, 1)

COUNT_FILENAME = "challenge-count.txt"


def days_since_epoch(date):
  return (date - EPOCH).days


def daily_challenge(date, candidates, key):
  rng = SquaresRng(days_since_epoch(date), key)
  return rng.choose(candidates)


def daily_challenges(start, num_days, candidates, key):
  for offset in range(num_days):
    date = start + datetime.timedelta(days=offset)
    yield date, daily_challenge(date, candidates, key)


def indexed_challenges(candidates):
  return enumerate(candidates, 1)


def write_text(path, text):
  with open(path, 'w', encoding='utf-8', newline='') as fp:
    fp.write(text)


def write_challenges(output_path, challenge_dir, candidates, key, start, num_days):
  if num_days and not candidates:
    raise VocabError("no candidate words to draw daily challenges from")

  directory = os.path.join(output_path, challenge_dir)
  os.makedirs(directory, exist_ok=True)

  write_text(os.path.join(output_path, COUNT_FILENAME), str(len(candidates)))

  for index, word in indexed_challenges(candidates):
    write_text(os.path.join(directory, "{}.txt".format(index)), word)

  for date, word in daily_challenges(start, num_days, candidates, key):
    write_text(os.path.join(directory, "{}.txt".format(date.isoformat())), word)

  logger.info("Wrote %d challenges and %d daily challenges from %s to %s",
    len(candidates), num_days, start.isoformat(), directory)

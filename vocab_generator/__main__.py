import argparse
import datetime
import logging
import sys

from .build import Config, build
from .encoder import ENCODERS
from .errors import VocabError
from .squares import DEFAULT_KEY


def parse_date(s):
  try:
    return datetime.date.fromisoformat(s)
  except ValueError:
    raise argparse.ArgumentTypeError("invalid date {!r}, expected YYYY-MM-DD".format(s))


def parse_seed(s):
  try:
    return int(s, 0)
  except ValueError:
    raise argparse.ArgumentTypeError("invalid seed {!r}".format(s))


def parse_args(argv=None):
  defaults = Config()
  parser = argparse.ArgumentParser(
    prog='vocab-generator',
    description="Build dictionary shards and challenges from a Lexique database.")
  parser.add_argument("--database", default=defaults.database_path,
    help="Path to the word database.")
  parser.add_argument("--encoder", default=defaults.encoder_name,
    help="Dictionary encoding method ({}).".format(", ".join(ENCODERS)))
  parser.add_argument("--output", default=defaults.output_path,
    help="Output directory.")
  parser.add_argument("--challenge-dir", default=defaults.challenge_dir,
    help="Directory for the challenges.")
  parser.add_argument("--dictionary-dir", default=defaults.dictionary_dir,
    help="Directory for the dictionaries.")
  parser.add_argument("--no-challenge", action="store_true",
    help="Do not output challenges.")
  parser.add_argument("--no-dictionary", action="store_true",
    help="Do not output dictionaries.")
  parser.add_argument("--seed", type=parse_seed, default=DEFAULT_KEY,
    help="Random key, decimal or 0x-prefixed hex.")
  parser.add_argument("--days", type=int, default=defaults.num_daily_challenges,
    help="Number of daily challenges to generate.")
  parser.add_argument("--start-date", type=parse_date, default=None,
    help="First daily challenge date (default: today, UTC).")
  parser.add_argument("--min-length", type=int, default=defaults.min_length)
  parser.add_argument("--max-length", type=int, default=defaults.max_length)
  parser.add_argument("--verify", action="store_true",
    help="Decode every dictionary shard after writing it.")
  parser.add_argument("--stats", action="store_true",
    help="Print word counts and dictionary sizes.")
  parser.add_argument("-v", "--verbose", action="store_true")
  return parser.parse_args(argv)


def main(argv=None):
  args = parse_args(argv)
  logging.basicConfig(
    level=logging.INFO if args.verbose else logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

  config = Config(
    database_path=args.database,
    encoder_name=args.encoder,
    output_path=args.output,
    challenge_dir=args.challenge_dir,
    dictionary_dir=args.dictionary_dir,
    write_challenge=not args.no_challenge,
    write_dictionary=not args.no_dictionary,
    random_seed=args.seed,
    min_length=args.min_length,
    max_length=args.max_length,
    num_daily_challenges=args.days,
    start_date=args.start_date,
    verify=args.verify,
  )

  try:
    report = build(config)
  except (VocabError, OSError) as err:
    print("Error: {}".format(err), file=sys.stderr)
    return 1

  if args.stats:
    report.print_debug()
  return 0


if __name__ == "__main__":
  sys.exit(main())

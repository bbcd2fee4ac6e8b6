"""Reader for the Lexique 3.83 database (tab separated, one row per form).

Only the columns the build needs are parsed: `ortho`, `cgram`, `freqfilms2`,
`freqlivres` and `infover`. Codes are kept as the strings Lexique uses
(`NOM`, `VER`, `inf`, ...) and checked against the known sets; anything else
aborts the load with a `ParseError`.

`Record.word` is left empty here; callers fill it with `normalize(ortho)` for
the rows they keep.
"""
import collections
import csv
import logging

from .errors import ParseError

logger = logging.getLogger(__name__)

CGRAMS = frozenset([
  'ADJ', 'ADJ:dem', 'ADJ:ind', 'ADJ:int', 'ADJ:num', 'ADJ:pos',
  'ADV',
  'ART:def', 'ART:ind',
  'AUX', 'CON', 'LIA', 'NOM', 'ONO', 'PRE',
  'PRO:dem', 'PRO:ind', 'PRO:int', 'PRO:per', 'PRO:pos', 'PRO:rel',
  'VER',
])

MODES = frozenset(['ind', 'cnd', 'sub', 'par', 'inf', 'imp'])
TEMPS = frozenset(['pre', 'fut', 'imp', 'pas'])
PERSONNES = frozenset(['1s', '2s', '3s', '1p', '2p', '3p'])

COLUMNS = ['ortho', 'cgram', 'freqfilms2', 'freqlivres', 'infover']

DIACRITICS = {}
for base, accented in [
    ('a', 'áàâäã'), ('e', 'éèêë'), ('i', 'îï'), ('o', 'ôö'),
    ('u', 'úùûü'), ('c', 'ç'), ('n', 'ñ'), ('ae', 'æ'), ('oe', 'œ')]:
  for char in accented:
    DIACRITICS[char] = base

Record = collections.namedtuple(
  'Record', ['word', 'ortho', 'cgram', 'freqfilms2', 'freqlivres', 'infover'])

Infover = collections.namedtuple('Infover', ['mode', 'temps', 'personne'])


def normalize(s):
  """Lowercase `s` and strip its diacritics, `æ`/`œ` become `ae`/`oe`."""
  result = []
  for char in s.lower():
    if char in DIACRITICS:
      result.append(DIACRITICS[char])
    elif char.isascii():
      result.append(char)
    else:
      raise ParseError("character", char, s)
  return "".join(result)


def parse_code(name, token, known, context):
  if token not in known:
    raise ParseError(name, token, context)
  return token


def parse_cgram(s):
  if not s:
    return None
  return parse_code("cgram", s, CGRAMS, s)


def parse_infover(s):
  parts = s.split(':')
  mode = parse_code("infover mode", parts[0], MODES, s)
  temps = parse_code("infover temps", parts[1], TEMPS, s) if len(parts) > 1 else None
  personne = parse_code("infover personne", parts[2], PERSONNES, s) if len(parts) > 2 else None
  return Infover(mode, temps, personne)


def parse_vec_infover(s):
  return tuple(parse_infover(item) for item in s.split(';') if item)


def parse_frequency(name, s):
  try:
    return float(s)
  except ValueError:
    raise ParseError(name, s, name) from None


def parse_record(row):
  ortho = row['ortho']
  return Record(
    word=None,
    ortho=ortho,
    cgram=parse_cgram(row['cgram']),
    freqfilms2=parse_frequency('freqfilms2', row['freqfilms2']),
    freqlivres=parse_frequency('freqlivres', row['freqlivres']),
    infover=parse_vec_infover(row['infover']),
  )


def read_records(lines):
  reader = csv.DictReader(lines, delimiter='\t', quoting=csv.QUOTE_NONE)
  missing = [c for c in COLUMNS if c not in (reader.fieldnames or [])]
  if missing:
    raise ParseError("header", missing[0], "\t".join(reader.fieldnames or []))
  for row in reader:
    if None in row.values():
      raise ParseError("row", row['ortho'], "line {}".format(reader.line_num))
    yield parse_record(row)


def load(path):
  with open(path, 'r', encoding='utf-8', newline='') as fp:
    records = list(read_records(fp))
  logger.info("Loaded %d records from %s", len(records), path)
  return records

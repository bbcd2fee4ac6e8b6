import pytest

from lexique_rows import ROWS, tsv


@pytest.fixture
def database(tmp_path):
  path = tmp_path / "Lexique383.tsv"
  path.write_text(tsv(ROWS), encoding="utf-8")
  return path

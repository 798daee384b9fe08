import logging
from pathlib import Path

import pytest
from packages.datasets import Lexicon, load_lexicon, parse_entry, parse_entries
from packages.engine import MalformedLexiconEntry, EmptyLexicon


@pytest.mark.parametrize("line,expected", [
    ("CRANE", "CRANE"),
    (" crane\t", "CRANE"),
    ("Slate", "SLATE"),
])
def test_parse_entry_normalizes(line, expected):
    assert parse_entry(line) == expected


@pytest.mark.parametrize("line", ["CRANES", "CRAN", "CR4NE", "CAFÉS", "CR NE"])
def test_parse_entry_rejects_malformed(line):
    with pytest.raises(MalformedLexiconEntry):
        parse_entry(line)


def test_parse_entries_dedupes_and_counts_rejects():
    words, rejected = parse_entries(["crane", "CRANE", "", "toolong", "SLATE"])
    assert words == ["CRANE", "SLATE"]
    assert rejected == 1


def test_load_lexicon_skips_bad_lines(tmp_path: Path, caplog):
    p = tmp_path / "words.txt"
    p.write_text("crane\nslate\n12345\nabc\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        lex = load_lexicon(p)
    assert lex.master == frozenset({"CRANE", "SLATE"})
    assert "skipped 2 malformed" in caplog.text


def test_load_lexicon_empty_is_fatal(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("nope\n\n1234567\n", encoding="utf-8")
    with pytest.raises(EmptyLexicon):
        load_lexicon(p)


def test_load_lexicon_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_lexicon(tmp_path / "missing.txt")


def test_restore_gives_fresh_full_copy():
    lex = Lexicon(["CRANE", "SLATE", "TRACE"])
    lex.working.discard("CRANE")
    lex.working.discard("SLATE")
    old = lex.working
    lex.restore()
    assert lex.working == set(lex.master)
    assert len(lex.working) == len(lex)
    assert lex.working is not old
    lex.working.clear()
    assert len(lex.master) == 3


def test_bundled_wordlist_loads():
    p = Path(__file__).resolve().parents[1] / "packages/datasets/data/words_5.txt"
    lex = load_lexicon(p)
    assert len(lex) > 300
    assert all(len(w) == 5 and w.isupper() for w in lex.master)


def test_lexicon_normalizes_words():
    lex = Lexicon(["crane", " Slate ", "CRANE"])
    assert lex.master == frozenset({"CRANE", "SLATE"})
    assert lex.working == {"CRANE", "SLATE"}


@pytest.mark.parametrize("bad", ["toolong", "ab", "CR4NE"])
def test_lexicon_rejects_malformed_words(bad):
    with pytest.raises(MalformedLexiconEntry):
        Lexicon(["CRANE", bad])


def test_lexicon_without_words_is_empty_error():
    with pytest.raises(EmptyLexicon):
        Lexicon([])

from pathlib import Path

import pytest
from packages.datasets import read_wordlist, write_wordlist, load_lexicon


def test_read_wordlist_strips_byte_order_mark(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"\xef\xbb\xbfCRANE\r\nSLATE\r\n")
    assert read_wordlist(p) == ["CRANE", "SLATE"]
    assert load_lexicon(p).master == frozenset({"CRANE", "SLATE"})


def test_write_wordlist_writes_canonical_form(tmp_path: Path):
    out = write_wordlist(["crane", " Slate"], tmp_path / "sub" / "words.txt")
    assert Path(out).read_text(encoding="utf-8") == "CRANE\nSLATE\n"


def test_read_wordlist_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_wordlist(tmp_path / "missing.txt")

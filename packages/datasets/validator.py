"""
Word-list validator.

What this module does:
- Check a lexicon file against the loader's rules (five letters A–Z, one per line).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for run manifests) and a one-line summary.

Unlike the loader, which quietly skips bad lines, this reports them so a
list can be cleaned before it is used.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("packages/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import read_wordlist
from .lexicon import parse_entries


@dataclass
class WordlistReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # valid lines (before dedupe)
    unique_count: int    # distinct valid words
    invalid_lines: int   # lines rejected by the loader rules
    blank_lines: int     # empty/whitespace-only lines
    sha256: str          # SHA-256 of raw bytes ("" if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(path: str) -> Dict:
    """
    Validate a word list.

    Returns
    -------
    Dict
        JSON-serializable WordlistReport. `passed` requires the file to exist,
        hold at least one valid word and have no invalid lines. Duplicates
        and blank lines are reported as issues but do not fail the check
        (the loader handles both).
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path, False, 0, 0, 0, 0, "",
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    lines = read_wordlist(p)
    blank = sum(1 for ln in lines if not ln.strip())
    words, invalid = parse_entries(lines)
    valid = len(lines) - blank - invalid

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=valid,
        unique_count=len(words),
        invalid_lines=invalid,
        blank_lines=blank,
        sha256=_sha256_file(p),
    )

    if not words:
        rep.issues.append("word list contains 0 valid words")
    if invalid:
        rep.issues.append(f"word list has {invalid} invalid line(s)")
    if blank:
        rep.issues.append(f"word list has {blank} blank line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("word list contains duplicate lines")

    rep.passed = bool(words) and invalid == 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        words=2315 (uniq=2315, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )

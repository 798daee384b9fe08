"""
Download a five-letter word list and write it in lexicon format.

What it does:
- Fetches the URL (a plain-text list or an HTML page).
- HTML is reduced to its visible text with BeautifulSoup.
- Every whitespace-separated token that is exactly five letters A–Z is kept,
  uppercased, de-duplicated with first-seen order preserved.
- Writes one word per line.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --out packages/datasets/data/words_5.txt
    # alphabetical instead of source order:
    python -m script.fetch_wordlist --url ... --sort
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup

from packages.datasets.io import write_wordlist
from packages.datasets.lexicon import parse_entries

TOKEN_RE = re.compile(r"\b[A-Za-z]{5}\b")


def extract_words(body: str, content_type: str = "text/plain") -> list[str]:
    if "html" in content_type or body.lstrip().startswith("<"):
        body = BeautifulSoup(body, "html.parser").get_text("\n", strip=True)
    words, _ = parse_entries(TOKEN_RE.findall(body))
    return words


def fetch_words(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, r.headers.get("Content-Type", ""))


def main():
    ap = argparse.ArgumentParser(description="Fetch a five-letter word list")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="packages/datasets/data/words_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    path = write_wordlist(words, args.out)
    print(f"Wrote {len(words)} words -> {path}")


if __name__ == "__main__":
    main()

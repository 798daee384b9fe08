from .validator import validate_wordlist, pretty_summary
from .io import read_wordlist, write_wordlist
from .lexicon import Lexicon, load_lexicon, parse_entry, parse_entries

__all__ = [
    "validate_wordlist", "pretty_summary", "read_wordlist", "write_wordlist",
    "Lexicon", "load_lexicon", "parse_entry", "parse_entries",
]

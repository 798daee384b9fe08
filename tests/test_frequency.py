from packages.engine import letter_frequencies, score_candidates, word_score, ALPHABET


def test_letter_frequencies_counts_words_not_occurrences():
    table = letter_frequencies(["LEVEL", "LEMON", "CRANE"])
    assert set(table) == set(ALPHABET)
    assert table["L"] == 2      # LEVEL has two Ls but counts once
    assert table["E"] == 3
    assert table["C"] == 1
    assert table["Z"] == 0


def test_letter_frequencies_order_independent():
    words = ["CRANE", "MONEY", "ABOUT", "SLEET"]
    assert letter_frequencies(words) == letter_frequencies(list(reversed(words)))
    assert letter_frequencies(set(words)) == letter_frequencies(words)


def test_word_score_counts_distinct_letters_once():
    table = {"S": 5, "L": 4, "E": 10, "T": 3, "A": 7}
    assert word_score("SLEET", table) == 5 + 4 + 10 + 3
    assert word_score("SLATE", table) == 5 + 4 + 7 + 3 + 10
    assert word_score("QQQQQ", table) == 0


def test_score_candidates_maps_every_word():
    table = letter_frequencies(["CRANE", "MONEY", "ABOUT"])
    scores = score_candidates(["CRANE", "ABOUT"], table)
    assert scores == {"CRANE": 8, "ABOUT": 7}

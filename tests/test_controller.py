from packages.datasets import Lexicon
from packages.engine import from_pattern
from packages.harness import RoundController, Phase, OPENING_SCRIPT


class ScriptedOracle:
    """Replays canned patterns; a pattern ending in '*' resolves the puzzle."""

    def __init__(self, patterns, secret="CRANE"):
        self.patterns = list(patterns)
        self.secret = secret
        self.guesses = []
        self.completed = 0
        self.wins = 0

    def submit_guess(self, word):
        self.guesses.append(word)
        patt = self.patterns.pop(0)
        if patt.endswith("*"):
            patt = patt[:-1]
            self.completed += 1
            self.wins += patt == "GGGGG"
        return from_pattern(patt)

    def completed_puzzle_count(self):
        return self.completed

    def revealed_secret_of_previous_puzzle(self):
        return self.secret

    def total_wins(self):
        return self.wins


# Letters outside the opening script: J Q V X Y Z (plus A/E for the scenario)
FILLER = {"JQVXY", "ZZYYX", "XJQVZ"}


def test_opening_script_is_played_regardless_of_state():
    oracle = ScriptedOracle(["-----"] * 4)
    c = RoundController(Lexicon(FILLER), oracle)
    for n in range(4):
        assert c.phase is Phase.OPENING
        r = c.play_round()
        assert r.guess == OPENING_SCRIPT[n] and r.accepted and r.round == n
    assert oracle.guesses == list(OPENING_SCRIPT)
    assert c.round == 4 and c.phase is Phase.SOLVING
    assert c.working == FILLER


def test_solving_uses_selector_after_opening():
    oracle = ScriptedOracle(["-----"] * 4 + ["YYYY-"])
    c = RoundController(Lexicon(FILLER), oracle)
    for _ in range(4):
        c.play_round()
    # XJQVZ and JQVXY both have five distinct letters and tie; alphabetical wins
    assert c.next_guess() == "JQVXY"
    r = c.play_round()
    assert r.phase is Phase.SOLVING and r.guess == "JQVXY"
    # ZZYYX has no J; XJQVZ has J, Q, V, X all away from the reported slots
    assert c.working == {"XJQVZ"}


def test_end_to_end_opening_scenario():
    lexicon = Lexicon(FILLER | {"AXYEZ", "QYAEV", "JAVEZ", "AXEYZ", "CRANE"})
    oracle = ScriptedOracle(["-Y-G-", "-----", "-----", "-----"])
    c = RoundController(lexicon, oracle)
    for _ in range(4):
        c.play_round()
    # needs an A (not in slot 1) and an E in slot 3, nothing from the other letters
    assert c.working == {"AXYEZ", "QYAEV"}
    assert c.round == 4 and c.phase is Phase.SOLVING
    assert c.knowledge.placements == {"E": {3}}
    assert c.knowledge.present == {"A"}


def test_known_present_survives_opening_and_clears_on_first_solving_round():
    lexicon = Lexicon({"ASXEY", "QSAEV", "SAXEY"})
    oracle = ScriptedOracle(["-Y-GY", "-----", "-----", "-----", "YG-G-"])
    c = RoundController(lexicon, oracle)
    for _ in range(4):
        c.play_round()
    assert c.working == {"ASXEY", "QSAEV"}
    assert c.knowledge.present == {"A", "S"}
    # both yellows still steer the first solving guess
    assert c.next_guess() == "ASXEY"
    c.play_round()
    # S is placed now and A was reported again; nothing stale carries over
    assert c.knowledge.present == {"A"}
    assert c.knowledge.placements == {"E": {3}, "S": {1}}
    assert c.working == {"QSAEV"}


def test_invalid_round_changes_nothing():
    oracle = ScriptedOracle(["!!!!!", "-----"])
    c = RoundController(Lexicon(FILLER), oracle)
    r = c.play_round()
    assert not r.accepted and not r.reset
    assert c.round == 0 and c.working == FILLER
    r = c.play_round()
    assert r.guess == "FADES" and r.accepted and c.round == 1


def test_reset_restores_full_lexicon_and_clears_knowledge():
    words = FILLER | {"AXYEZ", "QYAEV", "JAVEZ"}
    oracle = ScriptedOracle(["-Y-G-", "-----", "GGGGG*"], secret="MIGHT")
    c = RoundController(Lexicon(words), oracle)
    c.play_round()
    c.play_round()
    assert len(c.working) < len(words)
    r = c.play_round()
    assert r.reset and r.secret == "MIGHT" and r.guess == "MIGHT"
    assert c.last_secret == "MIGHT"
    assert len(c.working) == len(c.lexicon.master)
    assert c.round == 0 and c.phase is Phase.OPENING
    assert c.knowledge.placements == {} and c.knowledge.present == set()
    assert c.next_guess() == "FADES"


def test_rounds_stops_after_requested_puzzles():
    oracle = ScriptedOracle(["-----", "GGGGG*", "-----*"])
    c = RoundController(Lexicon(FILLER), oracle)
    results = list(c.rounds(max_puzzles=2))
    assert [r.reset for r in results] == [False, True, True]
    assert oracle.wins == 1 and oracle.completed == 2

# apps/cli/run.py
"""
CLI entry point: let the solver play puzzle after puzzle against a simulated
oracle and report the win rate.

This script:
  1) Validates the word list (prints counts + SHA, flags bad lines).
  2) Loads the lexicon and builds the oracle and round controller.
  3) Plays --games puzzles (or forever with --games 0), either printing every
     round as coloured tiles or showing a progress indicator, and writes:
       - CSV:  one row per puzzle + guess/pattern history columns
       - JSON: manifest with config, word-list report, git commit, win counts

Usage:
    python -m apps.cli.run --games 500 --seed 7
    python -m apps.cli.run --games 0 --show-rounds      # runs until Ctrl-C
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import validate_wordlist, pretty_summary, load_lexicon, read_wordlist
from packages.datasets.lexicon import parse_entries
from packages.engine.errors import SolverError
from packages.harness import RoundController, SimulatedOracle, run_session, win_rate
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.harness.render import render_round

DEFAULT_WORDS = str(Path(__file__).resolve().parents[2] / "packages/datasets/data/words_5.txt")


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more; got {n}")
    return n


def _build(args):
    lexicon = load_lexicon(args.words)
    if args.answers:
        answers, _ = parse_entries(read_wordlist(args.answers))
    else:
        answers = sorted(lexicon.master)
    oracle = SimulatedOracle(answers, seed=args.seed)
    return lexicon, oracle, RoundController(lexicon, oracle)


def _play_forever(controller: RoundController, color: bool) -> None:
    oracle = controller.oracle
    for r in controller.rounds():
        print(render_round(r, oracle.total_wins(), oracle.completed_puzzle_count(), color=color))


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordle autosolver: letter-frequency solver runs")
    ap.add_argument("--words", default=DEFAULT_WORDS,
                    help="word list the solver guesses from (one word per line)")
    ap.add_argument("--answers",
                    help="secret pool for the simulated oracle (default: same as --words)")
    ap.add_argument("--games", type=_non_negative, default=100,
                    help="number of puzzles to play; 0 = run until interrupted")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for secret selection")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--show-rounds", action="store_true",
                    help="print every round as coloured tiles with the running win rate")
    ap.add_argument("--no-color", action="store_true", help="plain G/Y/- patterns instead of ANSI")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) Build lexicon, oracle and controller
    try:
        lexicon, oracle, controller = _build(args)
    except (SolverError, FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    color = not args.no_color and sys.stdout.isatty()

    if args.games == 0:
        try:
            _play_forever(controller, color)
        except KeyboardInterrupt:
            print(f"\nstopped — win rate {oracle.total_wins()}/{oracle.completed_puzzle_count()}")
            return 0
        except SolverError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if args.show_rounds:
        mode = "off"

    bar = tqdm(total=args.games, ncols=80, desc="Solving", unit="game") if mode == "bar" else None
    start = time.time()
    last_print = 0.0
    done = 0

    def on_round(r):
        if args.show_rounds:
            print(render_round(r, oracle.total_wins(), oracle.completed_puzzle_count(),
                               color=color))

    def on_puzzle(rec):
        nonlocal done, last_print
        done += 1
        if bar is not None:
            bar.update(1)
            bar.set_postfix(wins=oracle.total_wins())
        elif mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (done == args.games):
                elapsed = now - start
                pct = 100.0 * done / max(1, args.games)
                sys.stderr.write(
                    f"\r[{done}/{args.games}] {pct:5.1f}% | wins {oracle.total_wins()} "
                    f"| elapsed {elapsed:6.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    # 4) Play
    try:
        results = run_session(controller, args.games, on_round=on_round, on_puzzle=on_puzzle)
    except SolverError as e:
        print(f"\nerror: {e}", file=sys.stderr)
        return 1
    finally:
        if bar is not None:
            bar.close()
        elif mode == "plain":
            sys.stderr.write("\n")
            sys.stderr.flush()

    wins = sum(1 for r in results if r["success"])
    print(f"win rate {wins}/{len(results)} ({100.0 * win_rate(results):.1f}%)")

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "lexicon_size": len(lexicon),
        "num_puzzles": len(results),
        "wins": wins,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

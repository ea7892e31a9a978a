"""CLI entrypoint for the noitu word-chain engine.

Usage:
  python -m noitu.cli check "thế giới" --current "thế chân"
  python -m noitu.cli next --current "thế chân" --history "chân thật"
  python -m noitu.cli demo --turns 5
"""

from __future__ import annotations

import argparse
import json
import random
from pathlib import Path
from typing import List, Optional

from .dictionary import load_dictionary
from .models import GameState, WordPair
from .next_word_finder import NextWordFinder

DEFAULT_CONFIG = {
    "dictionary_path": "resources/word_pairs.json",
    "seed": None,
}


def load_config(path: str | Path) -> dict:
    """Read config JSON over the defaults; raises ValueError on bad values."""
    path = Path(path)
    if not path.exists():
        return dict(DEFAULT_CONFIG)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a JSON object")
    cfg = dict(DEFAULT_CONFIG)
    cfg.update(data)
    seed = cfg.get("seed")
    # bool is an int subclass but not a usable seed here
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"Invalid seed in {path}: {seed!r} (expected an integer or null)")
    if not isinstance(cfg.get("dictionary_path"), str):
        raise ValueError(f"Invalid dictionary_path in {path}: {cfg.get('dictionary_path')!r}")
    return cfg


def _parse_pairs(values: Optional[List[str]]) -> List[WordPair]:
    return [WordPair.from_text(v) for v in values or []]


def _fmt_pairs(pairs: List[WordPair]) -> str:
    return ", ".join(f'"{p}"' for p in pairs)


def _build_finder(args: argparse.Namespace) -> NextWordFinder:
    cfg = load_config(args.config)
    dictionary_path = args.dictionary or cfg.get("dictionary_path")
    seed = args.seed if args.seed is not None else cfg.get("seed")
    dictionary = load_dictionary(dictionary_path)
    print(f"Loaded dictionary from: {dictionary_path} ({len(dictionary)} first syllables)")
    return NextWordFinder(dictionary, rng=random.Random(seed))


def cmd_check(args: argparse.Namespace) -> int:
    finder = _build_finder(args)
    checker = finder.checker
    used = {p.key for p in _parse_pairs(args.used)}

    result = checker.validate_word(args.word, used)
    if result.is_valid and args.current:
        result = checker.validate_connection(
            WordPair.from_text(args.current), WordPair.from_text(args.word)
        )

    if result.is_valid:
        print(f'"{args.word}": Valid')
        return 0
    print(f'"{args.word}": Invalid ({result.reason}): {result.error}')
    return 2


def cmd_next(args: argparse.Namespace) -> int:
    finder = _build_finder(args)
    current = WordPair.from_text(args.current) if args.current else None
    history = _parse_pairs(args.history)

    result = finder.find_next_word(current, history)
    if result.found:
        print(f"Next word: {result.word}")
        if result.alternatives:
            print(f"  Alternatives: {_fmt_pairs(result.alternatives)}")
        return 0
    if result.alternatives:
        print(f"No unused move: all {len(result.alternatives)} candidates are already in history")
    else:
        print("No move available")
    return 2


def cmd_moves(args: argparse.Namespace) -> int:
    finder = _build_finder(args)
    current = WordPair.from_text(args.current) if args.current else None
    history = _parse_pairs(args.history)

    moves = finder.get_all_possible_moves(current, history)
    for m in moves:
        print(f"  {m}")
    print(f"Possible moves: {len(moves)}")
    print(f"Can continue: {'yes' if moves else 'no'}")
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    finder = _build_finder(args)
    state = GameState()

    first = finder.find_next_word(None)
    if not first.found:
        print("Could not pick a starting word")
        return 2
    state.record(first.word)
    print(f"Start: {first.word}")

    turn = 0
    while state.is_game_active and turn < args.turns:
        turn += 1
        result = finder.find_next_word(state.current_word, state.history)
        if not result.found:
            print(f"Move {turn}: No more moves available!")
            state.is_game_active = False
            continue
        state.record(result.word)
        print(f"Move {turn}: {result.word}")

    print("Game history: " + " → ".join(str(p) for p in state.history))
    print(f"Game over: {'no' if state.is_game_active else 'yes'} ({len(state.history)} words played)")
    return 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config",
        default="resources/config.json",
        help="Path to config.json (optional; defaults will be used if missing)",
    )
    p.add_argument("--dictionary", help="Path to dictionary JSON (overrides config)")
    p.add_argument("--seed", type=int, help="Random seed for reproducible picks")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="noitu", description="Vietnamese word-chain engine CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    check = sub.add_parser("check", help="Validate a submitted word pair")
    check.add_argument("word", help='Two syllables, e.g. "thế giới"')
    check.add_argument("--current", help="Pair currently in play; enables connection check")
    check.add_argument("--used", action="append", help="Pair already played (repeatable)")
    _add_common(check)
    check.set_defaults(func=cmd_check)

    nxt = sub.add_parser("next", help="Pick the computer's next move")
    nxt.add_argument("--current", help="Pair currently in play (omit to open a game)")
    nxt.add_argument("--history", action="append", help="Pair already played (repeatable)")
    _add_common(nxt)
    nxt.set_defaults(func=cmd_next)

    moves = sub.add_parser("moves", help="List every legal move from a position")
    moves.add_argument("--current", help="Pair currently in play (omit for random openings)")
    moves.add_argument("--history", action="append", help="Pair already played (repeatable)")
    _add_common(moves)
    moves.set_defaults(func=cmd_moves)

    demo = sub.add_parser("demo", help="Self-play a short game")
    demo.add_argument("--turns", type=int, default=3, help="Number of moves after the opening")
    _add_common(demo)
    demo.set_defaults(func=cmd_demo)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

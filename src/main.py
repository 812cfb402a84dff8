"""
Main entry point for scoring grids and building curated dictionaries.

Usage:
    python -m src.main score config.yaml
    python -m src.main score config.yaml --output results/score.json --verbose
    python -m src.main build-dictionary words_alpha.txt --output words-en.txt
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

from .lexicon import CuratedDictionary, DictionaryCache, DictionaryConfig, curate_dictionary, read_word_list, read_word_lists
from .scoring import ScoreResult, ScoringPolicy, get_preset, parse_grid, score
from .utils.grid_visualizer import render_grid, render_words


class RunConfig(BaseModel):
    """Configuration for scoring one grid."""
    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)
    preset: Optional[str] = None
    policy: Optional[ScoringPolicy] = None
    grid: str = ""
    cooldown: List[str] = Field(default_factory=list)

    def resolve_policy(self) -> ScoringPolicy:
        """Explicit policy wins over the preset; default policy if neither is set."""
        if self.policy is not None:
            return self.policy
        if self.preset is not None:
            return get_preset(self.preset)
        return ScoringPolicy()


def load_config(config_path: str) -> RunConfig:
    """Load a run configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return RunConfig(**data)


def run_score(config: RunConfig, cache: DictionaryCache) -> ScoreResult:
    """Score the configured grid with the cached dictionary."""
    policy = config.resolve_policy()
    grid = parse_grid(config.grid)
    dictionary: CuratedDictionary = asyncio.run(cache.get())
    return score(grid, dictionary, policy, config.cooldown)


def build_dictionary(
    sources: List[str],
    allow: Optional[List[str]] = None,
    block: Optional[List[str]] = None,
) -> CuratedDictionary:
    """Curate raw word-list files or URLs into a dictionary."""
    return curate_dictionary(
        [read_word_list(source) for source in sources],
        allow=read_word_lists(allow or []),
        block=read_word_lists(block or []),
    )


def write_dictionary(dictionary: CuratedDictionary, output_path: Path) -> None:
    """Write a dictionary one word per line, sorted."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write('\n'.join(dictionary.sorted_words()) + '\n')


def _score_command(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Config: {args.config}")
        print(f"Sources: {', '.join(config.dictionary.sources) or '(none)'}")
        print()

    cache = DictionaryCache.from_config(config.dictionary)
    try:
        result = run_score(config, cache)
    except ValueError as e:
        print(f"Error scoring grid: {e}", file=sys.stderr)
        return 1

    dictionary = cache.peek()

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(result.model_dump(mode="json"), f, indent=2)
        if args.verbose:
            print(f"Results saved to: {output_path}")
            print()

    if args.verbose:
        print(render_grid(parse_grid(config.grid), result.scored_cells))
        print()
        if result.words:
            print(render_words(result.words))
            print()

    print("=== Score Summary ===")
    print(f"Dictionary: {len(dictionary) if dictionary else 0} words (healthy: {bool(dictionary and dictionary.healthy)})")
    if result.autoguard:
        print("Autoguard: dictionary not trusted, all words accepted")
    print(f"Words scored: {len(result.words)}")
    print(f"Total: {result.total}")
    return 0


def _build_dictionary_command(args: argparse.Namespace) -> int:
    dictionary = build_dictionary(args.sources, args.allow, args.block)
    output_path = Path(args.output)
    try:
        write_dictionary(dictionary, output_path)
    except OSError as e:
        print(f"Error writing dictionary: {e}", file=sys.stderr)
        return 1

    print(f"Curated {len(dictionary):,} words -> {output_path}")
    if not dictionary.healthy:
        print("Warning: curated dictionary is below the health threshold", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Score letter grids and curate word lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  dictionary:
    sources:
      - words-en.txt
    allow:
      - words-allow.txt
  preset: classic
  cooldown: [Q]
  grid: |
    CAT..
    ..O..
    ..P..
        """
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and log INFO messages"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    score_parser = subparsers.add_parser("score", help="Score the grid in a YAML config")
    score_parser.add_argument("config", help="Path to YAML configuration file")
    score_parser.add_argument(
        "--output", "-o",
        help="Path to save the score result JSON"
    )
    score_parser.add_argument("--verbose", "-v", action="store_true", default=argparse.SUPPRESS)
    score_parser.set_defaults(handler=_score_command)

    build_parser = subparsers.add_parser("build-dictionary", help="Curate raw word lists into one file")
    build_parser.add_argument("sources", nargs="+", help="Raw word-list files or URLs")
    build_parser.add_argument("--allow", action="append", help="Allow-list file or URL (repeatable)")
    build_parser.add_argument("--block", action="append", help="Block-list file or URL (repeatable)")
    build_parser.add_argument(
        "--output", "-o",
        default="words-en.txt",
        help="Output path (default: words-en.txt)"
    )
    build_parser.add_argument("--verbose", "-v", action="store_true", default=argparse.SUPPRESS)
    build_parser.set_defaults(handler=_build_dictionary_command)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())

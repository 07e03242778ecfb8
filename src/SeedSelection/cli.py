"""CLI entry point for choosing k-means / k-medoids seeds."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from SeedSelection.shared.types import SEED_MODES

logger = logging.getLogger("SeedSelection")

_TRUE_VALUES = ("1", "true", "yes", "on")


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
    )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUE_VALUES


def _add_seed_parser(subparsers: argparse._SubParsersAction) -> None:
    default_k = int(os.environ.get("SEED_K", "8"))
    default_strategy = os.environ.get("SEED_STRATEGY", "farthest")
    default_seed = int(os.environ.get("SEED_RANDOM_SEED", "42"))
    default_keep_first = _env_flag("SEED_KEEP_FIRST")

    p = subparsers.add_parser("seed", help="Choose initial seeds for clustering")
    p.add_argument(
        "--input", required=True, type=Path,
        help="Dataset file (.npy matrix or .npz with 'vectors' and 'ids')",
    )
    p.add_argument("--k", type=int, default=default_k, help="Number of seeds")
    p.add_argument("--strategy", default=default_strategy, help="Seeding strategy")
    p.add_argument(
        "--mode", choices=SEED_MODES, default="means",
        help="Return seed vectors (means) or dataset members (medoids)",
    )
    p.add_argument("--metric", default="euclidean", help="Distance metric")
    p.add_argument("--seed", type=int, default=default_seed, help="Random seed")
    p.add_argument(
        "--keep-first",
        action=argparse.BooleanOptionalAction,
        default=default_keep_first,
        help="Keep the randomly chosen first point as a seed",
    )
    p.add_argument(
        "--n-starts", type=int, default=5,
        help="Restarts for the farthest_multi strategy",
    )
    p.add_argument("--output", type=Path, default=None, help="Output seeds file")
    p.set_defaults(func=_cmd_seed)


def _add_strategies_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("strategies", help="List available seeding strategies")
    p.set_defaults(func=_cmd_strategies)


def _cmd_seed(args: argparse.Namespace) -> int:
    from SeedSelection.pipeline.seed import run_seed

    try:
        result = run_seed(
            input_file=args.input,
            k=args.k,
            strategy=args.strategy,
            mode=args.mode,
            metric=args.metric,
            seed=args.seed,
            keep_first=args.keep_first,
            n_starts=args.n_starts,
            output_file=args.output,
        )
        logger.info(
            "[SEED-SELECT] Chose %d seeds (strategy=%s, mode=%s)",
            len(result.seeds),
            result.strategy,
            result.mode,
        )
        return 0
    except Exception as exc:
        logger.error("[SEED-SELECT] Seeding failed: %s", exc)
        return 2


def _cmd_strategies(args: argparse.Namespace) -> int:
    from SeedSelection.seeding.registry import default_registry

    for name in default_registry.available():
        print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="seed-select",
        description="Farthest-first seeding for k-means and k-medoids",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    _add_seed_parser(subparsers)
    _add_strategies_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(getattr(args, "verbose", False))

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

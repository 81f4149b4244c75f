"""CLI for running headless Smooth Snake sessions and benchmarks."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smooth-snake",
        description="Headless Smooth Snake simulation tools.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log turns and food at DEBUG level.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser(
        "run", help="Play one session with random input.",
    )
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (overrides other flags).",
    )
    run_p.add_argument("--frames", type=_positive_int, default=600)
    run_p.add_argument("--width", type=int, default=None)
    run_p.add_argument("--height", type=int, default=None)
    run_p.add_argument("--speed", type=float, default=None)
    run_p.add_argument("--length", type=int, default=None)
    run_p.add_argument(
        "--direction", type=str, default=None,
        choices=["up", "down", "left", "right"],
    )
    run_p.add_argument("--fps", type=int, default=None)
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument("--turn-chance", type=_probability, default=0.05)

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure simulation throughput.",
    )
    bench_p.add_argument("--num-games", type=_positive_int, default=10)
    bench_p.add_argument("--frames", type=_positive_int, default=600)
    bench_p.add_argument("--width", type=int, default=20)
    bench_p.add_argument("--height", type=int, default=20)
    bench_p.add_argument("--fps", type=int, default=60)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _probability(value: str) -> float:
    number = float(value)
    if not 0.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError("must be between 0 and 1")
    return number


def _run_session(args: argparse.Namespace) -> int:
    from smooth_snake.benchmark import run_session
    from smooth_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "width": "width",
        "height": "height",
        "speed": "speed",
        "length": "initial_snake_length",
        "direction": "initial_direction",
        "fps": "fps",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)

    result = run_session(config, args.frames, turn_chance=args.turn_chance)
    if result.board_full:
        logger.info("Board full: the game is won with score %d.", result.score)
    print(json.dumps(result.state))  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from smooth_snake.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_games=args.num_games,
        frames=args.frames,
        width=args.width,
        height=args.height,
        fps=args.fps,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``smooth-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_session,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())

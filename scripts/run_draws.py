"""Command line harness for deterministic squirrel_rng draws."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from squirrel_rng import DrawConfig, run_draws
from squirrel_rng.sampler import KINDS

logger = logging.getLogger("squirrel_rng.cli")


def _parse_int(value: str) -> int:
    """Accept decimal or 0x / 0o / 0b prefixed integers."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc


def _parse_count(value: str) -> int:
    count = _parse_int(value)
    if count < 0:
        raise argparse.ArgumentTypeError("Count must be zero or a positive integer.")
    return count


def _parse_choices(value: str) -> tuple[str, ...]:
    """Parse a CLI `a,b,c` option into a tuple of choices, order preserved."""

    choices = tuple(part.strip() for part in value.split(",") if part.strip())
    if not choices:
        raise argparse.ArgumentTypeError("Choice list cannot be empty.")
    return choices


def _configure_logging(verbose: bool) -> None:
    # stdout carries the JSON report, so records go to stderr
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw a deterministic batch from a Squirrel3 random source")
    parser.add_argument(
        "--seed",
        type=_parse_int,
        default=0x5EED,
        help="Noise seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--offset",
        type=_parse_int,
        default=0,
        help="Starting position in the noise sequence",
    )
    parser.add_argument("--count", type=_parse_count, default=10, help="Number of draws to produce")
    parser.add_argument(
        "--kind",
        choices=KINDS,
        default="float",
        help="Distribution to draw from",
    )
    parser.add_argument(
        "--alpha",
        type=_parse_int,
        default=None,
        help="integer kind: exclusive maximum, or inclusive minimum when --beta is given",
    )
    parser.add_argument(
        "--beta",
        type=_parse_int,
        default=None,
        help="integer kind: exclusive maximum (requires --alpha)",
    )
    parser.add_argument("--odds", type=float, default=0.5, help="bool kind: probability of true")
    parser.add_argument("--mean", type=float, default=0.5, help="normal kind: distribution mean")
    parser.add_argument("--deviation", type=float, default=1.0, help="normal kind: distribution deviation")
    parser.add_argument(
        "--choices",
        metavar="a,b,c",
        type=_parse_choices,
        default=(),
        help="index/item kinds: comma-separated collection to pick from",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "draw_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Emit debug logging on stderr")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    _configure_logging(args.verbose)

    if args.beta is not None and args.alpha is None:
        parser.error("--beta requires --alpha")
    if args.kind in {"index", "item"} and not args.choices:
        parser.error(f"--kind {args.kind} requires --choices")

    cfg = DrawConfig(
        seed=args.seed,
        offset=args.offset,
        count=args.count,
        kind=args.kind,
        alpha=args.alpha,
        beta=args.beta,
        odds=args.odds,
        mean=args.mean,
        deviation=args.deviation,
        choices=args.choices,
    )
    result = run_draws(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.debug("Report written to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()

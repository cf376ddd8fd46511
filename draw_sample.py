#!/usr/bin/env python3
"""popsample - draw a sample of 1..N from the command line."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from popsample.config import ConfigLoadError, SamplerConfig, load_config
from popsample.engine import SamplingEngine, SamplingError, numpy_source


def parse_weights(raw: str | None) -> list[float] | None:
    """Parse a comma separated weight list; empty entries count as missing."""
    if raw is None:
        return None
    return [float(item) if item.strip() else float("nan") for item in raw.split(",")]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw a reproducible sample from 1..N")
    parser.add_argument("--population", type=int, required=True, help="population size N")
    parser.add_argument("--size", type=int, required=True, help="sample size K")
    parser.add_argument("--replace", action="store_true", help="sample with replacement")
    parser.add_argument("--weights", default=None, help="comma separated weights, one per member")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--config", default=None, help="YAML/JSON sampler config")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else SamplerConfig()
        weights = parse_weights(args.weights)
    except (FileNotFoundError, ConfigLoadError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    seed = args.seed if args.seed is not None else config.seed
    engine = SamplingEngine(config=config, source=numpy_source(seed))
    try:
        result = engine.sample(args.population, args.size, args.replace, weights)
    except SamplingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(" ".join(str(value) for value in result))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command line entry point: load a configuration and print the simulated run."""

from __future__ import annotations

import argparse
import csv
import sys
from dataclasses import replace

from uarsim.config import DEFAULT_CONFIG_NAME, load_config, save_config
from uarsim.session import Simulator

COLUMNS = (
    "time",
    "setpoint",
    "output",
    "error",
    "control",
    "proportional",
    "integral",
    "derivative",
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uarsim",
        description="Simulate a PID-controlled ARX plant and print the run as CSV.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_NAME,
        help=f"configuration file (default: {DEFAULT_CONFIG_NAME})",
    )
    parser.add_argument("-n", "--steps", type=int, default=100, help="number of ticks")
    parser.add_argument("--seed", type=int, help="seed for the disturbance noise")
    parser.add_argument("--anti-windup", action="store_true", help="clamp the controller output")
    parser.add_argument(
        "--recommended-integration",
        action="store_true",
        help="divide each error by Ti before summing",
    )
    parser.add_argument("--save", metavar="PATH", help="also write the configuration to PATH")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the simulator from the command line; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.steps < 0:
        parser.error("--steps must not be negative")

    try:
        config = load_config(args.config)
    except OSError as exc:
        print(f"uarsim: cannot read {args.config}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    config = replace(
        config,
        anti_windup=args.anti_windup,
        recommended_integration=args.recommended_integration,
    )

    simulator = Simulator(seed=args.seed)
    try:
        simulator.configure_arx(config.arx)
    except ValueError as exc:
        print(f"uarsim: {exc}", file=sys.stderr)
        return 1
    simulator.configure_pid(config)
    simulator.configure_generator(config)

    if args.save:
        try:
            save_config(config, args.save)
        except OSError as exc:
            print(f"uarsim: cannot write {args.save}: {exc.strerror or exc}", file=sys.stderr)
            return 1

    writer = csv.writer(sys.stdout, lineterminator="\n")
    writer.writerow(COLUMNS)
    for sample in simulator.run(args.steps):
        writer.writerow(repr(getattr(sample, column)) for column in COLUMNS)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
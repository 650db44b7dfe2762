#!/usr/bin/env python3
"""
Smith-Wilson Curve Engine - Command Line Interface

Usage:
    smith-wilson curve (--data <file> | --demo) [--ufr <rate>] [--alpha <speed>] [--targets <spec>] [--output <file>]
    smith-wilson calibrate (--data <file> | --demo) [--ufr <rate>] [--alpha <speed>]
    smith-wilson config [--show | --generate <file>]
    smith-wilson --version
"""

import argparse
import json
import sys
import logging
from pathlib import Path

import numpy as np
import pandas as pd

from . import __version__


def setup_logging(verbose: bool = False, debug: bool = False):
    """Setup logging for CLI."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def _load_inputs(args):
    """Resolve config and observed set from command-line arguments."""
    from .config import load_config, setup_logging as configure_logging
    from .data import EXAMPLE_ALPHA, EXAMPLE_MATURITIES, EXAMPLE_RATES, EXAMPLE_UFR
    from .data import load_observations

    config = load_config(args.config)
    if config.logging.file:
        configure_logging(config.logging)

    if args.demo:
        maturities, rates = EXAMPLE_MATURITIES, EXAMPLE_RATES
        config.curve.ufr = EXAMPLE_UFR
        config.curve.alpha = EXAMPLE_ALPHA
        print("Using demonstration dataset (20 annual rates)")
    else:
        print(f"Loading observations from: {args.data}")
        maturities, rates = load_observations(
            args.data,
            maturity_column=args.maturity_column,
            rate_column=args.rate_column,
        )

    if args.ufr is not None:
        config.curve.ufr = args.ufr
    if args.alpha is not None:
        config.curve.alpha = args.alpha
    if getattr(args, "solver", None):
        config.solver.method = args.solver

    return config, maturities, rates


def _fit(config, maturities, rates):
    from .calibration import SmithWilsonCalibrator

    calibrator = SmithWilsonCalibrator.from_config(config)
    return calibrator.fit(rates, maturities)


def cmd_curve(args):
    """Calibrate and tabulate the full curve."""
    from .data import EXAMPLE_TARGETS, parse_maturities

    print(f"\n{'='*60}")
    print("SMITH-WILSON CURVE")
    print(f"{'='*60}\n")

    config, maturities, rates = _load_inputs(args)
    if args.targets:
        targets = parse_maturities(args.targets)
    elif args.demo:
        targets = EXAMPLE_TARGETS
    else:
        targets = parse_maturities(config.curve.targets)

    print(f"Observations: {len(maturities)} (max maturity {np.max(maturities):g}y)")
    print(f"UFR: {config.curve.ufr:.4%}   alpha: {config.curve.alpha:g}   solver: {config.solver.method}")

    curve = _fit(config, maturities, rates)
    table = curve.to_frame(targets, tenor=config.curve.forward_tenor)

    print()
    with pd.option_context("display.max_rows", None):
        print(table.to_string(
            index=False,
            formatters={
                "maturity": "{:g}".format,
                "zero_rate": "{:.6%}".format,
                "discount_factor": "{:.8f}".format,
                "forward_rate": "{:.6%}".format,
            },
        ))

    if args.output:
        output_path = Path(args.output)
        if output_path.suffix == ".json":
            payload = curve.to_dict()
            payload["curve"] = table.to_dict(orient="records")
            with open(output_path, "w") as f:
                json.dump(payload, f, indent=2)
        else:
            table.to_csv(output_path, index=False)
        print(f"\nCurve saved to: {output_path}")

    return 0


def cmd_calibrate(args):
    """Calibrate and report the calibration vector."""
    print(f"\n{'='*60}")
    print("SMITH-WILSON CALIBRATION")
    print(f"{'='*60}\n")

    config, maturities, rates = _load_inputs(args)
    curve = _fit(config, maturities, rates)

    print(f"{'MATURITY':>10} | {'RATE':>12} | {'b':>16}")
    print("-" * 44)
    for m, r, b in zip(curve.observed_maturities, curve.observed_rates, curve.b):
        print(f"{m:>10g} | {r:>12.8f} | {b:>16.8f}")

    max_error = float(np.max(np.abs(curve.repricing_errors())))
    print(f"\nMax repricing error: {max_error:.3e}")
    return 0


def cmd_config(args):
    """Show or generate configuration."""
    from .config import Config, load_config

    if args.generate:
        config = Config()
        config.save(args.generate)
        print(f"Config template saved to: {args.generate}")
        return 0

    config = load_config(args.config_file)
    print(json.dumps(config.to_dict(), indent=2))
    return 0


def _add_input_arguments(subparser):
    data_group = subparser.add_mutually_exclusive_group(required=True)
    data_group.add_argument("--data", "-d", help="Observation file (CSV/Parquet)")
    data_group.add_argument("--demo", action="store_true", help="Use the built-in demonstration dataset")
    subparser.add_argument("--maturity-column", help="Maturity column name (auto-detected by default)")
    subparser.add_argument("--rate-column", help="Rate column name (auto-detected by default)")
    subparser.add_argument("--ufr", type=float, help="Ultimate forward rate, e.g. 0.042")
    subparser.add_argument("--alpha", type=float, help="Convergence speed, e.g. 0.142068")
    subparser.add_argument("--solver", choices=["inverse", "lu", "cholesky"], help="Linear solver")
    subparser.add_argument("--config", "-c", help="Config file")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="smith-wilson",
        description="Smith-Wilson yield curve interpolation and extrapolation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Curve for the demonstration dataset
  smith-wilson curve --demo

  # Curve from a CSV of observed rates, saved to a file
  smith-wilson curve --data rates.csv --ufr 0.036 --alpha 0.1 --targets 1:120 -o curve.csv

  # Calibration vector only
  smith-wilson calibrate --data rates.csv --ufr 0.036 --alpha 0.1

  # Generate config template
  smith-wilson config --generate config.json
        """
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Curve command
    curve_parser = subparsers.add_parser("curve", help="Calibrate and tabulate the curve")
    _add_input_arguments(curve_parser)
    curve_parser.add_argument("--targets", "-t", help="Target maturities, e.g. '1:65' or '1,2,3,5'")
    curve_parser.add_argument("--output", "-o", help="Output file (.csv or .json)")

    # Calibrate command
    calibrate_parser = subparsers.add_parser("calibrate", help="Compute the calibration vector")
    _add_input_arguments(calibrate_parser)

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--generate", metavar="FILE", help="Generate config template")
    config_parser.add_argument("--config-file", "-c", help="Config file to show")

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.debug)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "curve":
            return cmd_curve(args)
        elif args.command == "calibrate":
            return cmd_calibrate(args)
        elif args.command == "config":
            return cmd_config(args)
        else:
            parser.print_help()
            return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130
    except Exception as e:
        if args.debug:
            raise
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

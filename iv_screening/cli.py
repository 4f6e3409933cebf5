"""
IV Screening CLI

Command-line interface for computing Information Value from a CSV file.

Usage:
    # Per-bin detail for every column except the outcome
    iv-screen data/german_credit.csv --outcome gb

    # Ranked summary for selected variables with custom tree settings
    iv-screen data/german_credit.csv --outcome gb --summary \\
        --vars duration age housing --cp 0.001 --min-bucket 50

    # Everything from a config file, flags override file values
    iv-screen --config screening.yaml --output output/iv_summary.csv
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd
import yaml
from pydantic import ValidationError

from .config import IVScreeningConfig, LoggingConfig
from .engine import compute_iv
from .logger import IVLogger, configure_logging_from_config
from .models import BinningConfig
from .validators import IVValidationError

BINNING_FLAGS = ('cp', 'min_bucket', 'min_split', 'max_depth')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='iv-screen',
        description='Compute Information Value and Weight of Evidence per variable',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('data', nargs='?', help='Path to CSV data file')
    parser.add_argument('--outcome', '-y', help='Binary 0/1 outcome column')
    parser.add_argument('--summary', '-s', action='store_true', default=None,
                        help='One ranked row per variable instead of one row per bin')
    parser.add_argument('--vars', nargs='+', help='Variables to screen (default: all)')
    parser.add_argument('--cp', type=float, help='Tree complexity parameter')
    parser.add_argument('--min-bucket', type=int, help='Minimum observations per numeric bin')
    parser.add_argument('--min-split', type=int, help='Minimum observations to attempt a split')
    parser.add_argument('--max-depth', type=int, help='Maximum tree depth')
    parser.add_argument('--config', '-c', help='YAML or JSON screening config')
    parser.add_argument('--output', '-o', help='Write result to .csv or .json instead of stdout')
    parser.add_argument('--verbose', '-v', action='store_true', default=None,
                        help='Log which binner handles each variable')
    parser.add_argument('--log-file', help='Append log messages to this file')
    return parser


def resolve_config(args: argparse.Namespace) -> IVScreeningConfig:
    """
    Merge the config file (if any) with command-line flags.

    Raises:
        ValueError: If data path or outcome column is set neither in the
            config file nor by flags
    """
    config = IVScreeningConfig.from_file(args.config) if args.config else IVScreeningConfig()

    if args.data:
        config.data_path = args.data
    if args.outcome:
        config.outcome_column = args.outcome
    if args.vars:
        config.variables = list(args.vars)
    if args.summary is not None:
        config.summary = args.summary
    if args.verbose is not None:
        config.verbose = args.verbose
    if args.output:
        config.output_path = args.output
    if args.log_file:
        config.logging = LoggingConfig(level=config.logging.level, log_file=args.log_file)

    overrides = {
        flag: getattr(args, flag)
        for flag in BINNING_FLAGS
        if getattr(args, flag) is not None
    }
    if overrides:
        config.binning = BinningConfig(**{**config.binning.model_dump(), **overrides})

    if not config.data_path or not config.outcome_column:
        raise ValueError("Provide DATA and --outcome, or set data_path and outcome_column in --config")

    return config


def write_result(result: pd.DataFrame, output_path: Optional[str]) -> None:
    if output_path is None:
        print(result.to_string(index=False))
        return

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == '.json':
        result.to_json(path, orient='records', indent=2)
    else:
        result.to_csv(path, index=False)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except (ValueError, TypeError, ValidationError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    issues = config.validate()
    if issues:
        print("Configuration issues found:", file=sys.stderr)
        for issue in issues:
            print(f"  - {issue}", file=sys.stderr)
        return 1

    IVLogger.reset_loggers()
    logger = configure_logging_from_config(config)
    if config.verbose:
        logger.info(config.summary_text())

    df = pd.read_csv(config.data_path)
    logger.log(
        logging.INFO if config.verbose else logging.DEBUG,
        f"Loaded {len(df):,} rows, {len(df.columns)} columns from {config.data_path}"
    )

    try:
        result = compute_iv(
            df,
            config.outcome_column,
            summary=config.summary,
            variables=config.variables,
            verbose=config.verbose,
            binning_config=config.binning,
        )
    except IVValidationError as e:
        print(str(e), file=sys.stderr)
        return 1

    write_result(result, config.output_path)
    if config.output_path:
        logger.log(
            logging.INFO if config.verbose else logging.DEBUG,
            f"Result written to: {config.output_path}"
        )

    return 0


if __name__ == '__main__':
    sys.exit(main())

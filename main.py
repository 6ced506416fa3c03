#!/usr/bin/env python3
"""
NIFTY Panic Strategy Calculator - Main Entry Point

Computes strikes, the panic price, the gap signal and trade management
levels from quotes given on the command line, then prints a report.
"""

import sys
import json
import argparse
from pathlib import Path
from dotenv import load_dotenv

from src.config.config_manager import ConfigManager
from src.calculator.input_parser import INPUT_FIELDS, FIELD_LABELS
from src.calculator.session import CalculatorSession
from src.calculator.report import render_report
from src.logging.calculator_logger import CalculatorLogger

DEFAULT_CONFIG_PATH = 'config/config.json'

# Load environment variables from .env file
load_dotenv()


def load_configuration(config_arg):
    """Load the configuration file, or the defaults when the default file is missing.

    Returns:
        ConfigManager holding the loaded configuration
    """
    config_manager = ConfigManager()
    if config_arg is None:
        if Path(DEFAULT_CONFIG_PATH).exists():
            config_manager.load_config(DEFAULT_CONFIG_PATH)
        else:
            config_manager.default_config()
    else:
        config_manager.load_config(config_arg)
    return config_manager


def build_parser():
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description='NIFTY Options Panic Strategy Calculator'
    )
    for field in INPUT_FIELDS:
        parser.add_argument(
            '--' + field.replace('_', '-'),
            dest=field,
            type=str,
            default='',
            metavar='PRICE',
            help=FIELD_LABELS[field]
        )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help=f'Path to configuration file (default: {DEFAULT_CONFIG_PATH} if present)'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as JSON instead of the text report'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='Panic Strategy Calculator v3.0.0'
    )
    return parser


def main(argv=None):
    """Main entry point for the calculator."""
    args = build_parser().parse_args(argv)

    # json.JSONDecodeError is a ValueError; an unusable log path is an OSError
    try:
        config_manager = load_configuration(args.config)
        logger = CalculatorLogger(config_manager.get_logging_config())
    except (OSError, ValueError) as e:
        print(f"Error: {str(e)}")
        return 1

    logger.log_info(
        "Calculator started",
        {"config_path": args.config or DEFAULT_CONFIG_PATH, "output": "json" if args.json else "text"}
    )

    session = CalculatorSession(logger=logger, log_calculations=config_manager.get_log_calculations())
    results = session.update(**{field: getattr(args, field) for field in INPUT_FIELDS})

    try:
        if args.json:
            print(json.dumps(results.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(render_report(
                session.inputs,
                results,
                config_manager.get_instrument(),
                config_manager.get_decimal_places()
            ))
    except (OSError, UnicodeError) as e:
        logger.log_error("Failed to write results", error=e)
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())

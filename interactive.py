#!/usr/bin/env python3
"""
Interactive Panic Strategy Calculator

Enter the six quotes one by one, then edit any field, reset, or quit.
The full report is redrawn after every change.
"""

import sys
import os

from dotenv import load_dotenv

from src.config.config_manager import ConfigManager
from src.config.models import LoggingConfig
from src.calculator.input_parser import INPUT_FIELDS, FIELD_LABELS, parse_quote
from src.calculator.session import CalculatorSession
from src.calculator.report import render_report
from src.logging.calculator_logger import CalculatorLogger

load_dotenv()

CONFIG_PATH = "config/config.json"


def clear_screen():
    """Clear terminal screen."""
    os.system("cls" if os.name == "nt" else "clear")


def display_banner():
    """Display the interactive calculator banner."""
    print()
    print("╔" + "═" * 58 + "╗")
    print("║" + "📊 NIFTY OPTIONS · PANIC STRATEGY CALCULATOR".center(57) + "║")
    print("╚" + "═" * 58 + "╝")
    print()


def initialize_session():
    """Load configuration and create a session with a quiet logger.

    Raises:
        OSError: If the configuration or log file cannot be opened
        ValueError: If the configuration is invalid
    """
    config_manager = ConfigManager()
    if os.path.exists(CONFIG_PATH):
        config_manager.load_config(CONFIG_PATH)
    else:
        config_manager.default_config()

    # Keep the terminal clean; log lines still go to the file
    file_logging = config_manager.get_logging_config()
    logger = CalculatorLogger(LoggingConfig(
        level=file_logging.level,
        file_path=file_logging.file_path,
        console=False
    ))
    session = CalculatorSession(logger=logger, log_calculations=config_manager.get_log_calculations())
    return config_manager, session


def prompt_field(session, field):
    """Prompt for one field; an empty answer clears it."""
    current = getattr(session.inputs, field)
    hint = f" [{current}]" if current else ""
    text = input(f"  {FIELD_LABELS[field]}{hint}: ").strip()

    if text and parse_quote(text) is None:
        print(f"  ⚠️  '{text}' is not a number, {FIELD_LABELS[field]} left blank")
    session.set_input(field, text)


def display_menu():
    """Display the field editing menu."""
    print()
    print("─" * 60)
    for number, field in enumerate(INPUT_FIELDS, start=1):
        print(f"  {number}. {FIELD_LABELS[field]}")
    print("  r. Reset all fields")
    print("  q. Quit")
    print()


def select_action():
    """Let user pick a field to edit, reset, or quit."""
    while True:
        choice = input("  Select (1-6/r/q): ").strip().lower()

        if choice in ("q", "r"):
            return choice
        if choice.isdigit() and 1 <= int(choice) <= len(INPUT_FIELDS):
            return INPUT_FIELDS[int(choice) - 1]
        print("  ❌ Please enter 1-6, 'r' or 'q'")


def show_report(session, config_manager):
    """Redraw the report for the current session."""
    clear_screen()
    display_banner()
    print(render_report(
        session.inputs,
        session.results,
        config_manager.get_instrument(),
        config_manager.get_decimal_places()
    ))


def main():
    """Main interactive function."""
    try:
        display_banner()
        try:
            config_manager, session = initialize_session()
        except (OSError, ValueError) as e:
            print(f"\n  ❌ Configuration error: {str(e)}")
            sys.exit(1)

        print("📈 ENTER MARKET DATA (leave blank to skip):")
        print()
        for field in INPUT_FIELDS:
            prompt_field(session, field)

        while True:
            show_report(session, config_manager)
            display_menu()
            action = select_action()

            if action == "q":
                print("\n  👋 Goodbye!")
                break
            if action == "r":
                session.reset()
                continue
            prompt_field(session, action)

    except (KeyboardInterrupt, EOFError):
        print("\n\n  👋 Goodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main()

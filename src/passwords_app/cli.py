#!/usr/bin/env python3
"""
Passwords - generator, hasher and analyzer in the terminal.
"""

import sys
from getpass import getpass
from typing import Optional

import pyperclip

from .analyzer import PasswordAnalyzer, strength_label
from .backend import Backend, LocalBackend
from .config import Config, verbosity_to_level
from .errors import ClipboardError, ConfigError, PasswordsAppError
from .generator import PasswordGenerator
from .hasher import Hasher
from .logger import app_logger

TRUE_WORDS = ("y", "yes", "true", "1", "on")
FALSE_WORDS = ("n", "no", "false", "0", "off")
LOGGING_KEYS = ("log_file", "verbosity")


def apply_logging(config: Config):
    """Point the application logger at the configured file and level."""
    app_logger.configure(config.get("log_file"), verbosity_to_level(config.get("verbosity")))


def print_banner():
    """Display application banner."""
    banner = """
    ╔═══════════════════════════════════════╗
    ║            P A S S W O R D S          ║
    ║   Generator · Hasher · Analyzer v1.0  ║
    ╚═══════════════════════════════════════╝
    """
    print(banner)


def copy_to_clipboard(text: str):
    """Copy text to the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Clipboard unavailable: {str(e)}") from e


def offer_copy(text: str):
    copy = input("\nCopy to clipboard? (y/n): ").lower()
    if copy == 'y':
        copy_to_clipboard(text)
        print("✓ Copied to clipboard")


def show_random(generator: PasswordGenerator):
    result = generator.random()
    print(f"\nPassword: {result.password}")
    color = f" [{result.color}]" if result.color else ""
    print(f"Strength: {result.strength} ({result.score:.0f}/100){color}")
    print(f"Estimated time to crack: {result.crack_time}")
    offer_copy(result.password)


def show_memorable(generator: PasswordGenerator):
    password = generator.memorable()
    print(f"\nPassword: {password}")
    offer_copy(password)


def show_pin(generator: PasswordGenerator):
    pin = generator.pin()
    print(f"\nPIN: {pin}")
    offer_copy(pin)


def show_hashes(hasher: Hasher, config: Config):
    text = getpass("Text to hash: ")
    if not text:
        print("Nothing to hash.")
        return
    digests = hasher.digest_all(
        text,
        bcrypt_rounds=config.get("bcrypt_rounds"),
        md5_uppercase=config.get("md5_uppercase"),
    )
    selected_sha = f"sha{config.get('sha_type')}"
    print()
    for name, value in digests.to_dict().items():
        # only the SHA variant picked in settings
        if name.startswith("sha") and name != selected_sha:
            continue
        print(f"{name.upper():>7}: {value}")


def show_analysis(analyzer: PasswordAnalyzer):
    password = getpass("Password to analyze: ")
    result = analyzer.analyze(password)
    if result is None:
        print("Nothing to analyze.")
        return

    print(f"\nStrength: {strength_label(result.score)} ({result.score:.0f}/100)")
    print(f"Estimated time to crack: {result.crack_times}")
    print(f"Common password: {'yes' if result.is_common else 'no'}")
    print(f"Length: {result.length}")
    print(f"  Lowercase letters: {result.lowercase_letters_count}")
    print(f"  Uppercase letters: {result.uppercase_letters_count}")
    print(f"  Numbers: {result.numbers_count}")
    print(f"  Symbols: {result.symbols_count}")
    print(f"  Spaces: {result.spaces_count}")
    print(f"  Other characters: {result.other_characters_count}")
    print(f"Repeated (consecutive): {result.consecutive_count}")
    print(f"Repeated (non-consecutive): {result.non_consecutive_count}")
    print(f"Progressive runs: {result.progressive_count}")


def edit_settings(config: Config):
    print("\nCurrent settings:")
    for key, value in config.as_dict().items():
        print(f"  {key} = {value!r}")

    key = input("\nSetting to change (blank to go back): ").strip()
    if not key:
        return
    if key not in config:
        print(f"Unknown setting: {key}")
        return

    raw = input(f"New value for {key}: ").strip()
    current = config.get(key)
    if isinstance(current, bool):
        if raw.lower() in TRUE_WORDS:
            value = True
        elif raw.lower() in FALSE_WORDS:
            value = False
        else:
            print(f"{key} needs yes or no")
            return
    elif isinstance(current, int):
        try:
            value = int(raw)
        except ValueError:
            print(f"{key} needs a number")
            return
    elif isinstance(current, str):
        value = raw
    else:
        value = raw or None

    config.set(key, value)
    if key in LOGGING_KEYS:
        try:
            apply_logging(config)
        except ConfigError:
            config.set(key, current)
            apply_logging(config)
            raise
    config.save()
    print(f"✓ {key} saved")


def interactive_menu(backend: Backend, config: Config):
    """Interactive command-line interface."""
    generator = PasswordGenerator(backend, config)
    hasher = Hasher(backend)
    analyzer = PasswordAnalyzer(backend)

    actions = {
        "1": lambda: show_random(generator),
        "2": lambda: show_memorable(generator),
        "3": lambda: show_pin(generator),
        "4": lambda: show_hashes(hasher, config),
        "5": lambda: show_analysis(analyzer),
        "6": lambda: edit_settings(config),
    }

    while True:
        print("\n" + "="*50)
        print("MAIN MENU")
        print("="*50)
        print("1. Generate random password")
        print("2. Generate memorable password")
        print("3. Generate PIN")
        print("4. Hash text")
        print("5. Analyze password")
        print("6. Settings")
        print("7. Exit")

        choice = input("\nSelect option (1-7): ").strip()

        if choice == "7":
            print("Goodbye!")
            break

        action = actions.get(choice)
        if action is None:
            print("Invalid choice. Please try again.")
            continue

        try:
            action()
        except PasswordsAppError as e:
            app_logger.log_event("Action failed", str(e))
            print(f"Error: {str(e)}")


def main(config_path: Optional[str] = None):
    """Main application entry point."""
    print_banner()

    try:
        config = Config(config_path)
    except PasswordsAppError as e:
        print(f"Error: {str(e)}")
        return 1

    try:
        apply_logging(config)
    except PasswordsAppError as e:
        print(f"Error: {str(e)}")
        return 1

    try:
        interactive_menu(LocalBackend(), config)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

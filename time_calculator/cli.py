"""
Command-line interface for the time calculator
"""
import argparse
import logging
import os
from typing import List, Optional

from .config import Config
from .core import FORMATS, ParseError, format_time
from .rendering.card import save_card
from .services import accumulator
from .services.collector import prompt_lines, read_lines
from .services.errors import ConfigError, InputReadError, RenderError


DEFAULT_CONFIG_NAMES = ('time_calculator.yml', 'time_calculator.yaml')


def find_default_config(directory: str) -> Optional[str]:
    """Return the first default config file found in ``directory``, if any."""
    for name in DEFAULT_CONFIG_NAMES:
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate):
            return candidate
    return None


def collect_lines(files: List[str], prompt_fn=input) -> List[str]:
    """Read all lines from ``files`` in order, or prompt when none are given."""
    if not files:
        return prompt_lines(prompt_fn)
    lines: List[str] = []
    for path in files:
        lines.extend(read_lines(path))
    return lines


def resolve_card_path(card_path: str, output_dir: str) -> str:
    # Un nome file senza cartella finisce in output_dir
    if os.path.dirname(card_path):
        return card_path
    return os.path.join(output_dir, card_path)


def print_result(result, show_seconds: bool = False) -> None:
    for skipped in result.skipped:
        print(f"Skipped line {skipped.line_number}: {skipped.text!r} ({skipped.reason})")
    print(f"Lines: {result.lines}")
    print(f"Total: {format_time(result.time)}")
    if show_seconds:
        print(f"Seconds: {result.total_seconds}")


def run(config: Config, files: List[str], card_path: Optional[str] = None,
        show_seconds: bool = False, prompt_fn=input) -> int:
    """Collect lines, fold them into a total and report it. Returns an exit code."""
    try:
        config.validate()
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 1
    fmt = config.get('format')

    try:
        lines = collect_lines(files, prompt_fn)
    except InputReadError as e:
        print(f"Input error: {e}")
        return 1

    try:
        result = accumulator.accumulate(lines, fmt=fmt, skip_invalid=config.get('skip_invalid'))
    except ParseError as e:
        print(f"Invalid time: {e}")
        return 1

    print_result(result, show_seconds=show_seconds)

    if card_path:
        card_cfg = config.get('card')
        output_path = resolve_card_path(card_path, config.get('output_dir'))
        try:
            save_card(
                result.time,
                output_path,
                width=card_cfg['width'],
                height=card_cfg['height'],
                colors=config.get('colors'),
                title=card_cfg['title'],
            )
        except RenderError as e:
            print(f"Error during card rendering: {e}")
            return 1
        print(f"✓ Card: {output_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Sum h:m:s (or h,m,s) times, one per line')
    parser.add_argument('files', nargs='*', metavar='FILE', help="Files with one time per line ('-' for stdin); prompts if omitted")
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--format', dest='format', choices=sorted(FORMATS), help="Line format: 'clock' (1:03:45) or 'csv' (1,3,45)")
    # Righe non valide: salta o fermati
    invalid_group = parser.add_mutually_exclusive_group()
    invalid_group.add_argument('--skip-invalid', dest='skip_invalid', action='store_true', help='Skip malformed lines and report them')
    invalid_group.add_argument('--strict', dest='skip_invalid', action='store_false', help='Stop at the first malformed line')
    parser.set_defaults(skip_invalid=None)
    parser.add_argument('--card', type=str, help='Write a PNG card with the result to this path')
    parser.add_argument('--output-dir', type=str, help='Output directory for cards given without a folder')
    parser.add_argument('--seconds', action='store_true', help='Also print the total in seconds')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Funzione principale CLI"""
    args = build_parser().parse_args(argv)

    # Minimal logging setup; services use logging for diagnostics.
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    # Se non viene passato --config, prova a usare un file di default nella directory corrente
    config_path = args.config or find_default_config(os.getcwd())
    try:
        config = Config(config_file=config_path, must_exist=bool(args.config))
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 1

    # Aggiorna configurazione con argomenti CLI (hanno precedenza)
    config.update_from_args({
        'format': args.format,
        'skip_invalid': args.skip_invalid,
        'output_dir': args.output_dir,
    })

    try:
        return run(config, args.files, card_path=args.card, show_seconds=args.seconds)
    except KeyboardInterrupt:
        print("\nOperation cancelled.")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())

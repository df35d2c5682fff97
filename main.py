"""
Main script for the Tic-Tac-Toe game hub.
Provides the command-line interface and the numbered variant menu.
"""

import argparse
import sys
from typing import Any, Dict, Optional, TextIO

from config import Config, get_debug_config
from dictionary import DictionaryLoadError
from game import GameSession, RandomSource
from logger import Logger, get_logger
from variants import VARIANTS, Variant, get_variant

log = get_logger(__name__)


def load_config(args) -> Config:
    """Load or create configuration, then apply command-line overrides"""
    if args.config_file:
        config = Config.load(args.config_file)
        print(f"Loaded configuration from {args.config_file}")
    elif args.config_preset:
        if args.config_preset == 'debug':
            config = get_debug_config()
        else:
            raise ValueError(f"Unknown preset: {args.config_preset}")
        print(f"Using {args.config_preset} configuration preset")
    else:
        config = Config()

    if args.seed is not None:
        config.seed = args.seed
    if args.dictionary:
        config.game.dictionary_path = args.dictionary
    if args.log_level:
        config.logging.log_level = args.log_level
    return config


def play_variant(variant: Variant, config: Config, rng: RandomSource, logger: Logger,
                 input_stream: Optional[TextIO] = None,
                 output_stream: Optional[TextIO] = None) -> Optional[Dict[str, Any]]:
    """
    Play one game of ``variant``.
    Returns the result dict, or None when the board could not be built.
    """
    out = output_stream or sys.stdout
    try:
        board = variant.make_board(config, rng)
    except DictionaryLoadError as e:
        logger.log_error(f"Cannot start {variant.title}: {e}")
        print(f"Error: {e}", file=out)
        return None

    ui = variant.ui_class(rng=rng, input_stream=input_stream, output_stream=output_stream)
    with GameSession(board, ui, logger, variant=variant.key) as session:
        return session.run()


def print_menu(out: TextIO):
    lines = ["", "Welcome to Game Hub", "Choose a Game to play"]
    lines.extend(f"{i}- {variant.title}" for i, variant in enumerate(VARIANTS, start=1))
    lines.append("0- Exit")
    print("\n".join(lines), file=out)


def read_choice(input_stream: TextIO, out: TextIO) -> Optional[int]:
    """Read a menu selection; None for anything that is not an integer"""
    print("Choice: ", end="", file=out, flush=True)
    line = input_stream.readline()
    if line == "":
        raise EOFError("input exhausted")
    try:
        return int(line.strip())
    except ValueError:
        return None


def run_menu(config: Config, rng: RandomSource, logger: Logger,
             input_stream: Optional[TextIO] = None,
             output_stream: Optional[TextIO] = None):
    """Show the menu and play the chosen variants until the user picks 0"""
    input_stream = input_stream or sys.stdin
    out = output_stream or sys.stdout

    while True:
        print_menu(out)
        try:
            choice = read_choice(input_stream, out)
        except EOFError:
            log.info("Input closed, leaving the menu")
            return

        if choice == 0:
            return
        if choice is None or not 1 <= choice <= len(VARIANTS):
            print("Invalid Option", file=out)
            continue

        try:
            play_variant(VARIANTS[choice - 1], config, rng, logger, input_stream, output_stream)
        except EOFError:
            log.info("Input closed during a game, leaving the menu")
            return


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Tic-Tac-Toe Game Hub')
    parser.add_argument('--config-file', type=str, help='Path to config file')
    parser.add_argument('--config-preset', choices=['debug'],
                        help='Use a preset configuration')
    parser.add_argument('--seed', type=int, help='Seed for computer players and random events')
    parser.add_argument('--dictionary', type=str, help='Word list for Word Tic-Tac-Toe')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Override logging level')
    parser.add_argument('--variant', type=str,
                        help='Play a single variant by key and exit')
    parser.add_argument('--list', action='store_true',
                        help='List variant keys and exit')

    args = parser.parse_args(argv)

    if args.list:
        for variant in VARIANTS:
            print(f"{variant.key:<10} {variant.title}")
        return 0

    config = load_config(args)
    variant = None
    if args.variant:
        try:
            variant = get_variant(args.variant)
        except ValueError as e:
            parser.error(str(e))

    logger = Logger(config)
    rng = RandomSource(config.seed)
    try:
        if variant is not None:
            try:
                play_variant(variant, config, rng, logger)
            except EOFError:
                log.info("Input closed during a game")
        else:
            run_menu(config, rng, logger)
        logger.log_summary()
    finally:
        logger.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())

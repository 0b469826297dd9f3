#!/usr/bin/env python3
"""
dicebits CLI - Command-line interface for diceware8k / base64 / hex secrets.
"""

import argparse
import logging
import re
import sys

from dicebits.config import Config, DEFAULTS
from dicebits.core.entropy import EntropyBuffer, EntropySourceError
from dicebits.core.generator import Engine, generate_line, calculate_entropy
from dicebits.core.log import get_logger, setup_logging

logger = get_logger('cli')

_COUNT_RE = re.compile(r"[0-9]+")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="dicebits",
        description="diceware8k/base64/hex passphrase generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog="""
  n: password length (default: 5 words (diceware8k) or 16 characters (the rest))

Examples:
  %(prog)s                # 5 diceware8k words
  %(prog)s 7              # 7 diceware8k words
  %(prog)s -b             # 16 base64 characters
  %(prog)s -h 32          # 32 hex digits
        """
    )

    engine_group = parser.add_mutually_exclusive_group()
    engine_group.add_argument("-b", dest="engine", action="store_const",
                              const=Engine.BASE64, help="select base64 passwords")
    engine_group.add_argument("-h", dest="engine", action="store_const",
                              const=Engine.HEX, help="select hex passwords")

    parser.add_argument("-e", "--entropy", action="store_true",
                        help="Report estimated strength on stderr")
    parser.add_argument("--help", action="help",
                        help="Show this help message and exit")
    parser.add_argument("n", nargs="?",
                        help="password length")
    parser.set_defaults(engine=Engine.WORDS)
    return parser


def _max_count(config: Config) -> int:
    value = config.get("generator", "max_count")
    if isinstance(value, int) and not isinstance(value, bool) and value >= 1:
        return value
    default = DEFAULTS["generator"]["max_count"]
    logger.warning("Invalid generator.max_count %r, using %d", value, default)
    return default


def _log_level(config: Config):
    level = config.get("logging", "level")
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    if isinstance(level, str) and isinstance(logging.getLevelName(level.upper()), int):
        return level.upper()
    default = DEFAULTS["logging"]["level"]
    logger.warning("Invalid logging.level %r, using %s", level, default)
    return default


def parse_count(parser, value, default: int, max_count: int) -> int:
    """Validate the positional token count; usage error (exit 2) if invalid."""
    if value is None:
        return default
    digits = value.lstrip("0") if _COUNT_RE.fullmatch(value) else None
    # int() refuses digit strings past sys.get_int_max_str_digits().
    if (digits is None or len(digits) > len(str(max_count))
            or not 1 <= int(digits or "0") <= max_count):
        parser.error(f"{value} must be a small positive integer (1-{max_count})")
    return int(digits)


def main(argv=None, buffer=None):
    config = Config()
    setup_logging(_log_level(config), config.get("logging", "file"))

    parser = build_parser()
    args = parser.parse_args(argv)

    engine = args.engine
    count = parse_count(parser, args.n, engine.default_count, _max_count(config))
    logger.debug("Engine %s, %d tokens", engine.label, count)

    if buffer is None:
        buffer = EntropyBuffer()

    try:
        # Nothing reaches stdout until the whole line is built.
        line = generate_line(engine, count, buffer)
    except EntropySourceError as e:
        logger.critical("Entropy source failure: %s", e)
        logger.debug("Entropy source failure detail", exc_info=True)
        print(f"fatal: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nUser interrupt", file=sys.stderr)
        return 130
    finally:
        buffer.wipe()

    sys.stdout.write(line)
    sys.stdout.flush()

    if args.entropy:
        bits = calculate_entropy(engine, count)
        print(f"Entropy: ~{bits:.0f} bits", file=sys.stderr)

    return 0


def run():
    sys.exit(main() or 0)


if __name__ == "__main__":
    run()

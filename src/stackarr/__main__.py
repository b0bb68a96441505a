"""Run a stack-language program given as command-line words."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Final

from .errors import ArrayValueError
from .evaluator import RunResult, run_with_errors
from .values import format_value

_DEFAULT_LOG_LEVEL: Final[str] = os.environ.get("STACKARR_LOG_LEVEL", "WARNING")
_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_VALUE_OPTIONS: Final[tuple[str, ...]] = ("--format", "--log-level")

logger = logging.getLogger("stackarr")


def _log_level(text: str) -> str:
    level = text.upper()
    if level not in _LOG_LEVELS:
        raise argparse.ArgumentTypeError(f"invalid log level {text!r} (choose from {', '.join(_LOG_LEVELS)})")
    return level


def _split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split leading options from program words.

    Everything from the first non-option argument on is program source, even
    words such as ``--`` or ``-.`` that argparse would treat as its own syntax.
    """
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in ("-h", "--help"):
            i += 1
        elif arg in _VALUE_OPTIONS:
            i += 2
        elif arg.startswith(tuple(f"{opt}=" for opt in _VALUE_OPTIONS)):
            i += 1
        else:
            break
    return argv[:i], argv[i:]


def _render(result: RunResult, fmt: str) -> str:
    if fmt == "debug" or not result.ok:
        return repr(result)
    if fmt == "text":
        return "\n".join(format_value(value) for value in result.values)

    from .arrays import to_jax

    return "\n".join(repr(to_jax(value)) for value in result.values)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stackarr",
        usage="%(prog)s [options] WORDS...",
        description=__doc__,
        epilog="Program words follow the options; they are joined with single spaces.",
    )
    parser.add_argument(
        "--format",
        choices=("debug", "text", "jax"),
        default="debug",
        help="how to print the final value stack",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=_DEFAULT_LOG_LEVEL,
        help="logging level (default from STACKARR_LOG_LEVEL, else WARNING)",
    )
    options, words = _split_argv(sys.argv[1:] if argv is None else list(argv))
    args = parser.parse_args(options)

    logging.basicConfig(level=args.log_level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    result = run_with_errors(" ".join(words))
    for err in result.parse_errors:
        logger.warning("parse error: %s", err)

    try:
        rendered = _render(result, args.format)
    except ArrayValueError as err:
        print(f"Err({err!r})")
        return 1
    print(rendered)
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())

# taskhook/main.py - Taskwarrior on-modify hook

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from dotenv import load_dotenv
from pydantic import ValidationError

from .codec import TaskCodec
from .config import Settings
from .errors import DecodeError, EncodeError
from .hook import is_archive_transition
from .utils import setup_logger

logger = setup_logger("taskhook.main")


def read_two_lines(stream: TextIO) -> Optional[List[str]]:
    """Read the original and the modified task lines, or None if either is missing."""
    lines = []
    for _ in range(2):
        line = stream.readline()
        if not line:
            return None
        lines.append(line.rstrip("\r\n"))
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskhook-on-modify",
        description="Re-encode a modified task and report archive-worthy status changes",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging on stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    """Entry point. Returns the process exit code."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    args = build_parser().parse_args(argv)

    load_dotenv()
    try:
        cfg = Settings.from_env()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=stdout)
        return 1
    setup_logger(level=logging.DEBUG if args.verbose else cfg.log_level)

    lines = read_two_lines(stdin)
    if lines is None:
        print("Error reading standard input: expected two task lines", file=stdout)
        return 1
    original_line, modified_line = lines

    codec = TaskCodec()
    try:
        original = codec.decode(original_line)
        modified = codec.decode(modified_line)
    except DecodeError as e:
        print(f"Error decoding JSON: {e}", file=stdout)
        return 1

    try:
        result = codec.encode(modified)
    except EncodeError as e:
        print(f"Error marshalling JSON: {e}", file=stdout)
        return 1

    logger.debug(f"task {modified.uuid or '?'}: {original.status!r} -> {modified.status!r}")
    print(result.decode("utf-8"), file=stdout)

    if is_archive_transition(original.status, modified.status, cfg):
        logger.info(f"archive-worthy transition for task {modified.uuid}")
        print(f"Task archived from {original.status} to {modified.status}", file=stdout)

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

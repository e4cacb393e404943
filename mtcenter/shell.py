"""Interactive command shell."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional, Sequence, TextIO

from .parser import ParseError, parse_line
from .registry import dispatch
from .router import init_registry

PROMPT = "[MT6883-VSC] > "

_CYAN = "\x1b[38;5;14m"
_GREEN = "\x1b[38;5;10m"
_RED = "\x1b[38;5;9m"
_DARK_GREY = "\x1b[38;5;8m"
_RESET = "\x1b[0m"
_NEXT_LINE = "\x1b[1E"


def draw_prompt(out: Optional[TextIO] = None) -> None:
    """Write the coloured prompt."""
    stream = out if out is not None else sys.stdout
    stream.write(f"{_CYAN}{PROMPT}{_RESET}")
    stream.flush()


def print_result(
    ok: bool, message: str, payload: Optional[Any] = None, out: Optional[TextIO] = None
) -> None:
    """Write a result message, green on success and red on failure, then any payload."""
    stream = out if out is not None else sys.stdout
    color = _GREEN if ok else _RED
    stream.write(f"{_NEXT_LINE}{color}{message}{_RESET}")
    if payload is not None:
        pretty = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False, default=str)
        stream.write(f"{_NEXT_LINE}{_DARK_GREY}{pretty}{_RESET}")
    stream.write(_NEXT_LINE)
    stream.flush()


def run_repl(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Read commands until end of input, 'exit' or 'quit', printing each result."""
    source = stdin if stdin is not None else sys.stdin
    init_registry()
    while True:
        draw_prompt(stdout)
        try:
            raw = source.readline()
        except OSError:
            break
        if not raw:
            break
        line = raw.strip()
        if not line:
            continue
        if line in ("exit", "quit"):
            break
        try:
            cmd = parse_line(line)
        except ParseError as exc:
            print_result(False, str(exc), None, stdout)
            continue
        result = dispatch(cmd)
        print_result(result.ok, result.message, result.payload, stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive shell."""
    parser = argparse.ArgumentParser(prog="mtcenter", description="Interactive command center shell.")
    parser.parse_args(argv)
    run_repl()
    return 0
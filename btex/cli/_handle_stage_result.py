"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

import typer

from btex.cli.display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format stored by the main callback, default yaml."""
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(
    func: F,
    ctx: typer.Context | None = None,
    result_printer: Callable[[dict], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON/YAML, or via ``result_printer``)

    ``ctx`` is the invoking command's Typer context; the output format is
    read from the nearest context carrying ``display_format``.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        display_format = _extract_display_format(ctx)

        result = func(*args, **kwargs)
        display.status(result.announce)

        for progress_percent, message in result.progress_callback(result):
            timestamp = datetime.now().strftime("%H:%M:%S")
            display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")

        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

        if result_printer and result.success:
            result_printer(result.output)
        else:
            display.json_output(result.output, format=display_format)

        sys.exit(0 if result.success else 1)

    return wrapper  # type: ignore[return-value]

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any

from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.markup import escape


class InputOutputError(Exception):
    pass


class UsageError(InputOutputError):
    pass


class OpError(InputOutputError):
    pass


class ParseError(OpError, ValueError):
    """Raised when a token cannot be converted to the type the current read needs."""

    def __init__(self, *, expected: str, token: str | None, message: str | None = None) -> None:
        self.expected = expected
        self.token = token
        if message is None:
            message = f"expected {expected}, got {token!r}"
        super().__init__(message)


class InputExhaustedError(ParseError):
    def __init__(self, *, expected: str) -> None:
        super().__init__(expected=expected, token=None, message=f"input ended while reading {expected}")


class ScannerClosedError(OpError):
    pass


INPUTOUTPUT_JSON = "INPUTOUTPUT_JSON"


@dataclass(frozen=True)
class GlobalOpts:
    json_output: bool = False
    pretty: bool = True


_ERROR_CONSOLE = Console(stderr=True, soft_wrap=True)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}", highlight=False)


def _truthy(raw: str | None) -> bool:
    return str(raw or "").strip().lower() in {"1", "true", "yes", "on"}


def _env_or_none(*names: str) -> str | None:
    for n in names:
        v = (os.environ.get(n) or "").strip()
        if v:
            return v
    return None


def _bootstrap_env() -> None:
    # Discover .env from the working directory; exported values win.
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)


def _resolve_global_opts(*, json_flag: bool, plain_json: bool) -> GlobalOpts:
    json_output = json_flag or _truthy(_env_or_none(INPUTOUTPUT_JSON))
    if plain_json and not json_output:
        raise UsageError(f"--plain-json requires --json (or {INPUTOUTPUT_JSON}=1)")
    return GlobalOpts(json_output=json_output, pretty=not plain_json)


def _dump_json(obj: Any, *, pretty: bool) -> str:
    try:
        if pretty:
            text = json.dumps(obj, indent=2, sort_keys=True, allow_nan=False)
        else:
            text = json.dumps(obj, separators=(",", ":"), sort_keys=True, allow_nan=False)
    except ValueError as e:
        raise OpError(f"summary cannot be encoded as JSON: {e}") from e
    return text + "\n"

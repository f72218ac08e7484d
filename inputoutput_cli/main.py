from __future__ import annotations

import sys

import click
import typer

from . import __version__
from .cli_shared import (
    INPUTOUTPUT_JSON,
    OpError,
    UsageError,
    _bootstrap_env,
    _dump_json,
    _resolve_global_opts,
    _rich_error,
)
from .sequencer import PersonSummary, run_sequence

try:
    # Newer typer releases raise from a bundled click copy whose exceptions do
    # not subclass the installed click package.
    from typer._click.exceptions import ClickException as _TyperClickException
except ImportError:
    _TyperClickException = click.ClickException

_CLICK_ERRORS = (click.ClickException, _TyperClickException)


app = typer.Typer(
    name="inputoutput",
    help="Prompt for a name, age, salary and mood, then print them back.",
    add_completion=False,
    pretty_exceptions_enable=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"inputoutput {__version__}")
        raise typer.Exit(code=0)


@app.command()
def run(
    json_output: bool = typer.Option(
        False,
        "--json",
        help=f"Print the summary as JSON (env override: {INPUTOUTPUT_JSON})",
    ),
    plain_json: bool = typer.Option(False, "--plain-json", help="Emit compact JSON output"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version
    g = _resolve_global_opts(json_flag=json_output, plain_json=plain_json)
    out = sys.stdout

    def _emit_json(summary: PersonSummary) -> None:
        text = _dump_json(summary.to_payload(), pretty=g.pretty)
        out.write("\n" + text)
        out.flush()

    run_sequence(sys.stdin, out, emit=_emit_json if g.json_output else None)


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        _bootstrap_env()
        result = app(args=argv, prog_name="inputoutput", standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except _CLICK_ERRORS as e:
        _rich_error(e.format_message())
        return int(e.exit_code)
    except UsageError as e:
        _rich_error(str(e))
        return 2
    except OpError as e:
        sys.stdout.flush()
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

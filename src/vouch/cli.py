from __future__ import annotations

import json
import pathlib
from typing import Any, Dict, List, Optional

import typer
import structlog
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import DecimalConfig, ValidationConfig, load_config
from .dispatch import supported_types, validate_input
from .types import InputType, ValidationResult

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="vouch — deterministic input validator")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"vouch {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to a YAML file of default validation options"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(processors=[structlog.processors.JSONRenderer()])
    ctx.obj = {"config": load_config(config) if config else ValidationConfig()}
    if verbose:
        log.info("verbose_enabled")


def _with_overrides(base: ValidationConfig, **options: Any) -> ValidationConfig:
    """Layer command-line options over the config file; unset options keep file values."""
    update: Dict[str, Any] = {k: v for k, v in options.items() if v is not None and k != "decimals"}
    decimals = options.get("decimals") or {}
    decimals = {k: v for k, v in decimals.items() if v is not None}
    if decimals:
        current = base.decimals or DecimalConfig()
        update["decimals"] = current.model_copy(update=decimals)
    return base.model_copy(update=update)


def _print_result(value: str, result: ValidationResult) -> None:
    shown = escape(repr(value))
    if result.is_valid:
        normalized = result.normalized_value
        suffix = f" (normalized: {escape(json.dumps(normalized, default=str))})" if normalized is not None else ""
        console.print(f"[green]valid[/green] {shown}{suffix}")
    else:
        console.print(f"[red]invalid[/red] {shown}: {escape(result.error_message)}")


@app.command()
def check(
    ctx: typer.Context,
    input_type: InputType = typer.Argument(..., help="Input type tag (see `vouch types`)"),
    value: str = typer.Argument(..., help="Value to validate"),
    min_value: Optional[float] = typer.Option(None, "--min", help="Minimum number (or age)"),
    max_value: Optional[float] = typer.Option(None, "--max", help="Maximum number (or age)"),
    min_length: Optional[int] = typer.Option(None, "--min-length"),
    max_length: Optional[int] = typer.Option(None, "--max-length"),
    fix_length: Optional[int] = typer.Option(None, "--fix-length", help="Exact text length"),
    min_decimals: Optional[int] = typer.Option(None, "--min-decimals"),
    max_decimals: Optional[int] = typer.Option(None, "--max-decimals"),
    extensions: Optional[List[str]] = typer.Option(None, "--ext", help="Accepted file extension (repeatable)"),
    no_special_chars: bool = typer.Option(False, "--no-special-chars", help="Only letters, digits and spaces"),
    message: Optional[str] = typer.Option(None, "--message", help="Custom error message"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Validate a single VALUE; exits 1 when it is invalid."""
    base: ValidationConfig = ctx.obj["config"]
    cfg = _with_overrides(
        base,
        min=min_value,
        max=max_value,
        min_length=min_length,
        max_length=max_length,
        fix_length=fix_length,
        decimals={"min": min_decimals, "max": max_decimals},
        accepted_file_extensions=tuple(extensions) if extensions else None,
        allow_special_chars=False if no_special_chars else None,
        custom_error_message=message,
    )
    result = validate_input(value, input_type, cfg)
    if as_json:
        console.print_json(json.dumps(result.to_dict()))
    else:
        _print_result(value, result)
    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command()
def batch(
    ctx: typer.Context,
    src: pathlib.Path = typer.Argument(..., help="Text file with one value per line"),
    input_type: InputType = typer.Option(..., "--type", "-t", help="Input type tag for every line"),
    report: Optional[pathlib.Path] = typer.Option(None, "--report", help="Write JSON-lines results to this path"),
):
    """Validate every non-blank line of SRC; exits 1 if any value is invalid."""
    cfg: ValidationConfig = ctx.obj["config"]
    try:
        lines = src.read_text().splitlines()
    except OSError as e:
        raise typer.BadParameter(f"cannot read {src}: {e}")

    rows = []
    invalid = 0
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        result = validate_input(line, input_type, cfg)
        if not result.is_valid:
            invalid += 1
            console.print(f"line {line_no}: [red]{escape(result.error_message)}[/red]")
        rows.append({"line": line_no, "value": line, **result.to_dict()})

    console.print(f"Checked {len(rows)} values, {invalid} invalid")
    if report:
        report.parent.mkdir(parents=True, exist_ok=True)
        report.write_text("".join(json.dumps(r, default=str) + "\n" for r in rows))
        console.print(f"[green]Report written:[/green] {report}")
    if invalid:
        raise typer.Exit(code=1)


@app.command()
def types():
    """List the supported input type tags."""
    table = Table("type")
    for tag in supported_types():
        table.add_row(tag)
    console.print(table)

import asyncio
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
import json
import logging
from pathlib import Path
from typing import Any

import typer

from paritypack.catalog import (
    BUILTIN_ENDPOINTS,
    CatalogError,
    get_endpoint,
)
from paritypack.compare import (
    BackendResult,
    ComparisonEngine,
    ComparisonError,
    run_comparison,
)
from paritypack.config import ComparisonConfig, ConfigError, load_comparison_config
from paritypack.core.types import DEFAULT_IGNORE_FIELDS
from paritypack.diff import (
    DiffResult,
    IgnorePatternError,
    IgnoreSpec,
    generate_diff,
    render_diff_summary,
)
from paritypack.render import render_report_page

app = typer.Typer(help="ParityKit CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_cli_version() -> str:
    try:
        return package_version("paritykit")
    except PackageNotFoundError:
        from paritykit import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show ParityKit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Log progress to stderr (-v for info, -vv for debug).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json
    _configure_logging(verbose)


def _configure_logging(verbosity: int) -> None:
    if verbosity <= 0:
        return
    level = logging.DEBUG if verbosity > 1 else logging.INFO
    logger = logging.getLogger("paritypack")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _fail(command: str, error: Exception, *, json_output: bool, exit_code: int = 2) -> None:
    message = f"{command} failed: {error}"
    if json_output:
        _echo_json({"status": "error", "exit_code": exit_code, "message": message})
    else:
        _echo(message, err=True)
    raise typer.Exit(code=exit_code) from error


def _build_ignore(
    ignore: list[str] | None,
    *,
    default_ignore: bool,
    base: IgnoreSpec | None = None,
) -> IgnoreSpec:
    if base is None:
        base = IgnoreSpec(entries=DEFAULT_IGNORE_FIELDS if default_ignore else ())
    elif not default_ignore:
        base = IgnoreSpec(entries=())
    return base.extend(ignore or ())


def _read_json_body(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise ValueError(f"invalid JSON in {path}: {error}") from error


def _parse_params(raw_params: list[str] | None) -> dict[str, str]:
    values: dict[str, str] = {}
    for raw in raw_params or []:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"invalid --param {raw!r}; expected NAME=VALUE")
        values[key.strip()] = value
    return values


def _write_html_report(
    out: Path,
    real: BackendResult,
    clone: BackendResult,
    diff: DiffResult,
    *,
    title: str,
) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_report_page(real, clone, diff, title=title), encoding="utf-8")


def _engine_factory(config: ComparisonConfig) -> ComparisonEngine:
    return config.build_engine()


@app.command()
def diff(
    real: Path = typer.Argument(..., help="Path to the reference response body (JSON)."),
    clone: Path = typer.Argument(..., help="Path to the candidate response body (JSON)."),
    ignore: list[str] | None = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Repeatable field name, full path or '*' pattern to exclude.",
    ),
    default_ignore: bool = typer.Option(
        True,
        "--default-ignore/--no-default-ignore",
        help="Include the built-in identifier ignore list.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
    html_out: Path | None = typer.Option(
        None,
        "--html",
        help="Write an annotated HTML comparison report to this path.",
    ),
    max_records: int = typer.Option(
        50,
        "--max-records",
        help="Maximum number of differences to print in text mode.",
    ),
) -> None:
    """Diff two saved response bodies."""
    try:
        real_body = _read_json_body(real)
        clone_body = _read_json_body(clone)
        spec = _build_ignore(ignore, default_ignore=default_ignore)
    except (OSError, ValueError) as error:
        _fail("diff", error, json_output=json_output)

    result = generate_diff(real_body, clone_body, spec)

    if html_out is not None:
        _write_html_report(
            html_out,
            BackendResult(status=200, body=real_body),
            BackendResult(status=200, body=clone_body),
            result,
            title=f"{real.name} vs {clone.name}",
        )

    exit_code = 1 if result.has_differences else 0
    if json_output:
        _echo_json(
            {
                **result.to_dict(),
                "status": "ok",
                "exit_code": exit_code,
                "real_path": str(real),
                "clone_path": str(clone),
                "html_path": str(html_out) if html_out is not None else None,
            }
        )
    else:
        _echo(render_diff_summary(result, max_records=max(1, max_records)), force=exit_code != 0)
        if html_out is not None:
            _echo(f"report written: {html_out}")

    if exit_code:
        raise typer.Exit(code=exit_code)


@app.command()
def endpoints(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit the catalog as JSON.",
    ),
) -> None:
    """List the built-in endpoint catalog."""
    if json_output:
        _echo_json({"endpoints": [endpoint.to_dict() for endpoint in BUILTIN_ENDPOINTS]})
        return
    for endpoint in BUILTIN_ENDPOINTS:
        _echo(f"{endpoint.id:<16} {endpoint.method:<6} {endpoint.path}")


@app.command()
def compare(
    endpoint_id: str = typer.Argument(..., help="Catalog endpoint id, e.g. list-labels."),
    config_path: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to JSON comparison config (backends, auth, ignore list).",
    ),
    param: list[str] | None = typer.Option(
        None,
        "--param",
        "-p",
        help="Repeatable NAME=VALUE endpoint parameter.",
    ),
    ignore: list[str] | None = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Repeatable extra field name, full path or '*' pattern to exclude.",
    ),
    default_ignore: bool = typer.Option(
        True,
        "--default-ignore/--no-default-ignore",
        help="Keep the config's ignore list (or the built-in one).",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable comparison output.",
    ),
    html_out: Path | None = typer.Option(
        None,
        "--html",
        help="Write an annotated HTML comparison report to this path.",
    ),
    max_records: int = typer.Option(
        50,
        "--max-records",
        help="Maximum number of differences to print in text mode.",
    ),
) -> None:
    """Call one endpoint on both backends and diff the responses."""
    try:
        config = load_comparison_config(config_path)
        endpoint = get_endpoint(endpoint_id)
        values = _parse_params(param)
        spec = _build_ignore(ignore, default_ignore=default_ignore, base=config.ignore)
        engine = _engine_factory(config)
        outcome = asyncio.run(run_comparison(engine, endpoint, values, ignore_fields=spec))
    except (ConfigError, CatalogError, ComparisonError, IgnorePatternError, ValueError) as error:
        _fail("compare", error, json_output=json_output)

    if html_out is not None:
        _write_html_report(
            html_out,
            outcome.dual.real,
            outcome.dual.clone,
            outcome.diff,
            title=f"{endpoint.name} ({endpoint.method} {endpoint.path})",
        )

    exit_code = 1 if outcome.diff.has_differences else 0
    if json_output:
        _echo_json(
            {
                **outcome.to_dict(),
                "status": "ok",
                "exit_code": exit_code,
                "html_path": str(html_out) if html_out is not None else None,
            }
        )
    else:
        real_result = outcome.dual.real
        clone_result = outcome.dual.clone
        _echo(
            f"{endpoint.id}: real={real_result.status or 'error'} ({real_result.response_time}ms) "
            f"clone={clone_result.status or 'error'} ({clone_result.response_time}ms) "
            f"dual={outcome.dual.dual_duration}ms"
        )
        for side, result in (("real", real_result), ("clone", clone_result)):
            if result.error:
                _echo(f"{side} error: {result.error}", err=True)
        _echo(
            render_diff_summary(outcome.diff, max_records=max(1, max_records)),
            force=exit_code != 0,
        )
        if html_out is not None:
            _echo(f"report written: {html_out}")

    if exit_code:
        raise typer.Exit(code=exit_code)


def main() -> None:
    app()

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from fparams.core.ast import GoSyntaxError
from fparams.core.lint import LintedFile, fix_source, lint_paths, lint_source, render_diff, unfixed_diagnostics
from fparams.core.sources import discover_go_files
from fparams.models import Diagnostic, FileReport, LintConfig

console = Console()
err_console = Console(stderr=True)

_CODE_PATH = "<code>"

EXIT_ERROR = 1
EXIT_DIAGNOSTICS = 3


def _format_diagnostic(path: str, diagnostic: Diagnostic) -> str:
    return f"{path}:{diagnostic.start.row + 1}:{diagnostic.start.column + 1}: {diagnostic.message}"


def _echo_raw(text: str) -> None:
    # rich would expand tabs in source text
    typer.echo(text, nl=False)


def _lint_code(code: str, config: LintConfig) -> LintedFile:
    source_bytes = code.encode("utf-8")
    try:
        return LintedFile(lint_source(source_bytes, config, _CODE_PATH), source_bytes)
    except GoSyntaxError as exc:
        return LintedFile(FileReport(path=_CODE_PATH, error=str(exc)), source_bytes)


def _apply_fixes(linted: list[LintedFile], code: str | None, diff: bool) -> int:
    fixed_files = 0
    for item in linted:
        report, before = item.report, item.source
        if report.error is not None or not report.diagnostics or before is None:
            continue
        after = fix_source(before, report)
        if after == before:
            continue
        if diff:
            _echo_raw(render_diff(report.path, before, after))
        elif code is not None:
            _echo_raw(after.decode("utf-8"))
        else:
            Path(report.path).write_bytes(after)
        fixed_files += 1
    return fixed_files


def check(
    paths: Annotated[list[str] | None, typer.Argument(help="Go files or directories to check.")] = None,
    code: Annotated[str | None, typer.Option(help="Go source code string to check instead of files.")] = None,
    disable_check_func_params: Annotated[
        bool,
        typer.Option(
            "--disable-check-func-params",
            envvar="FPARAMS_DISABLE_CHECK_FUNC_PARAMS",
            help="Disable the function parameters check.",
        ),
    ] = False,
    disable_check_func_returns: Annotated[
        bool,
        typer.Option(
            "--disable-check-func-returns",
            envvar="FPARAMS_DISABLE_CHECK_FUNC_RETURNS",
            help="Disable the function returns check.",
        ),
    ] = False,
    fix: Annotated[bool, typer.Option("--fix", help="Apply suggested fixes in place.")] = False,
    diff: Annotated[bool, typer.Option("--diff", help="Show the suggested fixes as a unified diff.")] = False,
    json_output: Annotated[bool, typer.Option("--json", help="Print reports as JSON.")] = False,
) -> None:
    """Check that function parameters and returns are inline or one per line."""
    writes_fixes = fix and not diff
    config = LintConfig(
        disable_check_func_params=disable_check_func_params,
        disable_check_func_returns=disable_check_func_returns,
    )

    if json_output and (diff or (fix and code is not None)):
        raise typer.BadParameter("cannot be combined with output that prints source or diffs", param_hint="--json")

    if code is not None:
        linted = [_lint_code(code, config)]
    else:
        try:
            files = discover_go_files(paths or ["."])
        except (FileNotFoundError, ValueError) as exc:
            raise typer.BadParameter(str(exc), param_hint="PATHS") from None
        linted = lint_paths(files, config)
    reports = [item.report for item in linted]

    if json_output:
        console.print_json(data=[report.model_dump(mode="json") for report in reports])
    else:
        for report in reports:
            if report.error is not None:
                err_console.print(f"[red]error[/red]: {escape(report.error)}", soft_wrap=True)
            remaining = unfixed_diagnostics(report) if writes_fixes else report.diagnostics
            for diagnostic in remaining:
                typer.echo(_format_diagnostic(report.path, diagnostic))

    if fix or diff:
        fixed_files = _apply_fixes(linted, code, diff)
        if writes_fixes and code is None:
            err_console.print(f"[green]Fixed[/green] {fixed_files} file(s)", soft_wrap=True)

    if any(report.error is not None for report in reports):
        raise typer.Exit(code=EXIT_ERROR)
    if writes_fixes:
        outstanding = [d for report in reports for d in unfixed_diagnostics(report)]
    else:
        outstanding = [d for report in reports for d in report.diagnostics]
    if outstanding:
        raise typer.Exit(code=EXIT_DIAGNOSTICS)

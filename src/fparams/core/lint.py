import difflib
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from fparams.core.ast import GoSyntaxError, parse_go_source
from fparams.core.report import check_functions
from fparams.models import Diagnostic, FileReport, LintConfig, TextEdit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintedFile:
    """A report together with the exact bytes it was computed from.

    ``source`` is None when the file could not be read.
    """

    report: FileReport
    source: bytes | None = None


def lint_source(source_bytes: bytes, config: LintConfig, path: str = "<source>") -> FileReport:
    decls = parse_go_source(source_bytes, path)
    diagnostics = check_functions(decls, config)
    logger.debug("Checked %d declaration(s) in %s: %d diagnostic(s)", len(decls), path, len(diagnostics))
    return FileReport(path=path, diagnostics=diagnostics)


def read_source(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None


def lint_file(path: str, config: LintConfig) -> FileReport:
    return lint_source(read_source(path), config, path)


def lint_paths(paths: Iterable[Path], config: LintConfig) -> list[LintedFile]:
    """Lint every file once, recording read and parse failures on the file's report."""
    linted: list[LintedFile] = []
    for path in paths:
        source_bytes: bytes | None = None
        try:
            source_bytes = read_source(str(path))
            linted.append(LintedFile(lint_source(source_bytes, config, str(path)), source_bytes))
        except (GoSyntaxError, OSError) as exc:
            logger.debug("Could not lint %s: %s", path, exc)
            linted.append(LintedFile(FileReport(path=str(path), error=str(exc)), source_bytes))
    return linted


def collect_edits(diagnostics: Sequence[Diagnostic]) -> list[TextEdit]:
    return [edit for diagnostic in diagnostics for fix in diagnostic.suggested_fixes for edit in fix.edits]


def apply_edits(source_bytes: bytes, edits: Sequence[TextEdit]) -> bytes:
    """Return ``source_bytes`` with every edit applied.

    Edits are given in original-source byte offsets and must not overlap.
    """
    ordered = sorted(edits, key=lambda edit: (edit.start.offset, edit.end.offset))
    parts: list[bytes] = []
    cursor = 0
    for edit in ordered:
        if edit.start.offset < cursor:
            raise ValueError(f"Overlapping edit at offset {edit.start.offset}")
        if edit.end.offset < edit.start.offset or edit.end.offset > len(source_bytes):
            raise ValueError(f"Edit span {edit.start.offset}..{edit.end.offset} is out of range")
        parts.append(source_bytes[cursor : edit.start.offset])
        parts.append(edit.new_text.encode("utf-8", errors="surrogateescape"))
        cursor = edit.end.offset
    parts.append(source_bytes[cursor:])
    return b"".join(parts)


def fix_source(source_bytes: bytes, report: FileReport) -> bytes:
    return apply_edits(source_bytes, collect_edits(report.diagnostics))


def unfixed_diagnostics(report: FileReport) -> list[Diagnostic]:
    """Diagnostics whose invalid lists did not all receive a suggested fix."""
    return [d for d in report.diagnostics if len(d.suggested_fixes) < len(d.lists)]


def render_diff(path: str, before: bytes, after: bytes) -> str:
    diff = difflib.unified_diff(
        before.decode("utf-8", errors="replace").splitlines(keepends=True),
        after.decode("utf-8", errors="replace").splitlines(keepends=True),
        fromfile=f"{path} (original)",
        tofile=f"{path} (fixed)",
    )
    return "".join(diff)

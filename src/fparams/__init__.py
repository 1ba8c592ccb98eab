from fparams.core.ast import GoSyntaxError, parse_go_source
from fparams.core.layout import FieldListView, build_replacement, extract_views, is_valid
from fparams.core.lint import apply_edits, lint_file, lint_source
from fparams.core.report import check_function
from fparams.models import Diagnostic, FileReport, LintConfig

__all__ = [
    "Diagnostic",
    "FieldListView",
    "FileReport",
    "GoSyntaxError",
    "LintConfig",
    "apply_edits",
    "build_replacement",
    "check_function",
    "extract_views",
    "is_valid",
    "lint_file",
    "lint_source",
    "parse_go_source",
]

import logging

from fparams.core.layout import FieldListView, extract_views, is_valid, synthesize_fix
from fparams.models import Diagnostic, FieldGroup, FuncDecl, LintConfig, SuggestedFix

logger = logging.getLogger(__name__)

_MSG_BOTH = 'the parameters and returns of the function "{name}" should be on separate lines'
_MSG_PARAMS = 'the parameters of the function "{name}" should be on separate lines'
_MSG_RETURNS = 'the returns of the function "{name}" should be on separate lines'


def build_message(name: str, params_invalid: bool, returns_invalid: bool) -> str | None:
    if params_invalid and returns_invalid:
        return _MSG_BOTH.format(name=name)
    if params_invalid:
        return _MSG_PARAMS.format(name=name)
    if returns_invalid:
        return _MSG_RETURNS.format(name=name)
    return None


def _group_for(decl: FuncDecl, view: FieldListView) -> FieldGroup | None:
    return decl.params if view.kind == "params" else decl.results


def check_function(decl: FuncDecl, config: LintConfig) -> Diagnostic | None:
    """Check one declaration and return its diagnostic, if any.

    Invalid lists each contribute one suggested fix, except lists holding
    comments: their expanded form is rebuilt from names and types only.
    """
    params, returns = extract_views(decl, config)
    invalid = [view for view in (params, returns) if view is not None and not is_valid(view)]
    if not invalid:
        return None

    message = build_message(
        decl.name,
        params_invalid=any(view.kind == "params" for view in invalid),
        returns_invalid=any(view.kind == "returns" for view in invalid),
    )
    assert message is not None

    fixes: list[SuggestedFix] = []
    for view in invalid:
        group = _group_for(decl, view)
        if group is not None and group.has_comments:
            logger.debug("Skipping fix for %s of %s: list contains comments", view.kind, decl.name)
            continue
        fixes.append(SuggestedFix(message=message, edits=(synthesize_fix(view),)))

    return Diagnostic(
        function=decl.name,
        message=message,
        lists=tuple(view.kind for view in invalid),
        start=invalid[0].open_position,
        end=invalid[-1].close_position,
        suggested_fixes=tuple(fixes),
    )


def check_functions(decls: list[FuncDecl], config: LintConfig) -> list[Diagnostic]:
    diagnostics = []
    for decl in decls:
        diagnostic = check_function(decl, config)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
    return diagnostics

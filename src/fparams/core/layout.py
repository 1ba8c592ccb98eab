"""Parameter and result list layout checks.

A list is compliant when it is either written inline with the declaration or
expanded so that every entry, and each enclosing parenthesis, sits on its own
line. The helpers here extract the lists worth checking from a declaration,
decide whether they comply, and synthesize the expanded replacement.
"""

from dataclasses import dataclass
from typing import Literal

from fparams.models import Field, FieldGroup, FuncDecl, LintConfig, Position, TextEdit

ListKind = Literal["params", "returns"]

INDENT = "\t"
SEPARATOR = ","


@dataclass(frozen=True)
class FieldListView:
    """Position-bounded view of one parameter or result list.

    ``open_position`` is just after ``(`` and ``close_position`` is at ``)``.
    """

    kind: ListKind
    open_position: Position
    close_position: Position
    fields: tuple[Field, ...]


def _open_inside(group: FieldGroup) -> Position:
    start = group.start
    return Position(row=start.row, column=start.column + 1, offset=start.offset + 1)


def _make_view(kind: ListKind, group: FieldGroup | None) -> FieldListView | None:
    if group is None or not group.fields:
        return None
    return FieldListView(kind=kind, open_position=_open_inside(group), close_position=group.end, fields=group.fields)


def is_single_line(decl: FuncDecl) -> bool:
    if decl.body_start is None:
        return decl.start.row == decl.signature_end.row
    return decl.start.row == decl.body_start.row


def extract_views(decl: FuncDecl, config: LintConfig) -> tuple[FieldListView | None, FieldListView | None]:
    """Return the (params, returns) views of ``decl`` that need checking."""
    has_params = decl.params is not None and bool(decl.params.fields)
    has_results = decl.results is not None and bool(decl.results.fields)
    if not has_params and not has_results:
        return None, None

    if is_single_line(decl):
        return None, None

    params = None if config.disable_check_func_params else _make_view("params", decl.params)
    returns = None if config.disable_check_func_returns else _make_view("returns", decl.results)
    return params, returns


def _entry_rows(field: Field) -> list[int]:
    if not field.names:
        return [field.start.row]
    return [name.position.row for name in field.names]


def _is_single_entry(view: FieldListView) -> bool:
    return len(view.fields) == 1 and len(view.fields[0].names) <= 1


def is_valid(view: FieldListView) -> bool:
    if not _is_single_entry(view):
        prev_row = view.open_position.row
        for field in view.fields:
            for row in _entry_rows(field):
                if row == prev_row:
                    return False
                prev_row = row

    # the closing paren must not trail the last entry
    return view.fields[-1].end.row != view.close_position.row


def _render_entries(field: Field) -> list[str]:
    if not field.names:
        return [field.type]
    return [f"{name.name} {field.type}" for name in field.names]


def build_replacement(view: FieldListView) -> str:
    lines = ["\n"]
    for field in view.fields:
        for entry in _render_entries(field):
            lines.append(f"{INDENT}{entry}{SEPARATOR}\n")
    return "".join(lines)


def synthesize_fix(view: FieldListView) -> TextEdit:
    return TextEdit(start=view.open_position, end=view.close_position, new_text=build_replacement(view))

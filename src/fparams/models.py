from typing import Literal

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    column: int
    offset: int


class Ident(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    position: Position


class Field(BaseModel):
    """One grouped entry of a parameter or result list, e.g. ``a, b int``.

    ``names`` is empty for an unnamed entry such as a bare result type.
    """

    model_config = ConfigDict(frozen=True)

    names: tuple[Ident, ...] = ()
    type: str
    start: Position
    end: Position


class FieldGroup(BaseModel):
    """A parenthesised parameter or result list.

    ``start`` is the position of the opening ``(`` and ``end`` the position of
    the closing ``)``.
    """

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position
    fields: tuple[Field, ...] = ()
    has_comments: bool = False


class FuncDecl(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    start: Position
    signature_end: Position
    body_start: Position | None = None
    params: FieldGroup | None = None
    results: FieldGroup | None = None


class TextEdit(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position
    new_text: str


class SuggestedFix(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    edits: tuple[TextEdit, ...]


class Diagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    function: str
    message: str
    lists: tuple[Literal["params", "returns"], ...]
    start: Position
    end: Position
    suggested_fixes: tuple[SuggestedFix, ...] = ()


class FileReport(BaseModel):
    path: str
    diagnostics: list[Diagnostic] = []
    error: str | None = None


class LintConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    disable_check_func_params: bool = False
    disable_check_func_returns: bool = False

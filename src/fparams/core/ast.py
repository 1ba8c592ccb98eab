import logging
from functools import cache
from pathlib import Path

from tree_sitter import Node, Query, QueryCursor
from tree_sitter_language_pack import get_language, get_parser

from fparams.models import Field, FieldGroup, FuncDecl, Ident, Position

logger = logging.getLogger(__name__)

_LANGUAGE = "go"
_FIELD_NODE_TYPES = frozenset({"parameter_declaration", "variadic_parameter_declaration"})


class GoSyntaxError(ValueError):
    """Raised when tree-sitter reports an error node in Go source."""


@cache
def _load_query(query_type: str) -> Query:
    queries_dir = Path(__file__).parent.parent / "queries"
    query_path = queries_dir / f"{_LANGUAGE}_{query_type}.scm"
    if not query_path.exists():
        raise FileNotFoundError(f"Query file not found: {query_path}")
    query_text = query_path.read_text(encoding="utf-8")
    return Query(get_language(_LANGUAGE), query_text)


def _start(node: Node) -> Position:
    return Position(row=node.start_point[0], column=node.start_point[1], offset=node.start_byte)


def _end(node: Node) -> Position:
    return Position(row=node.end_point[0], column=node.end_point[1], offset=node.end_byte)


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="surrogateescape")


def _first_error(node: Node) -> Node | None:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _contains_comment(node: Node) -> bool:
    if node.type == "comment":
        return True
    return any(_contains_comment(child) for child in node.children)


def _build_field(field_node: Node, source: bytes) -> Field:
    # The grammar may tag the commas between names with the "name" field too.
    names = tuple(
        Ident(name=_text(name_node, source), position=_start(name_node))
        for name_node in field_node.children_by_field_name("name")
        if name_node.type == "identifier"
    )
    type_node = field_node.child_by_field_name("type")
    type_text = _text(type_node, source) if type_node is not None else ""
    if field_node.type == "variadic_parameter_declaration":
        type_text = "..." + type_text
    return Field(names=names, type=type_text, start=_start(field_node), end=_end(field_node))


def _build_group(list_node: Node, source: bytes) -> FieldGroup:
    fields = tuple(
        _build_field(child, source) for child in list_node.named_children if child.type in _FIELD_NODE_TYPES
    )
    open_paren = list_node.children[0]
    close_paren = list_node.children[-1]
    return FieldGroup(
        start=_start(open_paren),
        end=_start(close_paren),
        fields=fields,
        has_comments=_contains_comment(list_node),
    )


def _build_func_decl(decl_node: Node, name_node: Node, source: bytes) -> FuncDecl:
    params_node = decl_node.child_by_field_name("parameters")
    result_node = decl_node.child_by_field_name("result")
    body_node = decl_node.child_by_field_name("body")
    signature_end_node = result_node if result_node is not None else params_node

    results = None
    # A bare result type such as ``error`` has no delimiters to lay out.
    if result_node is not None and result_node.type == "parameter_list":
        results = _build_group(result_node, source)

    return FuncDecl(
        name=_text(name_node, source),
        start=_start(decl_node),
        signature_end=_end(signature_end_node if signature_end_node is not None else name_node),
        body_start=_start(body_node) if body_node is not None else None,
        params=_build_group(params_node, source) if params_node is not None else None,
        results=results,
    )


def parse_go_source(source_bytes: bytes, path: str = "<source>") -> list[FuncDecl]:
    """Parse Go source and return its function and method declarations in source order.

    Raises GoSyntaxError when the source does not parse cleanly.
    """
    parser = get_parser(_LANGUAGE)
    tree = parser.parse(source_bytes)
    root = tree.root_node

    if root.has_error:
        error_node = _first_error(root) or root
        row, column = error_node.start_point
        raise GoSyntaxError(f"{path}:{row + 1}:{column + 1}: syntax error")

    cursor = QueryCursor(_load_query("functions"))
    decls: list[FuncDecl] = []
    for _, captures in cursor.matches(root):
        decls.append(_build_func_decl(captures["func.decl"][0], captures["func.name"][0], source_bytes))

    decls.sort(key=lambda decl: decl.start.offset)
    logger.debug("Found %d function declaration(s) in %s", len(decls), path)
    return decls


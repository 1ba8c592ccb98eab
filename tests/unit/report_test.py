"""Unit tests for combining list verdicts into diagnostics."""

from collections.abc import Callable

from fparams.core.report import build_message, check_function, check_functions
from fparams.models import FuncDecl, LintConfig

ParseDecl = Callable[[str], FuncDecl]

DEFAULT = LintConfig()


class TestBuildMessage:
    def test_combined(self) -> None:
        expected = 'the parameters and returns of the function "g" should be on separate lines'
        assert build_message("g", True, True) == expected

    def test_parameters_only(self) -> None:
        assert build_message("f", True, False) == 'the parameters of the function "f" should be on separate lines'

    def test_returns_only(self) -> None:
        assert build_message("f", False, True) == 'the returns of the function "f" should be on separate lines'

    def test_nothing_invalid(self) -> None:
        assert build_message("f", False, False) is None


class TestCheckFunction:
    def test_single_line_declaration(self, parse_decl: ParseDecl) -> None:
        assert check_function(parse_decl("func f(a int, b string) {}\n"), DEFAULT) is None

    def test_compliant_declaration(self, parse_decl: ParseDecl) -> None:
        decl = parse_decl("func f(\n    a int,\n    b string,\n) {\n}\n")
        assert check_function(decl, DEFAULT) is None

    def test_invalid_parameters(self, parse_decl: ParseDecl) -> None:
        decl = parse_decl("func f(a int,\n    b string) {\n}\n")
        diagnostic = check_function(decl, DEFAULT)
        assert diagnostic is not None
        assert diagnostic.function == "f"
        assert diagnostic.message == 'the parameters of the function "f" should be on separate lines'
        assert diagnostic.lists == ("params",)
        assert len(diagnostic.suggested_fixes) == 1
        fix = diagnostic.suggested_fixes[0]
        assert fix.message == diagnostic.message
        assert [edit.new_text for edit in fix.edits] == ["\n\ta int,\n\tb string,\n"]

    def test_invalid_returns_only(self, parse_decl: ParseDecl) -> None:
        decl = parse_decl("func g() (a bool, b error,\n) {\n}\n")
        diagnostic = check_function(decl, DEFAULT)
        assert diagnostic is not None
        assert diagnostic.message == 'the returns of the function "g" should be on separate lines'
        assert diagnostic.lists == ("returns",)
        assert diagnostic.suggested_fixes[0].edits[0].new_text == "\n\ta bool,\n\tb error,\n"

    def test_both_invalid(self, parse_decl: ParseDecl) -> None:
        decl = parse_decl("func g(a int,\n\tb int) (c bool,\n\td error) {\n}\n")
        diagnostic = check_function(decl, DEFAULT)
        assert diagnostic is not None
        assert diagnostic.message == 'the parameters and returns of the function "g" should be on separate lines'
        assert diagnostic.lists == ("params", "returns")
        assert len(diagnostic.suggested_fixes) == 2
        params_edit = diagnostic.suggested_fixes[0].edits[0]
        returns_edit = diagnostic.suggested_fixes[1].edits[0]
        assert diagnostic.start == params_edit.start
        assert diagnostic.end == returns_edit.end
        assert params_edit.end.offset < returns_edit.start.offset

    def test_span_of_single_invalid_list(self, parse_decl: ParseDecl) -> None:
        decl = parse_decl("func g(\n\ta int,\n) (c bool,\n\td error) {\n}\n")
        diagnostic = check_function(decl, DEFAULT)
        assert diagnostic is not None
        assert diagnostic.lists == ("returns",)
        edit = diagnostic.suggested_fixes[0].edits[0]
        assert (diagnostic.start, diagnostic.end) == (edit.start, edit.end)

    def test_disabled_parameters_check(self, parse_decl: ParseDecl) -> None:
        decl = parse_decl("func f(a int,\n    b string) {\n}\n")
        assert check_function(decl, LintConfig(disable_check_func_params=True)) is None

    def test_disabled_returns_check_keeps_parameters(self, parse_decl: ParseDecl) -> None:
        decl = parse_decl("func g(a int,\n\tb int) (c bool,\n\td error) {\n}\n")
        diagnostic = check_function(decl, LintConfig(disable_check_func_returns=True))
        assert diagnostic is not None
        assert diagnostic.lists == ("params",)

    def test_comments_withhold_the_fix(self, parse_decl: ParseDecl) -> None:
        decl = parse_decl("func f(a int, // first\n\tb int) {\n}\n")
        diagnostic = check_function(decl, DEFAULT)
        assert diagnostic is not None
        assert diagnostic.suggested_fixes == ()

    def test_comments_only_withhold_their_own_list(self, parse_decl: ParseDecl) -> None:
        decl = parse_decl("func g(a int, // first\n\tb int) (c bool,\n\td error) {\n}\n")
        diagnostic = check_function(decl, DEFAULT)
        assert diagnostic is not None
        assert diagnostic.lists == ("params", "returns")
        assert [fix.edits[0].new_text for fix in diagnostic.suggested_fixes] == ["\n\tc bool,\n\td error,\n"]


def test_check_functions_keeps_declaration_order(parse_decl: ParseDecl) -> None:
    decls = [
        parse_decl("func a(x int,\n\ty int) {\n}\n"),
        parse_decl("func b(x int, y int) {}\n"),
        parse_decl("func c(x int,\n\ty int) {\n}\n"),
    ]
    assert [d.function for d in check_functions(decls, DEFAULT)] == ["a", "c"]

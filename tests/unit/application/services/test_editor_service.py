from codebox.application.services.editor_service import EditorService, is_newline_insert
from codebox.domain.catalog.themes import get_palette
from codebox.domain.entities.segment import ColorRole


def test_is_newline_insert():
    assert is_newline_insert("a", "a\n")
    assert is_newline_insert("a\nb", "a\n\nb")
    assert not is_newline_insert("a", "ab")
    assert not is_newline_insert("a\nb", "ab")


def test_enter_after_python_block_opener_indents():
    svc = EditorService()
    assert svc.on_text_change("if x > 0:", "if x > 0:\n", "Python") == "if x > 0:\n    "


def test_typing_mid_line_is_not_formatted():
    svc = EditorService()
    assert svc.on_text_change("if x > 0:\n", "if x > 0:\nx", "Python") == "if x > 0:\nx"


def test_default_language_applies_when_missing():
    svc = EditorService(default_language="JavaScript")
    assert svc.on_text_change("f() {", "f() {\n") == "f() {\n  "
    assert svc.reformat("{\nx\n}") == "{\n  x\n}"


def test_reformat_uses_language_width():
    svc = EditorService()
    assert svc.reformat("{\nfoo();\n}", "Java") == "{\n    foo();\n}"


def test_render_numbers_lines_and_colors_segments():
    svc = EditorService(default_theme="dark")
    rendered = svc.render("let a = 1;\n\n// done", "JavaScript")
    palette = get_palette("dark")

    assert rendered.palette is palette
    assert [line.number for line in rendered.lines] == [1, 2, 3]
    assert [line.text for line in rendered.lines] == ["let a = 1;", "", "// done"]
    assert rendered.lines[1].segments == []
    first = rendered.lines[0].segments[0]
    assert first.role is ColorRole.KEYWORD and first.color == palette.keywords
    assert rendered.lines[2].segments[0].color == palette.comments
    assert rendered.line_number_color == palette.line_numbers
    assert rendered.line_number_background == palette.line_numbers_bg


def test_render_unknown_theme_uses_light():
    rendered = EditorService().render("x", "Python", "no-such-theme")
    assert rendered.palette is get_palette("light")


def test_line_numbers():
    assert EditorService.line_numbers("") == ["1"]
    assert EditorService.line_numbers("a\nb\n") == ["1", "2", "3"]

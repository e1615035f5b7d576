import logging
import re

import pytest

from codebox.domain.catalog.languages import LexicalPatterns
from codebox.domain.catalog.themes import get_palette
from codebox.domain.entities.segment import ColorRole, Segment
from codebox.domain.services.lexical_segmenter import LexicalSegmenter, segment_line

PALETTE = get_palette("monokai")


def _pairs(segments):
    return [(s.text, s.role) for s in segments]


def test_comment_only_line_is_one_segment():
    segments = segment_line("// comment only", "JavaScript", PALETTE)
    assert _pairs(segments) == [("// comment only", ColorRole.COMMENT)]
    assert segments[0].color == PALETTE.comments


def test_keywords_and_numbers_keep_their_positions():
    segments = segment_line("let x = 5;", "JavaScript", PALETTE)
    assert _pairs(segments) == [
        ("let", ColorRole.KEYWORD),
        (" x = ", ColorRole.TEXT),
        ("5", ColorRole.NUMBER),
        (";", ColorRole.TEXT),
    ]
    assert [s.color for s in segments] == [PALETTE.keywords, PALETTE.text, PALETTE.numbers, PALETTE.text]


def test_empty_line_has_no_segments():
    assert segment_line("", "Python", PALETTE) == []


def test_code_before_a_line_comment_is_still_highlighted():
    assert _pairs(segment_line("return 1 // done", "Java", PALETTE)) == [
        ("return", ColorRole.KEYWORD),
        (" ", ColorRole.TEXT),
        ("1", ColorRole.NUMBER),
        (" ", ColorRole.TEXT),
        ("// done", ColorRole.COMMENT),
    ]


def test_comment_marker_inside_string_is_part_of_the_string():
    assert _pairs(segment_line('print("# not a comment")  # real', "Python", PALETTE)) == [
        ("print(", ColorRole.TEXT),
        ('"# not a comment"', ColorRole.STRING),
        (")  ", ColorRole.TEXT),
        ("# real", ColorRole.COMMENT),
    ]


def test_text_after_block_comment_is_segmented():
    assert _pairs(segment_line("int a = /* note */ 42;", "C", PALETTE)) == [
        ("int", ColorRole.KEYWORD),
        (" a = ", ColorRole.TEXT),
        ("/* note */", ColorRole.COMMENT),
        (" ", ColorRole.TEXT),
        ("42", ColorRole.NUMBER),
        (";", ColorRole.TEXT),
    ]


def test_only_first_comment_is_honoured():
    assert _pairs(segment_line("/* a */ x /* b */", "C++", PALETTE)) == [
        ("/* a */", ColorRole.COMMENT),
        (" x /* b */", ColorRole.TEXT),
    ]


def test_keywords_inside_strings_are_not_split():
    assert _pairs(segment_line('"return 42"', "JavaScript", PALETTE)) == [
        ('"return 42"', ColorRole.STRING),
    ]


def test_quotes_pair_with_the_same_character():
    assert _pairs(segment_line("s = \"it's\" + 'x'", "Python", PALETTE)) == [
        ("s = ", ColorRole.TEXT),
        ('"it\'s"', ColorRole.STRING),
        (" + ", ColorRole.TEXT),
        ("'x'", ColorRole.STRING),
    ]


def test_javascript_template_literals_are_strings():
    assert _pairs(segment_line("`hi ${name}`", "JavaScript", PALETTE)) == [("`hi ${name}`", ColorRole.STRING)]


def test_backticks_are_plain_outside_javascript():
    assert _pairs(segment_line("`x`", "Python", PALETTE)) == [("`x`", ColorRole.TEXT)]


def test_digits_inside_identifiers_are_not_numbers():
    assert _pairs(segment_line("x1 = 10", "JavaScript", PALETTE)) == [
        ("x1 = ", ColorRole.TEXT),
        ("10", ColorRole.NUMBER),
    ]


def test_keywords_need_word_boundaries():
    assert _pairs(segment_line("format", "Python", PALETTE)) == [("format", ColorRole.TEXT)]


def test_unknown_language_uses_default_patterns():
    assert _pairs(segment_line("function f() { return 1; }", "Go", PALETTE))[:2] == [
        ("function", ColorRole.KEYWORD),
        (" f() { ", ColorRole.TEXT),
    ]


def test_unterminated_string_stays_plain():
    assert _pairs(segment_line("'open", "Python", PALETTE)) == [("'open", ColorRole.TEXT)]


def test_palette_may_be_given_by_name():
    segments = segment_line("True", "Python", "darcula")
    assert segments == [Segment("True", ColorRole.KEYWORD, get_palette("darcula").keywords)]


def test_without_palette_colors_are_none():
    segments = LexicalSegmenter.for_language("Rust").segment("fn main")
    assert segments[0].role is ColorRole.KEYWORD
    assert segments[0].color is None


def test_empty_pattern_set_degrades_to_single_plain_segment():
    segmenter = LexicalSegmenter(LexicalPatterns())
    assert _pairs(segmenter.segment("let x = 1 // y")) == [("let x = 1 // y", ColorRole.TEXT)]


def test_invalid_patterns_are_dropped(caplog):
    with caplog.at_level(logging.WARNING):
        patterns = LexicalPatterns.from_strings(keywords="(", strings="", numbers=r"\d*", comments="#.*$")
    assert patterns.keywords is None
    assert patterns.strings is None
    assert patterns.numbers is None
    assert patterns.comments is not None
    assert "Dropped" in caplog.text
    segments = LexicalSegmenter(patterns).segment("x = 1  # c")
    assert _pairs(segments) == [("x = 1  ", ColorRole.TEXT), ("# c", ColorRole.COMMENT)]


LINES = [
    "",
    " ",
    "\t\tindented",
    "let x = 5;",
    "// comment only",
    "/* block */ code /* other */ 'str' 12",
    "print('a', \"b\", 'c')  # trailing",
    "if (a < b && c > d) { return <keyword>x</keyword>; }",
    "<number>5</number> and </keyword>",
    "'''docstring''' \"\"\"",
    "unterminated \"string and 'mixed",
    "x = 1_000 + 0x1F + 3.14e10",
    "emoji 🙂 \"ünïcödé\" // ☃",
    "#include <stdio.h>",
    "fn main() { let s = r\"raw\"; } // end",
    "`tmpl ${a + `nested`}`",
]


@pytest.mark.parametrize("language", ["Python", "JavaScript", "Java", "C", "C++", "Rust", "Dart", "Brainfuck", None])
@pytest.mark.parametrize("line", LINES)
def test_segments_concatenate_back_to_the_line(language, line):
    segments = segment_line(line, language, PALETTE)
    assert "".join(s.text for s in segments) == line
    assert all(s.text for s in segments)


def test_marker_like_text_is_not_treated_specially():
    segments = segment_line("<keyword>if</keyword>", "JavaScript", PALETTE)
    assert _pairs(segments) == [
        ("<keyword>", ColorRole.TEXT),
        ("if", ColorRole.KEYWORD),
        ("</keyword>", ColorRole.TEXT),
    ]


def test_plain_color_mapping_is_accepted():
    colors = get_palette("dark").as_dict()
    segments = segment_line("let x = 5;", "JavaScript", colors)
    assert [s.color for s in segments] == [colors["keywords"], colors["text"], colors["numbers"], colors["text"]]


def test_color_mapping_may_use_singular_role_names_and_omit_roles():
    segments = segment_line("return 'a'", "Java", {"keyword": "#111"})
    assert [(s.text, s.color) for s in segments] == [("return", "#111"), (" ", None), ("'a'", None)]


def test_color_mapping_keyed_by_role():
    segments = segment_line("# note", "Python", {ColorRole.COMMENT: "#888"})
    assert segments == [Segment("# note", ColorRole.COMMENT, "#888")]


class CountingPattern:
    def __init__(self, pattern):
        self._rx = re.compile(pattern)
        self.calls = 0

    def finditer(self, line, pos=0):
        self.calls += 1
        return self._rx.finditer(line, pos)


def test_a_pending_match_is_not_searched_again_on_every_step():
    numbers = CountingPattern(r"\b\d+\b")
    keywords = CountingPattern(r"\bif\b")
    segmenter = LexicalSegmenter(LexicalPatterns(keywords=keywords, numbers=numbers))
    line = "if a " * 200 + "42"

    segments = segmenter.segment(line)

    assert "".join(s.text for s in segments) == line
    assert segments[-1] == Segment("42", ColorRole.NUMBER)
    assert numbers.calls == 1
    assert keywords.calls == 201

import pytest

from folio_kit.parsers.display import (
    annotation_display_text,
    first_words,
    heading_at_offset,
    line_from_offset,
    split_message,
)
from folio_kit.parsers.models import Annotation, Heading


def _annotation(type_: str, message: str, line_text: str = "") -> Annotation:
    return Annotation(
        type=type_,
        message=message,
        start_offset=0,
        end_offset=10,
        color="#888888",
        line_text=line_text,
    )


class TestMessages:
    def test_split_message_with_pipe(self) -> None:
        assert split_message("short | long form") == ("short", "long form")

    def test_split_message_without_pipe(self) -> None:
        assert split_message(" whole ") == ("whole", "whole")

    def test_split_message_splits_on_first_pipe_only(self) -> None:
        assert split_message("a | b | c") == ("a", "b | c")

    def test_first_words_truncates_with_ellipsis(self) -> None:
        assert first_words("one two three four", 2) == "one two..."

    def test_first_words_short_message_unchanged(self) -> None:
        assert first_words("  one   two ", 5) == "one two"

    def test_display_text_uses_short_half(self) -> None:
        words = " ".join(f"w{i}" for i in range(12))
        annotation = _annotation("TODO", f"{words} | details")

        assert annotation_display_text(annotation) == " ".join(
            f"w{i}" for i in range(10)
        ) + "..."

    def test_missing_shows_whole_line(self) -> None:
        annotation = _annotation(
            "MISSING", "add summary", "Intro ==MISSING: add summary== here"
        )

        assert annotation_display_text(annotation) == "Intro here"

    def test_missing_alone_on_line_falls_back_to_message(self) -> None:
        annotation = _annotation(
            "missing", "add summary", "==missing: add summary=="
        )

        assert annotation_display_text(annotation) == "add summary"

    def test_missing_without_any_text(self) -> None:
        annotation = _annotation("MISSING", "", "==MISSING: ==")

        assert annotation_display_text(annotation) == "Missing"


class TestNavigation:
    @pytest.mark.parametrize(
        ("offset", "line"), [(0, 0), (1, 0), (2, 1), (4, 2), (100, 2), (-5, 0)]
    )
    def test_line_from_offset(self, offset: int, line: int) -> None:
        assert line_from_offset("a\nb\nc", offset) == line

    def test_heading_at_offset(self) -> None:
        headings = [
            Heading(level=1, text="A", start_offset=5),
            Heading(level=2, text="B", start_offset=10),
            Heading(level=2, text="C", start_offset=20),
        ]

        assert heading_at_offset(headings, 15).text == "B"  # type: ignore[union-attr]
        assert heading_at_offset(headings, 20).text == "C"  # type: ignore[union-attr]
        assert heading_at_offset(headings, 2).text == "A"  # type: ignore[union-attr]

    def test_heading_at_offset_without_headings(self) -> None:
        assert heading_at_offset([], 3) is None

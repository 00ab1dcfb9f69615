import pytest

from folio_kit.observability import names
from folio_kit.observability.base import InMemoryMetricsHook
from folio_kit.pagination.fixed import paginate_by_words
from folio_kit.pagination.models import Page
from folio_kit.pagination.overview import build_overview
from folio_kit.pagination.structure import attach_structure
from folio_kit.parsers.markdown_parser import parse_annotations, parse_headings
from folio_kit.parsers.models import Heading
from folio_kit.tokenizing.fragments import (
    AnnotationFragment,
    HeadingFragment,
    ImageFragment,
    TextFragment,
)
from folio_kit.tokenizing.tokenizer import sanitize_line, tokenize, tokenize_document

SAMPLE = "# Title\n\nBody.\n\n> [!note] Info\n## Sub\nWork ==TODO: fix==."


def _summary(fragments) -> list[tuple[str, int]]:
    return [(f.kind, f.start_offset) for f in fragments]


class TestTokenizeDocument:
    def test_end_to_end(self) -> None:
        fragments = list(tokenize_document(SAMPLE))

        assert _summary(fragments) == [
            ("heading", 0),
            ("text", 9),
            ("text", 16),
            ("heading", 31),
            ("text", 38),
            ("annotation", 43),
            ("text", 56),
        ]
        texts = [f.text for f in fragments if isinstance(f, TextFragment)]
        assert texts == ["Body.", "Info", "Work", "."]
        heading = fragments[3]
        assert isinstance(heading, HeadingFragment)
        assert heading.heading.marker is not None
        annotation = fragments[5]
        assert isinstance(annotation, AnnotationFragment)
        assert annotation.annotation.message == "fix"

    def test_images_split_text(self) -> None:
        text = 'Intro ![alt](img/a.png "Title") and ![[b.png|Bee]] end'
        fragments = list(tokenize_document(text))

        assert _summary(fragments) == [
            ("text", 0),
            ("image", 6),
            ("text", 32),
            ("image", 36),
            ("text", 51),
        ]
        first, second = (f for f in fragments if isinstance(f, ImageFragment))
        assert (first.alt, first.link) == ("alt", "img/a.png")
        assert (second.alt, second.link) == ("Bee", "b.png")

    def test_wiki_embed_without_alias_uses_target_as_alt(self) -> None:
        (image,) = tokenize_document("![[pics/c.png]]")

        assert isinstance(image, ImageFragment)
        assert (image.alt, image.link) == ("pics/c.png", "pics/c.png")

    def test_nested_annotations_keep_order(self) -> None:
        """A flag inside a comment is emitted without rewinding."""
        text = "%% see ==TODO: fix== now %% tail"
        fragments = list(tokenize_document(text))

        assert _summary(fragments) == [
            ("annotation", 0),
            ("annotation", 7),
            ("text", 28),
        ]
        assert [f.annotation.type for f in fragments[:2]] == ["COMMENT", "TODO"]

    def test_heading_consumes_following_blank_lines(self) -> None:
        fragments = list(tokenize_document("# A\n\n\n  text"))

        assert _summary(fragments) == [("heading", 0), ("text", 8)]
        assert fragments[1].text == "text"

    def test_blank_lines_produce_nothing(self) -> None:
        assert list(tokenize_document("\n\n  \n")) == []

    def test_offsets_never_decrease(self) -> None:
        text = (
            "# A\n> [!todo] Plan\n==NOW: go== %% c ==NOTE: n== %%\n"
            "![x](y.png)\n## B\ntext ==DONE: ok==\n"
        )
        offsets = [f.start_offset for f in tokenize_document(text)]

        assert offsets == sorted(offsets)

    def test_counts_fragments(self) -> None:
        hook = InMemoryMetricsHook()
        fragments = list(tokenize_document(SAMPLE, metrics_hook=hook))

        assert hook.counters[names.TOKENIZER_FRAGMENTS_EMITTED] == len(fragments)


class TestTokenizePage:
    def test_paginated_pages(self) -> None:
        text = "# One\nalpha beta\n# Two\ngamma"
        pages = attach_structure(
            paginate_by_words(text, words_per_page=4),
            parse_headings(text),
            parse_annotations(text),
        )

        assert [_summary(tokenize(page)) for page in pages] == [
            [("heading", 0), ("text", 6)],
            [("heading", 17), ("text", 23)],
        ]

    def test_annotation_split_across_pages(self) -> None:
        """The rest of a flag that began on the previous page is skipped."""
        text = "a ==TODO: fix this now== b"
        annotations = parse_annotations(text)
        pages = attach_structure(
            paginate_by_words(text, words_per_page=3), [], annotations
        )
        second = pages[1]

        assert second.content == "this now== b"
        assert [f.text for f in tokenize(second)] == ["this now== b"]
        fragments = list(tokenize(second, document_annotations=annotations))
        assert _summary(fragments) == [("text", 25)]
        assert fragments[0].text == "b"

    def test_items_outside_page_are_ignored(self) -> None:
        page = Page(
            content="inside",
            word_count=1,
            start_offset=10,
            end_offset=16,
            page_number=0,
            headings=(
                Heading(level=1, text="Before", start_offset=2),
                Heading(level=1, text="After", start_offset=16),
            ),
        )

        assert _summary(tokenize(page)) == [("text", 10)]

    def test_restartable(self) -> None:
        (page,) = build_overview(SAMPLE)

        assert list(tokenize(page)) == list(tokenize(page))


class TestSanitizeLine:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("## Heading", "Heading"),
            ("> quoted", "quoted"),
            ("> > nested", "nested"),
            ("> [!note]+ Title", "Title"),
            ("**bold** and *it* `code` [link](x)", "bold and it code link"),
            ("~~gone~~ _em_ snake_case_name", "gone em snake_case_name"),
            ("text ==TODO: x== more", "text more"),
            ("a %% hidden %% b", "a b"),
            ("see ![alt](a.png) here", "see here"),
            ("  lots   of\tspace  ", "lots of space"),
        ],
    )
    def test_strips_markup(self, line: str, expected: str) -> None:
        assert sanitize_line(line) == expected

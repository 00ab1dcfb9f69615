# src/folio_kit/tokenizing/fragments.py

from dataclasses import dataclass
from typing import Literal

from folio_kit.parsers.models import Annotation, Heading


@dataclass(frozen=True)
class HeadingFragment:
    heading: Heading
    kind: Literal["heading"] = "heading"

    @property
    def start_offset(self) -> int:
        return self.heading.start_offset


@dataclass(frozen=True)
class TextFragment:
    """One non-blank source line with inline markup stripped."""

    text: str
    start_offset: int
    kind: Literal["text"] = "text"


@dataclass(frozen=True)
class ImageFragment:
    alt: str
    link: str
    start_offset: int
    kind: Literal["image"] = "image"


@dataclass(frozen=True)
class AnnotationFragment:
    annotation: Annotation
    kind: Literal["annotation"] = "annotation"

    @property
    def start_offset(self) -> int:
        return self.annotation.start_offset


Fragment = HeadingFragment | TextFragment | ImageFragment | AnnotationFragment

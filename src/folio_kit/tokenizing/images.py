# src/folio_kit/tokenizing/images.py

import logging
import re
from typing import Protocol
from urllib.parse import quote

logger = logging.getLogger(__name__)

_URL_SCHEME = re.compile(r"^(app:|https?:|data:)", re.IGNORECASE)
_LINK_TITLE = re.compile(r"\s+(\".*\"|'.*'|\(.*\))$")

# characters encodeURI-style quoting leaves alone
_SAFE_PATH_CHARS = "/;,?:@&=+$-_.!~*'()"


def parse_markdown_image_link(target: str) -> str:
    """Link part of ``![alt](target)``: angle brackets and title removed."""
    trimmed = target.strip()
    if trimmed.startswith("<") and trimmed.endswith(">"):
        trimmed = trimmed[1:-1].strip()

    title = _LINK_TITLE.search(trimmed)
    if title:
        trimmed = trimmed[: title.start()].strip()
    return trimmed


class ImageResolver(Protocol):
    def resolve(self, link: str) -> str | None: ...


class PassthroughImageResolver:
    """Resolves image links without a vault or file index.

    URLs pass through unchanged; local paths lose their ``#fragment``, get
    forward slashes and are percent-encoded.
    """

    def resolve(self, link: str) -> str | None:
        trimmed = link.strip()
        if not trimmed:
            return None

        if _URL_SCHEME.match(trimmed):
            return trimmed

        path = trimmed.replace("\\", "/").split("#", 1)[0]
        if not path:
            logger.debug("Image link %r has no path part", link)
            return None
        return quote(path, safe=_SAFE_PATH_CHARS)

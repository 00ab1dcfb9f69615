# parsers/patterns.py

"""Compiled patterns for the recognized markup.

Compiled patterns are immutable; every scan goes through ``finditer`` /
``match`` so each call gets its own fresh cursor.
"""

import re

# "## Heading text" - 1 to 6 hashes, then whitespace, then non-empty text
HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+([^\r\n]*\S)", re.MULTILINE)

# "> [!TYPE]" with an optional fold indicator and title, matched per line
MARKER_PATTERN = re.compile(r"^[ \t]*>[ \t]*\[!([^\]\s]+)\]([+-]?)[ \t]*(.*?)[ \t]*$")

# "==TYPE: message==" - type starts with a letter, at most 25 characters
FLAG_PATTERN = re.compile(r"==([A-Za-z][A-Za-z0-9_-]{0,24}):((?:[^=\n]|=(?!=))+?)==")

# "%% comment %%" - may span lines
COMMENT_PATTERN = re.compile(r"%%((?:[^%]|%(?!%))+?)%%")

# "![alt](link)" or "![[target|alt]]"
IMAGE_PATTERN = re.compile(
    r"!\[([^\]]*)\]\(([^)]+)\)|!\[\[([^|\]]+)(?:\|([^\]]*))?\]\]"
)

# A word is a maximal run of non-whitespace
WORD_PATTERN = re.compile(r"\S+")

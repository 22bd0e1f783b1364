# ABOUTME: Multilingual composition of bulletin editions into one content body.
# ABOUTME: Joins tagged editions with a separator line and splits them back apart.

import re

from pydantic import BaseModel

from gig_guide.languages import SOURCE_LANGUAGE, code_for_display_name, display_name

EDITION_SEPARATOR = "\n\n" + "=" * 40 + "\n\n"
EDITION_TAG_RE = re.compile(r"^\[(?P<label>[^\]\n]+)\]\n\n")


class Edition(BaseModel):
    """The bulletin in one language."""

    language: str
    text: str


def edition_tag(language: str) -> str:
    return f"[{display_name(language).upper()}]"


def compose_editions(editions: list[Edition]) -> str:
    """Join editions into one body. A lone English edition is returned untagged."""
    if len(editions) == 1 and editions[0].language == SOURCE_LANGUAGE:
        return editions[0].text
    return EDITION_SEPARATOR.join(
        f"{edition_tag(edition.language)}\n\n{edition.text}" for edition in editions
    )


def split_editions(content: str) -> list[Edition]:
    """Split a composed body back into editions.

    Untagged parts are treated as English.
    """
    editions: list[Edition] = []
    for part in content.split(EDITION_SEPARATOR):
        match = EDITION_TAG_RE.match(part)
        code = code_for_display_name(match.group("label")) if match else None
        if code is None:
            editions.append(Edition(language=SOURCE_LANGUAGE, text=part))
        else:
            editions.append(Edition(language=code, text=part[match.end() :]))
    return editions

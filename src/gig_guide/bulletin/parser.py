# ABOUTME: Parser for rendered bulletin text, the inverse of the text serialiser.
# ABOUTME: Slices a bulletin into sections and re-reads event blocks field by field.

import re

import structlog

from gig_guide.bulletin.models import EventBlock, Sections
from gig_guide.bulletin.text import (
    ADDRESS_MARKER,
    BLOCK_MARKER,
    BULLET,
    FOOTER_MARKER,
    GENRE_MARKER,
    MAP_MARKER,
    PRICE_MARKER,
    TIME_MARKER,
    VENUE_MARKER,
)

log = structlog.get_logger()

HEADER_RE = re.compile(r"^=== (?P<title>.+) - (?P<date>.+?) ===$", re.MULTILINE)
HEADING_RE = re.compile(r"^=== .+ ===$")
SECTION_RE = re.compile(r"^--- .+ ---$")
FOOTER_SENTENCE_RE = re.compile(r"sent to (?P<name>.*) at (?P<email>\S+)\.\s*$", re.MULTILINE)

TITLE_RE = re.compile(rf"^{BLOCK_MARKER} (?P<ordinal>\d+)\. (?P<name>.*)$")
VENUE_RE = re.compile(rf"^{VENUE_MARKER} (?P<venue>.*) \|(?: (?P<distance>.*))?$")
TIME_RE = re.compile(rf"^{TIME_MARKER} (?P<time>.*?) \| {PRICE_MARKER} (?P<price>.*)$")
QR_RE = re.compile(r"^(?P<label>[^:]+): (?P<url>\S+)$")

BLOCK_START = f"{BLOCK_MARKER} "
MAP_MARKERS = (MAP_MARKER, MAP_MARKER.rstrip("\ufe0f"))


def extract_sections(text: str) -> Sections:
    """Slice a rendered bulletin into its sections.

    Works on localized bulletins too: sections are found by their markers,
    not by their wording. Returns an empty Sections when there is no header.
    """
    match = HEADER_RE.search(text)
    if match is None:
        log.debug("bulletin_header_missing")
        return Sections()

    description_lines: list[str] = []
    blocks: list[list[str]] = []
    how_to_use_lines: list[str] = []
    footer_lines: list[str] = []
    gigs_header = ""
    how_to_use_header = ""
    state = "description"

    for line in text[match.end() :].split("\n"):
        if state == "description":
            if SECTION_RE.match(line):
                gigs_header = line
                state = "events"
            elif HEADING_RE.match(line):
                how_to_use_header = line
                state = "how_to_use"
            else:
                description_lines.append(line)
        elif state == "events":
            if line.startswith(BLOCK_START):
                blocks.append([line])
            elif HEADING_RE.match(line):
                how_to_use_header = line
                state = "how_to_use"
            elif line == FOOTER_MARKER:
                state = "footer"
            elif blocks:
                blocks[-1].append(line)
        elif state == "how_to_use":
            if line == FOOTER_MARKER:
                state = "footer"
            elif line.strip():
                how_to_use_lines.append(line.strip().removeprefix(BULLET).strip())
        else:
            footer_lines.append(line)

    footer_raw = "\n".join(footer_lines).strip()
    footer = FOOTER_SENTENCE_RE.search(footer_raw)

    return Sections(
        title=match.group("title"),
        date_label=match.group("date"),
        description="\n".join(description_lines).strip(),
        gigs_header=gigs_header,
        event_blocks_raw=["\n".join(block).rstrip() for block in blocks],
        how_to_use_header=how_to_use_header,
        how_to_use_lines=how_to_use_lines,
        footer_raw=footer_raw,
        subscriber_name=footer.group("name") if footer else "",
        subscriber_email=footer.group("email") if footer else "",
    )


def _after(line: str, marker: str) -> str:
    return line[len(marker) :].strip()


def parse_event_block(raw: str) -> EventBlock | None:
    """Read one raw event block back into its fields.

    Returns None when the block has no numbered title line.
    """
    lines = [line.strip() for line in raw.strip().split("\n")]
    title = TITLE_RE.match(lines[0]) if lines else None
    if title is None:
        log.debug("event_block_unparseable", block=raw[:60])
        return None

    fields: dict[str, str | None] = {}
    for line in lines[1:]:
        if not line or set(line) == {"-"}:
            continue
        if line.startswith(VENUE_MARKER):
            venue = VENUE_RE.match(line)
            if venue:
                fields["venue_name"] = venue.group("venue")
                fields["distance_label"] = (venue.group("distance") or "").strip()
            else:
                fields["venue_name"] = _after(line, VENUE_MARKER)
        elif line.startswith(ADDRESS_MARKER):
            fields["address"] = _after(line, ADDRESS_MARKER)
        elif line.startswith(TIME_MARKER):
            time = TIME_RE.match(line)
            if time:
                fields["time_label"] = time.group("time")
                fields["price_label"] = time.group("price")
            else:
                fields["time_label"] = _after(line, TIME_MARKER)
        elif line.startswith(GENRE_MARKER):
            fields["genre_label"] = _after(line, GENRE_MARKER) or None
        elif line.startswith(MAP_MARKERS):
            marker = next(m for m in MAP_MARKERS if line.startswith(m))
            fields["map_url"] = _after(line, marker)
        else:
            qr = QR_RE.match(line)
            if qr:
                fields["qr_ref"] = qr.group("url")

    return EventBlock(
        ordinal=int(title.group("ordinal")),
        name=title.group("name").strip(),
        **fields,
    )

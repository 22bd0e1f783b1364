# ABOUTME: Plain-text wire grammar of the gig guide bulletin.
# ABOUTME: Markers, fixed English strings, and serialisation of structured bulletins to text.

from collections.abc import Sequence

from gig_guide.bulletin.models import Bulletin, EventBlock

GUIDE_TITLE = "MELBOURNE GIG GUIDE"
GIGS_HEADER = "GIGS NEAR YOU"
HOW_TO_USE_HEADER = "HOW TO USE"
HOW_TO_USE_LINES = (
    "View on mobile to scan QR codes directly from screen",
    "QR codes link to venue locations on Google Maps",
    "Share this guide with friends!",
)
FOOTER_LEAD = "This information was sent to"
FOOTER_TAGLINE = "Melbourne Gig Guide - Supporting local music and venues."

PRICE_FREE = "Free"
PRICE_UNKNOWN = "Check venue"
TIME_UNKNOWN = "TBA"
DISTANCE_SUFFIX = "km away"

QR_LABEL = "QR"
BLOCK_MARKER = "▶"
VENUE_MARKER = "🏢"
ADDRESS_MARKER = "📍"
TIME_MARKER = "🕒"
PRICE_MARKER = "💲"
GENRE_MARKER = "🎵"
MAP_MARKER = "🗺️"
BULLET = "•"
FIELD_INDENT = "   "
BLOCK_SEPARATOR = FIELD_INDENT + "-" * 22
FOOTER_MARKER = "---"


def header_line(title: str, date_label: str) -> str:
    return f"=== {title} - {date_label} ==="


def heading_line(title: str) -> str:
    return f"=== {title} ==="


def section_line(title: str) -> str:
    return f"--- {title} ---"


def footer_sentence(name: str, email: str) -> str:
    return f"{FOOTER_LEAD} {name} at {email}."


def distance_label(distance_km: float | None) -> str:
    """Format a distance as '2.3 km away', or '' when unknown."""
    if distance_km is None:
        return ""
    return f"{distance_km:.1f} {DISTANCE_SUFFIX}"


def format_event_block(block: EventBlock, qr_label: str = QR_LABEL) -> str:
    """Serialise one event block, ending with its separator line."""
    lines = [
        f"{BLOCK_MARKER} {block.ordinal}. {block.name}",
        f"{FIELD_INDENT}{VENUE_MARKER} {block.venue_name} | {block.distance_label}",
        f"{FIELD_INDENT}{ADDRESS_MARKER} {block.address}",
        f"{FIELD_INDENT}{TIME_MARKER} {block.time_label} | {PRICE_MARKER} {block.price_label}",
    ]
    if block.genre_label:
        lines.append(f"{FIELD_INDENT}{GENRE_MARKER} {block.genre_label}")
    lines.append(f"{FIELD_INDENT}{MAP_MARKER} {block.map_url}")
    lines.append(f"{FIELD_INDENT}{qr_label}: {block.qr_ref}")
    lines.append(BLOCK_SEPARATOR)
    return "\n".join(lines)


def assemble(
    header: str,
    description: str,
    gigs_header: str,
    blocks: Sequence[str],
    how_to_use_header: str,
    how_to_use_lines: Sequence[str],
    footer_lines: Sequence[str],
) -> str:
    """Join already-rendered parts using the bulletin section layout."""
    text = f"{header}\n\n{description}\n\n{gigs_header}\n\n"
    text += "".join(f"{block}\n" for block in blocks)
    text += f"\n{how_to_use_header}\n"
    text += "".join(f"{BULLET} {line}\n" for line in how_to_use_lines)
    text += f"\n{FOOTER_MARKER}\n"
    text += "".join(f"{line}\n" for line in footer_lines)
    return text


def format_bulletin(bulletin: Bulletin) -> str:
    """Serialise a structured bulletin to the canonical English text."""
    return assemble(
        header=header_line(GUIDE_TITLE, bulletin.date_label),
        description=bulletin.description,
        gigs_header=section_line(GIGS_HEADER),
        blocks=[format_event_block(block) for block in bulletin.events],
        how_to_use_header=heading_line(HOW_TO_USE_HEADER),
        how_to_use_lines=HOW_TO_USE_LINES,
        footer_lines=[
            footer_sentence(bulletin.subscriber_name, bulletin.subscriber_email),
            FOOTER_TAGLINE,
        ],
    )

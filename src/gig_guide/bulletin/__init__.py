# ABOUTME: Bulletin rendering, text serialisation, and parsing.
# ABOUTME: Exports the structured bulletin models and the renderer and parser entry points.

from gig_guide.bulletin.models import Bulletin, EventBlock, Sections
from gig_guide.bulletin.parser import extract_sections, parse_event_block
from gig_guide.bulletin.renderer import BulletinRenderer
from gig_guide.bulletin.text import format_bulletin

__all__ = [
    "Bulletin",
    "BulletinRenderer",
    "EventBlock",
    "Sections",
    "extract_sections",
    "format_bulletin",
    "parse_event_block",
]

# ABOUTME: Pydantic models for the structured bulletin and its parsed sections.
# ABOUTME: Defines Bulletin, EventBlock, and Sections.

from pydantic import BaseModel, Field


class EventBlock(BaseModel):
    """One numbered gig entry of a bulletin."""

    ordinal: int
    name: str
    venue_name: str = ""
    distance_label: str = ""
    address: str = ""
    time_label: str = ""
    price_label: str = ""
    genre_label: str | None = None
    map_url: str = ""
    qr_ref: str = ""


class Bulletin(BaseModel):
    """Structured English bulletin for one subscriber."""

    date_label: str
    description: str
    events: list[EventBlock] = Field(default_factory=list)
    subscriber_name: str
    subscriber_email: str


class Sections(BaseModel):
    """Sections sliced out of a rendered bulletin text.

    All fields are empty when the text has no bulletin header.
    """

    title: str = ""
    date_label: str = ""
    description: str = ""
    gigs_header: str = ""
    event_blocks_raw: list[str] = Field(default_factory=list)
    how_to_use_header: str = ""
    how_to_use_lines: list[str] = Field(default_factory=list)
    footer_raw: str = ""
    subscriber_name: str = ""
    subscriber_email: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.date_label

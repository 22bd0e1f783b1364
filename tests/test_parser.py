# ABOUTME: Tests for bulletin text parsing.
# ABOUTME: Validates section extraction, event block parsing, and render/parse round trips.

from gig_guide.bulletin.parser import extract_sections, parse_event_block
from gig_guide.bulletin.renderer import DESCRIPTIONS, BulletinRenderer
from gig_guide.bulletin.text import HOW_TO_USE_LINES
from gig_guide.models import EventRecord, ScoredEvent, Subscriber


class TestExtractSections:
    """Tests for extract_sections."""

    def test_round_trip(
        self,
        fixed_renderer: BulletinRenderer,
        near_event: EventRecord,
        unpriced_event: ScoredEvent,
        sample_subscriber: Subscriber,
    ) -> None:
        """Parsing a rendered bulletin recovers the structured bulletin."""
        events = [ScoredEvent.from_event(near_event, 2.3172), unpriced_event]
        bulletin = fixed_renderer.render(events, sample_subscriber)
        text = fixed_renderer.render_text(events, sample_subscriber)

        sections = extract_sections(text)

        assert sections.title == "MELBOURNE GIG GUIDE"
        assert sections.date_label == bulletin.date_label
        assert sections.description == DESCRIPTIONS[0]
        assert sections.gigs_header == "--- GIGS NEAR YOU ---"
        assert sections.how_to_use_header == "=== HOW TO USE ==="
        assert sections.how_to_use_lines == list(HOW_TO_USE_LINES)
        assert sections.subscriber_name == "Alex Example"
        assert sections.subscriber_email == "alex@example.com"
        assert len(sections.event_blocks_raw) == 2

        parsed = [parse_event_block(raw) for raw in sections.event_blocks_raw]
        assert parsed == bulletin.events

    def test_missing_header_gives_empty_sections(self) -> None:
        """Text without a bulletin header yields empty sections."""
        sections = extract_sections("Hello there\n\nnot a bulletin")
        assert sections.is_empty
        assert sections.event_blocks_raw == []

    def test_email_with_dots_is_kept_whole(self) -> None:
        """The email is the last token before the final period."""
        text = (
            "=== MELBOURNE GIG GUIDE - Monday, October 19, 2026 ===\n\n"
            "Description.\n\n--- GIGS NEAR YOU ---\n\n"
            "\n=== HOW TO USE ===\n• Share this guide with friends!\n\n---\n"
            "This information was sent to Mary Jane Smith at mary.jane@mail.example.co.uk.\n"
            "Melbourne Gig Guide - Supporting local music and venues.\n"
        )
        sections = extract_sections(text)

        assert sections.subscriber_name == "Mary Jane Smith"
        assert sections.subscriber_email == "mary.jane@mail.example.co.uk"
        assert sections.event_blocks_raw == []

    def test_multiline_description(self) -> None:
        """Description keeps every line between header and gigs section."""
        text = (
            "=== TITLE - Friday, May 1, 2026 ===\n\nLine one.\nLine two.\n\n"
            "--- GIGS ---\n\n\n=== HOW ===\n• a\n\n---\nfooter\n"
        )
        sections = extract_sections(text)
        assert sections.description == "Line one.\nLine two."
        assert sections.how_to_use_lines == ["a"]
        assert sections.footer_raw == "footer"
        assert sections.subscriber_email == ""


class TestParseEventBlock:
    """Tests for parse_event_block."""

    def test_block_without_genre(self) -> None:
        raw = (
            "▶ 3. Quiet Night\n"
            "   🏢 Venue | 1.0 km away\n"
            "   📍 1 Street\n"
            "   🕒 TBA | 💲 Free\n"
            "   🗺️ https://maps.google.com\n"
            "   QR: https://qr.example.com/create?size=100x100&data=x\n"
            "   ----------------------"
        )
        block = parse_event_block(raw)

        assert block is not None
        assert block.ordinal == 3
        assert block.name == "Quiet Night"
        assert block.genre_label is None
        assert block.price_label == "Free"
        assert block.qr_ref == "https://qr.example.com/create?size=100x100&data=x"

    def test_localized_qr_label(self) -> None:
        """The QR line is read whatever its label."""
        raw = "▶ 1. Show\n   🏢 Venue | \n   رمز الاستجابة السريعة: https://qr.example.com/x"
        block = parse_event_block(raw)

        assert block is not None
        assert block.distance_label == ""
        assert block.qr_ref == "https://qr.example.com/x"

    def test_no_title_line(self) -> None:
        """Blocks without a numbered title are unparseable."""
        assert parse_event_block("   🏢 Venue | 1.0 km away") is None

    def test_venue_name_containing_pipe(self) -> None:
        """Only the last pipe separates the venue from its distance."""
        block = parse_event_block("▶ 1. Show\n   🏢 Bar | Grill | 2.3 km away\n   📍 1 Street")

        assert block is not None
        assert block.venue_name == "Bar | Grill"
        assert block.distance_label == "2.3 km away"

    def test_venue_name_containing_pipe_without_distance(self) -> None:
        block = parse_event_block("▶ 1. Show\n   🏢 Bar | Grill | \n   📍 1 Street")

        assert block is not None
        assert block.venue_name == "Bar | Grill"
        assert block.distance_label == ""


class TestUntidyEventText:
    """Event text from the API is kept on one line so blocks still parse."""

    def test_newlines_in_event_fields(
        self,
        fixed_renderer: BulletinRenderer,
        near_event: EventRecord,
        sample_subscriber: Subscriber,
    ) -> None:
        data = near_event.model_dump()
        data["name"] = "Late show\n▶ 2. Encore"
        data["venue"]["name"] = "Baxter's\nLot"
        data["venue"]["address"] = "  1 Street\n\tFitzroy "
        event = ScoredEvent.from_event(EventRecord.model_validate(data), 2.3)

        sections = extract_sections(fixed_renderer.render_text([event], sample_subscriber))

        assert len(sections.event_blocks_raw) == 1
        block = parse_event_block(sections.event_blocks_raw[0])
        assert block is not None
        assert block.name == "Late show ▶ 2. Encore"
        assert block.venue_name == "Baxter's Lot"
        assert block.address == "1 Street Fitzroy"
        assert block.distance_label == "2.3 km away"

    def test_venue_name_with_pipe_round_trips(
        self,
        fixed_renderer: BulletinRenderer,
        near_event: EventRecord,
        sample_subscriber: Subscriber,
    ) -> None:
        data = near_event.model_dump()
        data["venue"]["name"] = "Bar | Grill"
        event = ScoredEvent.from_event(EventRecord.model_validate(data), 2.3)

        bulletin = fixed_renderer.render([event], sample_subscriber)
        text = fixed_renderer.render_text([event], sample_subscriber)
        raw = extract_sections(text).event_blocks_raw

        assert [parse_event_block(block) for block in raw] == bulletin.events

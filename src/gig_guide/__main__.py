# ABOUTME: CLI entry point for the Melbourne gig guide.
# ABOUTME: Provides subcommands: preview, generate, generate-all, logs, translate, serve.

import argparse
import asyncio
import logging
import sys
from datetime import date
from pathlib import Path

import structlog

from gig_guide.config import get_settings
from gig_guide.languages import SUPPORTED_LANGUAGES


def configure_logging() -> None:
    """Configure structlog for console or JSON output."""
    settings = get_settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
        )
    else:
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
                structlog.processors.add_log_level,
                structlog.dev.ConsoleRenderer(colors=True),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
        )


def _parse_date(value: str | None) -> date:
    return date.fromisoformat(value) if value else date.today()


def _parse_languages(value: str) -> list[str]:
    return [code.strip() for code in value.split(",") if code.strip()]


def cmd_preview(args: argparse.Namespace) -> int:
    """Generate a guide for an ad-hoc subscriber without touching the database.

    Prints the text. --html writes the HTML body to a file, --save archives
    text and HTML previews to previews_dir.
    """
    from gig_guide.email.sender import EmailSender
    from gig_guide.models import Subscriber, Weekday
    from gig_guide.services.content_service import ContentGenerator
    from gig_guide.services.content_store import InMemoryContentLogStore

    log = structlog.get_logger()
    log.info("cmd_preview_start")

    generated_date = _parse_date(args.date)

    async def run() -> int:
        subscriber = Subscriber(
            id="preview",
            name=args.name,
            email=args.email,
            latitude=args.lat,
            longitude=args.lon,
            languages=_parse_languages(args.languages),
            send_days=[Weekday.for_date(generated_date)],
        )
        async with ContentGenerator(store=InMemoryContentLogStore()) as generator:
            entry = await generator.generate_for_subscriber(subscriber, generated_date)

        print(entry.content)

        sender = EmailSender()
        if args.html:
            html_path = Path(args.html)
            html_path.write_text(
                sender.html_renderer.render(entry.content, sender.subject_for(entry)),
                encoding="utf-8",
            )
            log.info("preview_html_written", path=str(html_path))
        if args.save:
            sender.save_preview(entry)

        log.info("cmd_preview_complete", source_kind=entry.source_kind.value)
        return 0

    try:
        return asyncio.run(run())
    except Exception:
        log.exception("cmd_preview_failed")
        return 1


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate, store and optionally send the guide for one subscriber."""
    from gig_guide.db.repository import ContentLogRepository, SubscriberRepository
    from gig_guide.db.session import close_db, get_session, init_db
    from gig_guide.email.sender import EmailSender
    from gig_guide.services.content_service import ContentGenerator
    from gig_guide.services.subscriber_service import SubscriberService

    log = structlog.get_logger()
    log.info("cmd_generate_start", subscriber_id=args.subscriber_id)

    generated_date = _parse_date(args.date)

    async def run() -> int:
        await init_db()
        try:
            async with get_session() as session:
                service = SubscriberService(SubscriberRepository(session))
                subscriber = await service.get_subscriber(args.subscriber_id)
                if subscriber is None:
                    log.error("subscriber_not_found", subscriber_id=args.subscriber_id)
                    return 1

                store = ContentLogRepository(session)
                async with ContentGenerator(store=store) as generator:
                    entry = await generator.generate_for_subscriber(subscriber, generated_date)
        finally:
            await close_db()

        sender = EmailSender()
        if args.send:
            sender.send_content(entry, subscriber)
        else:
            sender.save_preview(entry)

        log.info("cmd_generate_complete", content_id=entry.id, source_kind=entry.source_kind.value)
        return 0

    try:
        return asyncio.run(run())
    except Exception:
        log.exception("cmd_generate_failed")
        return 1


def cmd_generate_all(args: argparse.Namespace) -> int:
    """Generate guides for every active subscriber scheduled on the date."""
    from gig_guide.db.repository import ContentLogRepository, SubscriberRepository
    from gig_guide.db.session import close_db, get_session, init_db
    from gig_guide.email.sender import EmailSender
    from gig_guide.services.content_service import ContentGenerator
    from gig_guide.services.subscriber_service import SubscriberService

    log = structlog.get_logger()
    log.info("cmd_generate_all_start")

    generated_date = _parse_date(args.date)

    async def run() -> int:
        await init_db()
        try:
            async with get_session() as session:
                service = SubscriberService(SubscriberRepository(session))
                subscribers = await service.list_active()
                store = ContentLogRepository(session)
                async with ContentGenerator(store=store) as generator:
                    result = await generator.generate_scheduled(subscribers, generated_date)

                if args.send:
                    by_id = {subscriber.id: subscriber for subscriber in subscribers}
                    sender = EmailSender()
                    for detail in result.details:
                        if not detail.success or detail.content_id is None:
                            continue
                        entry = await store.get_by_id(detail.content_id)
                        if entry is not None:
                            sender.send_content(entry, by_id[detail.subscriber_id])
        finally:
            await close_db()

        print(result.message)
        log.info("cmd_generate_all_complete", success=result.success, failed=result.failed)
        return 0 if result.failed == 0 else 1

    try:
        return asyncio.run(run())
    except Exception:
        log.exception("cmd_generate_all_failed")
        return 1


def cmd_logs(args: argparse.Namespace) -> int:
    """Print recent content log entries."""
    from gig_guide.db.repository import ContentLogRepository
    from gig_guide.db.session import close_db, get_session

    log = structlog.get_logger()

    async def run() -> int:
        try:
            async with get_session() as session:
                entries = await ContentLogRepository(session).list_recent(
                    limit=args.limit, subscriber_id=args.subscriber_id
                )
        finally:
            await close_db()

        print(f"\n=== Content Logs ({len(entries)}) ===\n")
        for entry in entries:
            print(
                f"{entry.generated_date}  {entry.subscriber_id}  "
                f"{entry.source_kind.value:<8} events={len(entry.event_ids)}"
            )
            print(f"  {entry.content_preview.splitlines()[0] if entry.content else ''}")
        print()
        return 0

    try:
        return asyncio.run(run())
    except Exception:
        log.exception("cmd_logs_failed")
        return 1


def cmd_translate(args: argparse.Namespace) -> int:
    """Translate a bulletin read from a file, or stdin when FILE is -."""
    from gig_guide.templating.engine import PhraseTemplatingEngine

    log = structlog.get_logger()

    try:
        if args.file == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.file).read_text(encoding="utf-8")
        engine = PhraseTemplatingEngine(source_language=get_settings().source_language)
        print(engine.translate(text, args.lang))
        return 0
    except Exception:
        log.exception("cmd_translate_failed")
        return 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the admin API with uvicorn."""
    import uvicorn

    uvicorn.run("gig_guide.web.app:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="gig_guide",
        description="Melbourne Gig Guide - nearby gigs in your languages",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # preview command
    preview_parser = subparsers.add_parser(
        "preview",
        help="Generate a guide for a location without using the database",
    )
    preview_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    preview_parser.add_argument("--lon", type=float, required=True, help="Longitude")
    preview_parser.add_argument("--name", default="Preview", help="Recipient name")
    preview_parser.add_argument(
        "--email", default="preview@example.com", help="Recipient email"
    )
    preview_parser.add_argument(
        "--languages",
        default="en",
        help=f"Comma-separated language codes ({', '.join(SUPPORTED_LANGUAGES)})",
    )
    preview_parser.add_argument(
        "--date",
        type=str,
        help="Date to query gigs for (YYYY-MM-DD). Defaults to today.",
    )
    preview_parser.add_argument("--html", metavar="PATH", help="Write the HTML body to PATH")
    preview_parser.add_argument(
        "--save",
        action="store_true",
        help="Archive text and HTML previews to previews_dir",
    )

    # generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the guide for one subscriber",
    )
    generate_parser.add_argument("--subscriber-id", required=True, help="Subscriber ID")
    generate_parser.add_argument(
        "--date",
        type=str,
        help="Date to query gigs for (YYYY-MM-DD). Defaults to today.",
    )
    generate_parser.add_argument(
        "--send",
        action="store_true",
        help="Send by email instead of saving a preview",
    )

    # generate-all command
    generate_all_parser = subparsers.add_parser(
        "generate-all",
        help="Generate guides for all subscribers scheduled today",
    )
    generate_all_parser.add_argument(
        "--date",
        type=str,
        help="Date to generate for (YYYY-MM-DD). Defaults to today.",
    )
    generate_all_parser.add_argument(
        "--send",
        action="store_true",
        help="Send successful guides by email",
    )

    # logs command
    logs_parser = subparsers.add_parser(
        "logs",
        help="Show recent content logs",
    )
    logs_parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Number of entries to show (default: 20)",
    )
    logs_parser.add_argument("--subscriber-id", help="Only show this subscriber's entries")

    # translate command
    translate_parser = subparsers.add_parser(
        "translate",
        help="Translate a bulletin from a file or stdin",
    )
    translate_parser.add_argument("file", help="Bulletin text file, or - for stdin")
    translate_parser.add_argument(
        "--lang",
        required=True,
        choices=sorted(SUPPORTED_LANGUAGES),
        help="Target language code",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the admin API",
    )
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind host")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    return parser


def main() -> int:
    """Main entry point."""
    configure_logging()

    parser = create_parser()
    args = parser.parse_args()

    commands = {
        "preview": cmd_preview,
        "generate": cmd_generate,
        "generate-all": cmd_generate_all,
        "logs": cmd_logs,
        "translate": cmd_translate,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())

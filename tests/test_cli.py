# ABOUTME: Tests for CLI argument parsing and command dispatch.
# ABOUTME: Validates argparse configuration, subcommand routing, and the offline commands.

import argparse
import io
from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest

from gig_guide.__main__ import cmd_preview, cmd_translate, create_parser, main
from gig_guide.config import Settings
from gig_guide.events.client import EventFetch
from gig_guide.events.mock import mock_events


class TestCreateParser:
    """Tests for argument parser creation."""

    def test_parser_creation(self) -> None:
        """Parser is created successfully."""
        assert isinstance(create_parser(), argparse.ArgumentParser)

    def test_preview_command(self) -> None:
        args = create_parser().parse_args(["preview", "--lat", "-37.81", "--lon", "144.96"])
        assert args.command == "preview"
        assert args.lat == -37.81
        assert args.languages == "en"
        assert args.html is None
        assert args.save is False

    def test_preview_requires_location(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["preview"])

    def test_generate_command(self) -> None:
        args = create_parser().parse_args(
            ["generate", "--subscriber-id", "sub-1", "--date", "2026-10-19", "--send"]
        )
        assert args.subscriber_id == "sub-1"
        assert args.date == "2026-10-19"
        assert args.send is True

    def test_generate_all_command(self) -> None:
        args = create_parser().parse_args(["generate-all"])
        assert args.command == "generate-all"
        assert args.date is None
        assert args.send is False

    def test_logs_defaults(self) -> None:
        args = create_parser().parse_args(["logs"])
        assert args.limit == 20
        assert args.subscriber_id is None

    def test_translate_command(self) -> None:
        args = create_parser().parse_args(["translate", "guide.txt", "--lang", "ja"])
        assert args.file == "guide.txt"
        assert args.lang == "ja"

    def test_translate_rejects_unknown_language(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["translate", "guide.txt", "--lang", "fr"])

    def test_serve_defaults(self) -> None:
        args = create_parser().parse_args(["serve"])
        assert args.host == "127.0.0.1"
        assert args.port == 8000


class TestMain:
    """Tests for main dispatch."""

    def test_no_command_prints_help(self) -> None:
        with (
            patch("sys.argv", ["gig_guide"]),
            patch("gig_guide.__main__.configure_logging"),
        ):
            assert main() == 1

    def test_dispatches_to_handler(self) -> None:
        with (
            patch("sys.argv", ["gig_guide", "logs"]),
            patch("gig_guide.__main__.configure_logging"),
            patch("gig_guide.__main__.cmd_logs", return_value=0) as handler,
        ):
            assert main() == 0
        handler.assert_called_once()


class TestOfflineCommands:
    """Tests for commands that need no database."""

    def test_translate_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "guide.txt"
        source.write_text("not a bulletin", encoding="utf-8")
        args = argparse.Namespace(file=str(source), lang="ko")

        assert cmd_translate(args) == 0
        assert "[ko]\n\nnot a bulletin" in capsys.readouterr().out

    def test_translate_stdin(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = argparse.Namespace(file="-", lang="es")
        with patch("sys.stdin", io.StringIO("hola")):
            assert cmd_translate(args) == 0
        assert "[es]\n\nhola" in capsys.readouterr().out

    def test_translate_missing_file(self, tmp_path: Path) -> None:
        args = argparse.Namespace(file=str(tmp_path / "missing.txt"), lang="ja")
        assert cmd_translate(args) == 1

    def test_preview_writes_html(
        self,
        tmp_path: Path,
        mock_settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Preview generates offline and writes the HTML body."""
        html_path = tmp_path / "guide.html"
        args = argparse.Namespace(
            lat=-37.8136,
            lon=144.9631,
            name="Alex",
            email="alex@example.com",
            languages="en,ja",
            date="2026-10-19",
            html=str(html_path),
            save=True,
        )

        async def fake_fetch(self, on_date: date) -> EventFetch:
            return EventFetch(events=mock_events(), used_mock=True)

        with (
            patch("gig_guide.events.client.EventsClient.fetch_events", fake_fetch),
            patch("gig_guide.services.content_service.get_settings", return_value=mock_settings),
            patch("gig_guide.email.sender.get_settings", return_value=mock_settings),
        ):
            assert cmd_preview(args) == 0

        output = capsys.readouterr().out
        assert "[ENGLISH]" in output
        assert "[JAPANESE]" in output
        assert html_path.exists()
        assert "<html" in html_path.read_text(encoding="utf-8")
        assert list(mock_settings.previews_dir.glob("20261019_preview.*"))

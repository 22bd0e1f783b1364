# ABOUTME: Email sender for gig guide delivery via SMTP.
# ABOUTME: Builds text and HTML bodies from content logs, sends them, and archives previews.

from __future__ import annotations

import smtplib
from datetime import date
from email.message import EmailMessage
from pathlib import Path

import structlog

from gig_guide.bulletin.html import BulletinHtmlRenderer
from gig_guide.config import Settings, get_settings
from gig_guide.models import ContentLogEntry, Subscriber

log = structlog.get_logger()


def format_subject_date(value: date) -> str:
    """Short date for subjects, e.g. 'Mon, Oct 19, 2026'."""
    return f"{value:%a, %b} {value.day}, {value.year}"


class EmailSender:
    """Sends gig guides via SMTP with STARTTLS."""

    def __init__(
        self, settings: Settings | None = None, html_renderer: BulletinHtmlRenderer | None = None
    ) -> None:
        self.settings = settings or get_settings()
        self.html_renderer = html_renderer or BulletinHtmlRenderer(self.settings)

    def subject_for(self, entry: ContentLogEntry) -> str:
        return f"{self.settings.email_subject} - {format_subject_date(entry.generated_date)}"

    def build_message(self, entry: ContentLogEntry, subscriber: Subscriber) -> EmailMessage:
        """Build the multipart message for one content log entry."""
        subject = self.subject_for(entry)

        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = f"{self.settings.sender_name} <{self.settings.sender_email}>"
        message["To"] = f"{subscriber.name} <{subscriber.email}>"

        message.set_content(entry.content)
        message.add_alternative(self.html_renderer.render(entry.content, subject), subtype="html")
        return message

    def send_content(self, entry: ContentLogEntry, subscriber: Subscriber) -> None:
        """Send a generated guide to its subscriber."""
        log.info("sending_guide", subscriber_id=subscriber.id, content_id=entry.id)
        message = self.build_message(entry, subscriber)
        self._send_smtp(message, [subscriber.email])

    def _send_smtp(self, message: EmailMessage, recipients: list[str]) -> None:
        """Send email via SMTP."""
        if not self.settings.smtp_user or not self.settings.smtp_password:
            raise ValueError(
                "SMTP credentials not configured. Set smtp_user and smtp_password in .env file."
            )

        log.debug(
            "connecting_smtp",
            host=self.settings.smtp_host,
            port=self.settings.smtp_port,
        )

        server = smtplib.SMTP(
            self.settings.smtp_host,
            self.settings.smtp_port,
            timeout=30,
        )

        try:
            server.ehlo()
            server.starttls()
            server.ehlo()
            server.login(
                self.settings.smtp_user.get_secret_value(),
                self.settings.smtp_password.get_secret_value(),
            )

            for recipient in recipients:
                log.info("sending_to", recipient=recipient)
                server.sendmail(
                    message["From"],
                    recipient,
                    message.as_string(),
                )

        finally:
            server.quit()

        log.info("guide_sent", recipient_count=len(recipients))

    def save_preview(self, entry: ContentLogEntry) -> Path:
        """Write the text and HTML versions of an entry to previews_dir.

        Returns:
            Path to the saved HTML file.
        """
        stem = f"{entry.generated_date.strftime('%Y%m%d')}_{entry.subscriber_id}"
        preview_dir = Path(self.settings.previews_dir)
        preview_dir.mkdir(parents=True, exist_ok=True)

        txt_path = preview_dir / f"{stem}.txt"
        txt_path.write_text(entry.content, encoding="utf-8")

        html_path = preview_dir / f"{stem}.html"
        html_path.write_text(
            self.html_renderer.render(entry.content, self.subject_for(entry)), encoding="utf-8"
        )

        log.info("preview_saved", txt=str(txt_path), html=str(html_path))
        return html_path

# ABOUTME: HTML rendering of composed bulletin content for email bodies and previews.
# ABOUTME: Parses each language edition and renders it through a Jinja2 template.

from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader

from gig_guide.bulletin.editions import split_editions
from gig_guide.bulletin.parser import extract_sections, parse_event_block
from gig_guide.config import Settings, get_settings
from gig_guide.languages import display_name
from gig_guide.templating.profiles import get_profile

HTML_TEMPLATE = "gig_guide.html"
WEB_SCHEMES = ("http", "https")


def is_web_url(value: str | None) -> bool:
    """True for absolute http(s) URLs, the only ones rendered as links."""
    if not value:
        return False
    parts = urlsplit(value.strip())
    return parts.scheme.lower() in WEB_SCHEMES and bool(parts.netloc)


class BulletinHtmlRenderer:
    """Turns bulletin text (one or more editions) into an HTML document."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._jinja_env: Environment | None = None

    @property
    def jinja_env(self) -> Environment:
        """Lazy-initialized Jinja2 environment."""
        if self._jinja_env is None:
            self._jinja_env = Environment(
                loader=FileSystemLoader(str(self.settings.templates_dir)),
                autoescape=True,
            )
            self._jinja_env.tests["web_url"] = is_web_url
        return self._jinja_env

    def render(self, content: str, subject: str = "") -> str:
        editions = split_editions(content)
        context = []
        for edition in editions:
            sections = extract_sections(edition.text)
            profile = get_profile(edition.language)
            events = [parse_event_block(raw) for raw in sections.event_blocks_raw]
            context.append(
                {
                    "language": display_name(edition.language),
                    "rtl": bool(profile and profile.rtl),
                    "sections": None if sections.is_empty else sections,
                    "events": [event for event in events if event is not None],
                    "raw": edition.text,
                }
            )

        template = self.jinja_env.get_template(HTML_TEMPLATE)
        return template.render(
            subject=subject,
            editions=context,
            show_language=len(context) > 1,
        )

# ABOUTME: QR code references for venue map links.
# ABOUTME: Builds deterministic image URLs on a hosted QR service, with a default fallback.

from urllib.parse import quote

import structlog

from gig_guide.config import Settings, get_settings

log = structlog.get_logger()


class QRCodeService:
    """Maps a URL to the address of a hosted QR code image."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @property
    def fallback_reference(self) -> str:
        """QR reference pointing at the default map URL."""
        return self._build(self.settings.default_map_url)

    def reference(self, url: str | None) -> str:
        """Return the QR image URL encoding the given URL.

        Same input gives the same output. Empty input encodes the default
        map URL. Never raises.
        """
        target = (url or "").strip() or self.settings.default_map_url
        try:
            return self._build(target)
        except Exception:
            log.warning("qr_reference_failed", url=url)
            return self.fallback_reference

    def _build(self, target: str) -> str:
        size = f"{self.settings.qr_size}x{self.settings.qr_size}"
        data = quote(target, safe="!*'()")
        return f"{self.settings.qr_service_url}?size={size}&data={data}&margin=1&qzone=1"

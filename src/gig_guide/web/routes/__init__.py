# ABOUTME: Routes module initialization.
# ABOUTME: Exports all route modules for FastAPI app.

from gig_guide.web.routes import api, content, subscribers, translation

__all__ = ["api", "content", "subscribers", "translation"]

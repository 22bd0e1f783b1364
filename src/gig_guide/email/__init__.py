# ABOUTME: Email delivery of generated gig guides.
# ABOUTME: Exports the SMTP sender.

from gig_guide.email.sender import EmailSender

__all__ = ["EmailSender"]

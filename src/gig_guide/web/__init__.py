# ABOUTME: Web API for subscriber management and content generation.
# ABOUTME: FastAPI application factory lives in gig_guide.web.app.

"""
CORS middleware configuration
"""
from fastapi.middleware.cors import CORSMiddleware
from ranch_site.config import CORS_ALLOWED_ORIGINS, CORS_ALLOW_CREDENTIALS


def setup_cors(app):
    """
    Setup CORS middleware for the site API.

    The site only reads content and posts the contact form, so GET and
    POST (plus preflight) are all that is allowed.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOWED_ORIGINS,
        allow_credentials=CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Requested-With"],
    )

"""
Configuration settings for the ranch site API
Values are read from the environment (and a local .env file)
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEBUG = os.getenv('DEBUG', 'False') == 'True'

# Get mode (development or production)
MODE = os.getenv("MODE", "development")


def get_env_var(key: str, default: str = None) -> str:
    """Fetch an environment variable and raise an error if it's missing (unless default is provided)."""
    value = os.getenv(key, default)
    if value is None and default is None:
        raise ValueError(f"Missing environment variable: {key}")
    return value


# Cosmic content store
COSMIC_API_ENVIRONMENT = os.getenv("COSMIC_API_ENVIRONMENT", "staging")
COSMIC_API_URLS = {
    "production": "https://api.cosmicjs.com/v3",
    "staging": "https://api.cosmic-staging.com/v3",
}
CONTENT_REQUEST_TIMEOUT = float(os.getenv("CONTENT_REQUEST_TIMEOUT", "10"))


def get_cosmic_bucket_slug() -> str:
    """Get the bucket that holds the site content"""
    return get_env_var("COSMIC_BUCKET_SLUG")


def get_cosmic_read_key() -> str:
    """Get the bucket read key"""
    return get_env_var("COSMIC_READ_KEY")


def get_cosmic_api_url() -> str:
    """Get Cosmic API URL based on the API environment (COSMIC_API_URL wins if set)"""
    override = os.getenv("COSMIC_API_URL")
    if override:
        return override.rstrip("/")
    return COSMIC_API_URLS.get(COSMIC_API_ENVIRONMENT, COSMIC_API_URLS["staging"])


# Contact form delivery
CONTACT_API_URL = os.getenv("CONTACT_API_URL", "")
CONTACT_API_KEY = os.getenv("CONTACT_API_KEY", "")
CONTACT_REQUEST_TIMEOUT = float(os.getenv("CONTACT_REQUEST_TIMEOUT", "10"))

# CORS Configuration
# Include both localhost and 127.0.0.1 as browsers treat them as different origins
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ALLOWED_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]

CORS_ALLOW_CREDENTIALS = True

# Listing sizes
BLOG_POSTS_PER_PAGE = 9
FEATURED_BLOG_POSTS_LIMIT = 3
RELATED_POSTS_LIMIT = 3
ARCHIVE_POSTS_LIMIT = 12

# Used when the content store has no site-settings object
DEFAULT_RANCH_NAME = "Golden Hills Ranch"

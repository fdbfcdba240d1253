import os

SECRET_KEY = os.getenv("SECRET_KEY")

PREFERRED_URL_SCHEME = os.getenv("PREFERRED_URL_SCHEME", "https")

# The game lives in the session cookie; only send it over HTTPS in production
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() in ("1", "true", "yes")
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = "Lax"

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True

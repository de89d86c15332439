"""Environment-driven configuration."""

import os


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_timeout(name: str) -> float | None:
    raw = (os.getenv(name) or "").strip()
    return float(raw) if raw else None


# provider
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")
GEMINI_BASE_URL = os.getenv(
    "GEMINI_BASE_URL",
    "https://generativelanguage.googleapis.com/v1beta",
).rstrip("/")
GEMINI_TEMPERATURE = float(os.getenv("GEMINI_TEMPERATURE", "0.6"))
PROVIDER_TIMEOUT = _env_timeout("PROVIDER_TIMEOUT")  # none = platform limit

# cache (process-local ttl and shared edge cache directives)
CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", "14400"))  # 4h
STALE_WHILE_REVALIDATE = int(os.getenv("STALE_WHILE_REVALIDATE", "3600"))

# http surface
ALLOWED_ORIGIN = os.getenv(
    "ALLOWED_ORIGIN",
    "https://salathieljones-ux.github.io",
)
ATTACH_SOURCES = _env_bool("ATTACH_SOURCES")

# client
NEWS_API_URL = os.getenv("NEWS_API_URL", "http://localhost:8000/api/news")

API_KEY_ENV = "GEMINI_API_KEY"


def get_api_key() -> str | None:
    """Read the provider credential at call time.

    :return: The API key, or None when unset or blank.
    """
    return os.getenv(API_KEY_ENV) or None


def cache_control_header(
    ttl: int = CACHE_TTL_SECONDS,
    swr: int = STALE_WHILE_REVALIDATE,
) -> str:
    """Build the shared-cache directive sent with successful responses.

    :param ttl: Seconds a shared cache may hold the response.
    :param swr: Seconds a stale response may be served while revalidating.
    :return: Cache-Control header value.
    """
    return f"public, s-maxage={ttl}, stale-while-revalidate={swr}"


def cors_headers() -> dict[str, str]:
    """Return the CORS headers attached to every news response."""
    return {
        "Access-Control-Allow-Origin": ALLOWED_ORIGIN,
        "Access-Control-Allow-Methods": "GET,OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }

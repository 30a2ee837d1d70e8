# frontend/config.py
# Environment-aware configuration for the Projects showcase frontend

import os
from typing import Literal

# Environment detection - normalize to lowercase
_raw_env = os.environ.get("ENV", "production").lower()
ENV: Literal["local", "staging", "production"] = _raw_env if _raw_env in ("local", "staging", "production") else "production"  # type: ignore

IS_LOCAL = (ENV == "local")
IS_STAGING = (ENV == "staging")
IS_PROD = (ENV == "production")

IS_DEV = IS_LOCAL

LOCAL_DEFAULT_URL = "http://127.0.0.1:3000"


def get_env() -> Literal["local", "staging", "production"]:
    """Get current (normalized) environment."""
    return ENV


def validate_api_url(url: str, env: str) -> None:
    """
    Validate API base URL according to environment security rules.

    Raises:
        ValueError: If URL violates constraints for the environment
    """
    if not url:
        raise ValueError("API base URL cannot be empty")

    if env in ("staging", "production"):
        if not url.startswith("https://"):
            raise ValueError(f"Production/staging must use HTTPS. Got: {url}")
        if "127.0.0.1" in url or "localhost" in url:
            raise ValueError(f"Production/staging cannot use localhost URLs. Got: {url}")


def get_api_base_url() -> str:
    """
    Get API base URL with strict priority and validation.

    Priority:
    1. BACKEND_URL environment variable
    2. API_BASE_URL environment variable
    3. Local dev default ONLY if ENV == "local"

    Returns:
        Validated API base URL with trailing slash removed

    Raises:
        RuntimeError: If staging/production has no configured URL
    """
    for var in ("BACKEND_URL", "API_BASE_URL"):
        value = os.environ.get(var, "").strip()
        if value:
            url = value.rstrip("/")
            validate_api_url(url, ENV)
            return url

    if ENV == "local":
        return LOCAL_DEFAULT_URL

    raise RuntimeError(
        f"Backend URL not configured for {ENV.upper()} environment. "
        f"Set BACKEND_URL to the base URL serving /api/projects."
    )


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        print(f"[CONFIG] Ignoring non-integer {name}, using {default}")
        return default


# Collection endpoint, relative to the base URL
PROJECTS_API_PATH = "/" + os.environ.get("PROJECTS_API_PATH", "/api/projects").strip("/")

REQUEST_TIMEOUT = _int_env("REQUEST_TIMEOUT_SECONDS", 20)

# Tags shown per project in list contexts
MAX_LIST_TAGS = 3

ENABLE_DEBUG_UI = IS_DEV
ENABLE_VERBOSE_LOGGING = IS_DEV or IS_STAGING

try:
    BACKEND_URL = get_api_base_url()
except (RuntimeError, ValueError) as e:
    print(f"[CONFIG] CRITICAL: {e}")
    BACKEND_URL = ""

print(f"[CONFIG] Environment: {ENV}")
print(f"[CONFIG] Backend URL: {BACKEND_URL}")
print(f"[CONFIG] Debug UI: {'enabled' if ENABLE_DEBUG_UI else 'disabled'}")

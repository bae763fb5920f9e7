"""Logging of outgoing API requests when HKTO_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via the HKTO_LOG_REQUESTS environment variable."""
    return os.getenv("HKTO_LOG_REQUESTS", "").lower() == "true"


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(
    api_name: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log a GET request to an external API if HKTO_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return

    log_parts = [f"GET {_build_url_with_params(url, params)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(headers, indent=2, ensure_ascii=False)}")
    logger.info(f"{api_name} request:\n" + "\n".join(log_parts))


def log_api_response(api_name: str, status: int, elapsed_seconds: float) -> None:
    """Log the status and latency of a response if HKTO_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return
    logger.info(f"{api_name} response: HTTP {status} in {elapsed_seconds:.2f}s")

"""Request inspection and canned responses for FastAPI handlers."""

import ipaddress
import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import PlainTextResponse, RedirectResponse

logger = logging.getLogger(__name__)


def _normalize_ip(value: str) -> Optional[str]:
    try:
        return str(ipaddress.ip_address(value.strip()))
    except ValueError:
        return None


def get_real_addr(request: Request) -> str:
    """Best guess at the originating client IP behind proxies.

    The last X-Forwarded-For hop wins when present and valid, then
    X-Real-Ip, then the socket peer address.
    """
    remote_ip = request.client.host if request.client else ""

    xff = request.headers.get("x-forwarded-for", "").strip(",")
    if xff:
        ip = _normalize_ip(xff.split(",")[-1])
        if ip:
            remote_ip = ip
    else:
        xri = request.headers.get("x-real-ip", "")
        if xri:
            ip = _normalize_ip(xri)
            if ip:
                remote_ip = ip

    return remote_ip


def send_http_error(reason: str, status_code: int = 400) -> PlainTextResponse:
    """Plain text error response, 400 Bad Request unless told otherwise."""
    return PlainTextResponse(reason, status_code=status_code)


def deny_access(source: str) -> PlainTextResponse:
    """Log and reject a request coming from ``source``."""
    logger.warning(f"Access Denied From: {source}")
    return PlainTextResponse(f"You can't access this from {source}", status_code=401)


def redirect_to_home() -> RedirectResponse:
    return RedirectResponse("/", status_code=302)

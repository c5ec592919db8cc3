"""Helpers for FastAPI request handlers."""

from .request_helpers import get_real_addr, send_http_error, deny_access, redirect_to_home

__all__ = ["get_real_addr", "send_http_error", "deny_access", "redirect_to_home"]

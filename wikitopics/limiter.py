"""Shared rate limiter for the HTTP endpoints (in-memory, per client address)."""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

"""Module-level ``app`` for ASGI servers, built from environment settings."""

from national_connect.api.app import create_app
from national_connect.containers import build_container

app = create_app(build_container())

"""Web adapter - HTTP API."""

from hk_transit_optimizer.adapters.web.api_app import create_app

__all__ = ["create_app"]

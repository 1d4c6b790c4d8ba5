"""
API dependency helpers.

Expose the gateway configuration, request statistics and start time held on
`app.state` to route handlers.
"""
from datetime import datetime, timezone

from fastapi import Request

from .config import GatewayConfig
from .stats import RequestStats


def get_config(request: Request) -> GatewayConfig:
    return request.app.state.gateway_config


def get_stats(request: Request) -> RequestStats:
    return request.app.state.request_stats


def get_uptime_seconds(request: Request) -> float:
    started_at: datetime = request.app.state.started_at
    return (datetime.now(timezone.utc) - started_at).total_seconds()

"""
App assembly entry point.

Builds the gateway from the configuration file resolved from the environment
so it can be served with `uvicorn app:app`.
"""

from regima.gateway.main import create_app

app = create_app()

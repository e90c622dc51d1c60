"""
HTTP listener, started only after the license gate has passed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import uvicorn
from fastapi import FastAPI

from licgate.common.config import Config

if TYPE_CHECKING:
    from licgate.common.models import ResolvedOptions


class AppServer:
    """FastAPI application bound to a set of resolved options."""

    def __init__(self, options: ResolvedOptions, log_level: int = Config.LOG_LEVEL):
        self.options = options
        self.logger = logging.getLogger(__name__)
        self.logger.setLevel(log_level)
        self.app = FastAPI()
        self.app.state.options = options
        self._setup_routes()

    def _setup_routes(self) -> None:
        @self.app.get("/health")
        def health() -> dict[str, Any]:
            return {"status": "ok", "auth": self.options.auth_enabled}

    def run(self) -> None:
        host = str(self.options.host)
        self.logger.info("Listening on %s:%s", host, self.options.port)
        uvicorn.run(self.app, host=host, port=self.options.port)


def start_server(options: ResolvedOptions) -> None:
    """Bind the listener and serve until interrupted."""
    AppServer(options).run()

"""complexity-radar async resource clients."""

from complexity_radar.async_clients.commits import AsyncCommitsClient

__all__ = [
    "AsyncCommitsClient",
]

"""complexity-radar resource clients."""

from complexity_radar.clients.commits import CommitsClient

__all__ = [
    "CommitsClient",
]

"""Unit of work port: commit boundaries chosen by a use case, not by the request."""

from __future__ import annotations

from typing import Protocol


class IUnitOfWork(Protocol):
    """Commit or discard the work done on the current session since the last boundary."""

    async def commit(self) -> None:
        """Make pending changes durable."""

    async def rollback(self) -> None:
        """Discard pending changes and leave the session usable."""

"""Playground sessions.

Each mounted playground widget is a session addressed by an opaque id.
Sessions idle for longer than the TTL are closed by a background sweeper
that runs for the lifetime of the application.
"""

import asyncio
import logging
import secrets
import time
from collections.abc import Callable

from ethph_academy.core.playground import MockCompiler, Playground, TemplateRegistry

logger = logging.getLogger(__name__)


class PlaygroundSessions:
    """In-memory registry of playground sessions."""

    def __init__(
        self,
        compiler: MockCompiler,
        templates: TemplateRegistry | None = None,
        *,
        ttl: float = 1800.0,
        sweep_interval: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the registry.

        Args:
            compiler: Compiler shared by all playgrounds
            templates: Template registry shared by all playgrounds
            ttl: Seconds of inactivity before a session is closed
            sweep_interval: Seconds between eviction sweeps
            clock: Monotonic clock; replaced in tests
        """
        self._compiler = compiler
        self._templates = templates if templates is not None else TemplateRegistry()
        self._ttl = ttl
        self._sweep_interval = sweep_interval
        self._clock = clock
        self._sessions: dict[str, Playground] = {}
        self._last_seen: dict[str, float] = {}
        self._sweep_task: asyncio.Task[None] | None = None

    @property
    def templates(self) -> TemplateRegistry:
        return self._templates

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self, template_id: str | None = None) -> tuple[str, Playground]:
        """Mount a new playground.

        Raises:
            UnknownTemplateError: If template_id is not registered
        """
        playground = Playground(self._compiler, self._templates, template_id=template_id)
        session_id = secrets.token_urlsafe(16)
        self._sessions[session_id] = playground
        self._last_seen[session_id] = self._clock()
        logger.info(f"Opened playground session {session_id[:8]} ({len(self._sessions)} active)")
        return session_id, playground

    def get(self, session_id: str) -> Playground | None:
        """Look up a session and mark it as active."""
        playground = self._sessions.get(session_id)
        if playground is not None:
            self._last_seen[session_id] = self._clock()
        return playground

    def close(self, session_id: str) -> bool:
        """Unmount a session.

        Returns:
            True if the session existed
        """
        playground = self._sessions.pop(session_id, None)
        self._last_seen.pop(session_id, None)
        if playground is None:
            return False
        playground.close()
        logger.info(f"Closed playground session {session_id[:8]}")
        return True

    def close_all(self) -> None:
        for session_id in list(self._sessions):
            self.close(session_id)

    def evict_expired(self) -> int:
        """Close sessions idle longer than the TTL.

        Returns:
            Number of sessions closed
        """
        cutoff = self._clock() - self._ttl
        expired = [sid for sid, seen in self._last_seen.items() if seen < cutoff]
        for session_id in expired:
            self.close(session_id)
        if expired:
            logger.info(f"Evicted {len(expired)} idle playground session(s)")
        return len(expired)

    async def start(self) -> None:
        """Start the eviction sweeper."""
        if self._sweep_task is not None:
            return
        self._sweep_task = asyncio.create_task(self._sweep())

    async def stop(self) -> None:
        """Stop the sweeper and close every session."""
        if self._sweep_task is not None:
            self._sweep_task.cancel()
            try:
                await self._sweep_task
            except asyncio.CancelledError:
                pass
            self._sweep_task = None

        self.close_all()

    async def _sweep(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval)
            self.evict_expired()

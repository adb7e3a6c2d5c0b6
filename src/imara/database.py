"""In-memory state ownership, mutation serialization and snapshot scheduling."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog

from imara.db.models import AppState
from imara.db.snapshot import SnapshotStore
from imara.errors import PersistenceError

logger = structlog.get_logger()


class StateManager:
    """Owns the authoritative ``AppState``.

    All mutations go through ``mutation()``, which holds a single lock for the
    read-modify sequence and persists the snapshot afterwards. The autosave
    loop and the shutdown save use the same lock, so a snapshot never captures
    a half-applied request.
    """

    def __init__(self, store: SnapshotStore, state: AppState | None = None) -> None:
        self.store = store
        self.state = state if state is not None else store.load()
        self._lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()
        self._version = 0
        self._saved_version = -1
        self._autosave_task: asyncio.Task[None] | None = None

    @property
    def dirty(self) -> bool:
        return self._saved_version < self._version

    @asynccontextmanager
    async def mutation(self) -> AsyncIterator[AppState]:
        """Serialize a read-modify sequence and persist once it succeeds.

        If the body raises, the state version is not bumped and nothing is saved.
        """
        async with self._lock:
            yield self.state
            self._version += 1
        await self.persist()

    async def persist(self, *, force: bool = False) -> bool:
        """Write the current state to disk if it changed since the last save.

        Returns True when the snapshot on disk reflects the current version.
        Write failures are logged; the in-memory state stays authoritative and
        the next call retries.
        """
        async with self._lock:
            version = self._version
            if not force and version <= self._saved_version:
                return True
            payload = self.store.dump(self.state)

        async with self._write_lock:
            if version < self._saved_version:
                # A newer snapshot already reached the disk.
                return True
            try:
                await asyncio.to_thread(self.store.write, payload)
            except PersistenceError as exc:
                logger.error("snapshot_save_failed", error=exc.message, version=version)
                return False
            self._saved_version = version

        logger.debug("snapshot_saved", version=version)
        return True

    async def _autosave_loop(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            await self.persist()

    def start_autosave(self, interval: float) -> None:
        """Start the periodic snapshot task on the running loop."""
        if self._autosave_task is None:
            self._autosave_task = asyncio.create_task(self._autosave_loop(interval))
            logger.info("autosave_started", interval_seconds=interval)

    async def stop_autosave(self) -> None:
        if self._autosave_task is None:
            return
        self._autosave_task.cancel()
        try:
            await self._autosave_task
        except asyncio.CancelledError:
            pass
        self._autosave_task = None


_manager: StateManager | None = None


async def init_store(data_file: str, *, save_initial: bool = True) -> StateManager:
    """Load the snapshot and install the process-wide state manager."""
    global _manager  # noqa: PLW0603
    _manager = StateManager(SnapshotStore(data_file))
    if save_initial:
        await _manager.persist(force=True)
    return _manager


async def close_store() -> None:
    """Stop the autosave task and write the final snapshot."""
    global _manager  # noqa: PLW0603
    if _manager is None:
        return
    await _manager.stop_autosave()
    await _manager.persist(force=True)
    logger.info("state_store_closed")
    _manager = None


def get_store() -> StateManager:
    """Get the state manager (FastAPI dependency)."""
    if _manager is None:
        msg = "State store not initialized. Call init_store() first."
        raise RuntimeError(msg)
    return _manager

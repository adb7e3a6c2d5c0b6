"""Whole-state JSON snapshot: load on startup, atomic rewrite on save.

The file is the only durable copy of the application state. A save writes the
complete document to a sibling ``.tmp`` file and replaces the target with it,
so a crash mid-write leaves the previous snapshot intact.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import structlog
from pydantic import ValidationError as PydanticValidationError

from imara.db.models import AppState
from imara.errors import PersistenceError
from imara.gamification.seed import default_state, seed_catalog

logger = structlog.get_logger()


class SnapshotStore:
    """Reads and writes the single state document at ``path``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @property
    def tmp_path(self) -> Path:
        return self.path.with_name(self.path.name + ".tmp")

    def load(self) -> AppState:
        """Reconstruct state from the last snapshot, or the default state.

        A missing file yields the default catalog. An unreadable or invalid
        file is moved aside (``<name>.corrupt-<timestamp>``) so the next save
        does not destroy it, and the default catalog is returned.
        """
        if not self.path.exists():
            logger.info("snapshot_missing", path=str(self.path))
            return default_state()

        try:
            state = AppState.model_validate_json(self.path.read_bytes())
        except (OSError, ValueError, PydanticValidationError) as exc:
            logger.error("snapshot_unreadable", path=str(self.path), error=str(exc))
            self._quarantine()
            return default_state()

        seed_catalog(state)
        logger.info(
            "snapshot_loaded",
            path=str(self.path),
            users=len(state.users),
            last_save=state.last_save.isoformat() if state.last_save else None,
        )
        return state

    def dump(self, state: AppState) -> bytes:
        """Stamp ``last_save`` and serialize the whole document."""
        state.last_save = datetime.now(timezone.utc)
        return state.model_dump_json(by_alias=True, indent=2).encode()

    def write(self, payload: bytes) -> None:
        """Write serialized state atomically.

        Raises:
            PersistenceError: If the file could not be written or replaced.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.tmp_path
            tmp.write_bytes(payload)
            tmp.replace(self.path)
        except OSError as exc:
            msg = f"Could not write snapshot {self.path}: {exc}"
            raise PersistenceError(msg) from exc

    def save(self, state: AppState) -> bool:
        """Serialize and write ``state``. Returns False on failure, never raises."""
        try:
            self.write(self.dump(state))
        except PersistenceError as exc:
            logger.error("snapshot_save_failed", error=exc.message)
            return False
        logger.debug("snapshot_saved", path=str(self.path))
        return True

    def _quarantine(self) -> None:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        target = self.path.with_name(f"{self.path.name}.corrupt-{stamp}")
        try:
            self.path.replace(target)
        except OSError:
            logger.warning("snapshot_quarantine_failed", path=str(self.path), exc_info=True)
        else:
            logger.warning("snapshot_quarantined", path=str(target))

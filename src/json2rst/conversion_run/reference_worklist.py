"""Breadth-first worklist of schema files with reference de-duplication."""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

logger = logging.getLogger(__name__)


class ReferenceWorklist:
    """Pending schema files plus every reference already queued in the run.

    References resolve against the directory of the root schema. A reference
    is queued at most once, and the root counts as already queued, which
    keeps cyclic schema graphs finite.
    """

    def __init__(self, root_schema: Path) -> None:
        self._schema_dir = root_schema.parent
        self._pending: deque[Path] = deque([root_schema])
        self._seen: set[str] = {root_schema.name}

    def __bool__(self) -> bool:
        return bool(self._pending)

    def pop(self) -> Path:
        return self._pending.popleft()

    def register(self, ref: str) -> bool:
        """Record a reference; return True and queue its file if it is new."""
        if ref in self._seen:
            return False
        self._seen.add(ref)
        target = self._schema_dir / ref
        self._pending.append(target)
        logger.debug("Queued referenced schema %s", target)
        return True

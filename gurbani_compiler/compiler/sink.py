"""Destinations for compiled artifacts."""

import json
import logging
import os
import shutil
import threading
from pathlib import Path
from typing import Any, Protocol

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ArtifactSink(Protocol):
    """Receives each compiled artifact by name."""

    def save(self, name: str, data: Any) -> None: ...


class RunContext(BaseModel):
    """Staging and final output locations of one compilation run."""

    staging_dir: Path
    output_dir: Path

    def prepare(self) -> None:
        """Start from an empty staging directory."""
        shutil.rmtree(self.staging_dir, ignore_errors=True)
        self.staging_dir.mkdir(parents=True)

    def publish(self) -> None:
        """Replace the output directory with the staged artifacts."""
        logger.info("Moving %s to %s", self.staging_dir, self.output_dir)
        shutil.rmtree(self.output_dir, ignore_errors=True)
        self.output_dir.parent.mkdir(parents=True, exist_ok=True)
        os.replace(self.staging_dir, self.output_dir)

    def discard(self) -> None:
        """Remove whatever a failed run staged."""
        shutil.rmtree(self.staging_dir, ignore_errors=True)


def dump_json(data: Any, indent: int = 2) -> str:
    """Serialize an artifact; key order is kept as built."""
    return json.dumps(data, ensure_ascii=False, indent=indent) + "\n"


class StagingDirectorySink:
    """Writes artifacts as JSON files under a run's staging directory.

    ``name`` may contain ``/`` to place an artifact in a subdirectory.
    """

    def __init__(self, context: RunContext, indent: int = 2) -> None:
        self._context = context
        self._indent = indent

    def save(self, name: str, data: Any) -> None:
        path = self._context.staging_dir / f"{name}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dump_json(data, self._indent), encoding="utf-8")
        logger.debug("Saved %s", path)


class MemorySink:
    """Keeps artifacts in a dict, in the order they were saved."""

    def __init__(self) -> None:
        self.artifacts: dict[str, Any] = {}
        self._lock = threading.Lock()

    def save(self, name: str, data: Any) -> None:
        with self._lock:
            self.artifacts[name] = data

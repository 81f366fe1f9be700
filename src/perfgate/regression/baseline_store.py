#!/usr/bin/env python3
"""
Baseline Storage for Performance Regression Testing

Stores the baseline measurement set of each workload configuration under a
key, and optionally archives comparison results next to it.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any

from ..core.errors import BaselineNotFoundError, BaselineStorageError, EmptySampleSetError
from .measurement import MeasurementSet

logger = logging.getLogger(__name__)

REGISTRY_VERSION = "1"
_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def validate_key(key: str) -> str:
    """Keys become file names, so only [A-Za-z0-9._-] are allowed."""
    if not isinstance(key, str) or not _KEY_PATTERN.match(key):
        raise ValueError(f"Invalid baseline key {key!r}: use letters, digits, '.', '_' or '-'")
    return key


class BaselineStore(ABC):
    """Where baselines live"""

    @abstractmethod
    def load(self, key: str) -> MeasurementSet:
        """Return the baseline for ``key``, raising BaselineNotFoundError if absent."""

    @abstractmethod
    def save(self, key: str, measurements: MeasurementSet) -> None:
        """Store ``measurements`` as the baseline for ``key``, replacing any previous one."""

    @abstractmethod
    def keys(self) -> list[str]:
        """Keys that currently have a baseline."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove a baseline; returns False if there was none."""

    def exists(self, key: str) -> bool:
        return key in self.keys()


class InMemoryBaselineStore(BaselineStore):
    """Dictionary-backed store, mostly for tests and embedding"""

    def __init__(self):
        self._baselines: dict[str, MeasurementSet] = {}

    def load(self, key: str) -> MeasurementSet:
        try:
            return self._baselines[key]
        except KeyError:
            raise BaselineNotFoundError(key, "memory") from None

    def save(self, key: str, measurements: MeasurementSet) -> None:
        self._baselines[validate_key(key)] = measurements

    def keys(self) -> list[str]:
        return sorted(self._baselines)

    def delete(self, key: str) -> bool:
        return self._baselines.pop(key, None) is not None


class JsonBaselineStore(BaselineStore):
    """
    Stores baselines as JSON documents in a directory.

    Layout:
        <dir>/baseline_registry.json      index of keys
        <dir>/baselines/<key>.json        serialized MeasurementSet
        <dir>/results/<key>_<stamp>.json  archived comparison results
    """

    def __init__(self, baselines_dir: str | Path = "baselines"):
        self.baselines_dir = Path(baselines_dir)
        self.sets_dir = self.baselines_dir / "baselines"
        self.results_dir = self.baselines_dir / "results"
        self.registry_file = self.baselines_dir / "baseline_registry.json"
        self._load_registry()

    def _load_registry(self):
        """Load the baseline registry"""
        if self.registry_file.exists():
            try:
                with open(self.registry_file) as f:
                    self.registry = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise BaselineStorageError("registry", "load", str(e), cause=e) from e
        else:
            self.registry = {
                "version": REGISTRY_VERSION,
                "created": datetime.now().isoformat(),
                "baselines": {},
                "last_updated": datetime.now().isoformat()
            }

    def _save_registry(self):
        """Save the baseline registry"""
        self.registry["last_updated"] = datetime.now().isoformat()
        self.baselines_dir.mkdir(parents=True, exist_ok=True)
        with open(self.registry_file, 'w') as f:
            json.dump(self.registry, f, indent=2, default=str)

    def _path_for(self, key: str) -> Path:
        return self.sets_dir / f"{validate_key(key)}.json"

    def load(self, key: str) -> MeasurementSet:
        path = self._path_for(key)
        if not path.exists():
            raise BaselineNotFoundError(key, str(self.baselines_dir))

        try:
            with open(path) as f:
                data = json.load(f)
            measurements = MeasurementSet.from_dict(data)
        except (OSError, json.JSONDecodeError, KeyError, ValueError, TypeError, EmptySampleSetError) as e:
            raise BaselineStorageError(key, "load", str(e), cause=e) from e

        logger.info(f"Loaded baseline '{key}' ({measurements.iteration_count} iterations)")
        return measurements

    def save(self, key: str, measurements: MeasurementSet) -> None:
        path = self._path_for(key)
        try:
            self.sets_dir.mkdir(parents=True, exist_ok=True)
            with open(path, 'w') as f:
                json.dump(measurements.to_dict(), f, indent=2, default=str)

            self.registry["baselines"][key] = {
                "baseline_file": str(path.relative_to(self.baselines_dir)),
                "label": measurements.label,
                "saved": datetime.now().isoformat(),
                "sample_count": measurements.iteration_count
            }
            self._save_registry()
        except (OSError, TypeError, ValueError) as e:
            raise BaselineStorageError(key, "save", str(e), cause=e) from e

        logger.info(f"Saved baseline '{key}' ({measurements.iteration_count} iterations) to {path}")

    def keys(self) -> list[str]:
        return sorted(self.registry["baselines"])

    def exists(self, key: str) -> bool:
        return self._path_for(key).exists()

    def delete(self, key: str) -> bool:
        path = self._path_for(key)
        removed = self.registry["baselines"].pop(key, None) is not None
        if path.exists():
            path.unlink()
            removed = True
        if removed:
            self._save_registry()
        return removed

    def save_result(self, key: str, payload: dict[str, Any]) -> Path:
        """Archive a comparison result for ``key`` and return its path."""
        validate_key(key)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        path = self.results_dir / f"{key}_{stamp}.json"
        try:
            self.results_dir.mkdir(parents=True, exist_ok=True)
            with open(path, 'w') as f:
                json.dump(payload, f, indent=2, default=str)
        except (OSError, TypeError, ValueError) as e:
            raise BaselineStorageError(key, "save result", str(e), cause=e) from e
        return path

    def get_summary(self) -> dict[str, Any]:
        """Get summary of all baselines"""
        return {
            "total_baselines": len(self.registry["baselines"]),
            "registry_version": self.registry["version"],
            "last_updated": self.registry["last_updated"],
            "baselines": dict(self.registry["baselines"]),
        }


__all__ = [
    "validate_key",
    "BaselineStore",
    "InMemoryBaselineStore",
    "JsonBaselineStore",
]

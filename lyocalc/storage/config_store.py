"""Named configuration storage backed by a JSON file.

Configurations are grouped by owner id. Callers without an identity share
the ``"anonymous"`` bucket. Each record holds a deep copy of the settings
and steps as plain JSON data; loading re-normalises them so numeric fields
come back as numbers even if the file holds strings.
"""

from __future__ import annotations

import copy
import json
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from lyocalc.logger import get_logger
from lyocalc.models.drying_step import DryingStep, parse_steps
from lyocalc.models.settings import FreezeDryerSettings, normalize_settings

LOGGER = get_logger(__name__)

ANONYMOUS_OWNER = "anonymous"
STORE_PATH_ENV = "LYOCALC_CONFIG_STORE"


def default_store_path() -> Path:
    """Store location from ``LYOCALC_CONFIG_STORE`` or the user's home."""
    configured = os.environ.get(STORE_PATH_ENV)
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".lyocalc" / "configurations.json"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _settings_payload(settings: Union[FreezeDryerSettings, Dict[str, Any]]) -> Dict[str, Any]:
    payload = settings.to_dict() if isinstance(settings, FreezeDryerSettings) else copy.deepcopy(dict(settings))
    payload.pop("steps", None)
    return payload


class ConfigurationStore:
    """Persist named ``{settings, steps}`` pairs per owner.

    Each save reads the whole file, changes one record and writes the file
    back with an atomic replace. There is no lock: when two sessions save at
    the same time, the last write wins and the other change is lost.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path is not None else default_store_path()

    def _read(self) -> Dict[str, List[Dict[str, Any]]]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Configuration store {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Configuration store {self.path} must hold a JSON object")
        return data

    def _write(self, data: Dict[str, List[Dict[str, Any]]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, self.path)

    def list_configurations(self, owner: Optional[str] = None) -> List[Dict[str, Any]]:
        """Saved records for ``owner``, oldest first."""
        return copy.deepcopy(self._read().get(owner or ANONYMOUS_OWNER, []))

    def save_configuration(
        self,
        owner: Optional[str],
        name: str,
        settings: Union[FreezeDryerSettings, Dict[str, Any]],
        steps: Iterable[Any],
        config_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a record, or update the record ``config_id`` in place.

        Returns:
            The stored record.
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("Configuration name must not be empty")

        owner = owner or ANONYMOUS_OWNER
        step_list = [s.to_dict() for s in parse_steps(steps)]
        settings_data = _settings_payload(normalize_settings(_settings_payload(settings), step_list))

        data = self._read()
        records = data.setdefault(owner, [])
        timestamp = _now()

        record = next((r for r in records if config_id and r.get("id") == config_id), None)
        if record is not None:
            record.update(name=name, settings=settings_data, steps=step_list, updatedAt=timestamp)
            LOGGER.info("Updated configuration %r (%s) for %s", name, config_id, owner)
        else:
            record = {
                "id": str(uuid.uuid4()),
                "name": name,
                "settings": settings_data,
                "steps": step_list,
                "createdAt": timestamp,
                "updatedAt": timestamp,
            }
            records.append(record)
            LOGGER.info("Saved configuration %r (%s) for %s", name, record["id"], owner)

        self._write(data)
        return copy.deepcopy(record)

    def load_configuration(
        self, owner: Optional[str], config_id: str
    ) -> Tuple[FreezeDryerSettings, List[DryingStep]]:
        """Load a record as normalised settings plus its steps."""
        record = self._find(owner, config_id)
        steps = parse_steps(record.get("steps") or [])
        settings = normalize_settings(record.get("settings") or {}, steps)
        return settings, steps

    def delete_configuration(self, owner: Optional[str], config_id: str) -> None:
        owner = owner or ANONYMOUS_OWNER
        data = self._read()
        records = data.get(owner, [])
        remaining = [r for r in records if r.get("id") != config_id]
        if len(remaining) == len(records):
            raise KeyError(config_id)
        data[owner] = remaining
        self._write(data)
        LOGGER.info("Deleted configuration %s for %s", config_id, owner)

    def _find(self, owner: Optional[str], config_id: str) -> Dict[str, Any]:
        for record in self._read().get(owner or ANONYMOUS_OWNER, []):
            if record.get("id") == config_id:
                return record
        raise KeyError(config_id)

# src/devises/adapters/persistence/seed_data.py
"""
Seed Data - Bundled Reference Currency Dataset

This module loads the reference currency list used to seed an empty local
store. The dataset ships as a JSON resource inside the package; a different
file can be supplied through SEED_DATASET_PATH.

Files that USE this module:
- devises.application.currency_repository (loads the dataset when seeding)
- tests.test_seed_data (unit tests)

Files that this module USES:
- devises.adapters.persistence.base (CurrencyRecord)
- devises.config (settings.seed_dataset_path)
"""
from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import List, Optional

from devises.adapters.persistence.base import CurrencyRecord

log = logging.getLogger(__name__)

DATASET_RESOURCE = "currencies.json"


def _read_bundled() -> str:
    return (
        resources.files("devises.adapters.persistence")
        .joinpath("data")
        .joinpath(DATASET_RESOURCE)
        .read_text(encoding="utf-8")
    )


def parse_currencies(raw: str) -> List[CurrencyRecord]:
    """
    Parse a JSON dataset into currency records.

    Args:
        raw: JSON text holding a list of {"code": ..., "name": ...} objects

    Returns:
        Records in dataset order

    Raises:
        ValueError: If the JSON is invalid or an entry is malformed
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("Currency dataset must be a JSON list")

    records = []
    for index, entry in enumerate(data):
        try:
            code = str(entry["code"]).strip()
            name = str(entry["name"]).strip()
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed currency entry at index {index}: {entry!r}") from e
        if not code or not name:
            raise ValueError(f"Empty code or name at index {index}: {entry!r}")
        records.append(CurrencyRecord(code=code, name=name))
    return records


def load_reference_currencies(path: Optional[Path] = None) -> List[CurrencyRecord]:
    """
    Load the reference currency list.

    Args:
        path: Optional dataset file (defaults to settings.seed_dataset_path,
              then to the bundled resource)

    Returns:
        Reference currency records in dataset order
    """
    if path is None:
        from devises.config import settings
        path = settings.seed_dataset_path

    if path is not None:
        log.info("Loading currency dataset from %s", path)
        raw = Path(path).read_text(encoding="utf-8")
    else:
        raw = _read_bundled()

    records = parse_currencies(raw)
    log.debug("Loaded %d reference currencies", len(records))
    return records

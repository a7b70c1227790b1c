"""Load property and client datasets from JSON or CSV files."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterator, TypeVar

from estate_matcher.dataset.normalizer import normalize_client, normalize_property
from estate_matcher.exceptions import InvalidRecordError, StorageError
from estate_matcher.models.client import Client
from estate_matcher.models.property import Property

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_properties(
    path: str | Path,
    *,
    suburb: str | None = None,
    state: str | None = None,
    strict: bool = False,
) -> list[Property]:
    """Load and normalize a property dataset.

    Parameters
    ----------
    path : str | Path
        JSON file (a list of rows, or an object with a ``"properties"``
        list) or CSV file with a header row.
    suburb, state : str | None
        Overrides applied to every row.
    strict : bool
        Raise on the first unusable row instead of skipping it.

    Returns
    -------
    list[Property]
        Normalized properties in file order.
    """
    rows = _read_rows(Path(path), "properties")

    def build(index: int, raw: dict[str, Any]) -> Property:
        return normalize_property(raw, suburb=suburb, state=state, default_id=f"prop-{index + 1}")

    return _normalize_all(rows, build, "property", strict)


def load_clients(path: str | Path, *, strict: bool = False) -> list[Client]:
    """Load and normalize a client dataset (same file formats as properties)."""
    rows = _read_rows(Path(path), "clients")
    return _normalize_all(rows, lambda _index, raw: normalize_client(raw), "client", strict)


def _normalize_all(
    rows: list[dict[str, Any]],
    build: Callable[[int, dict[str, Any]], T],
    label: str,
    strict: bool,
) -> list[T]:
    records = []
    for index, raw in enumerate(rows):
        try:
            records.append(build(index, raw))
        except InvalidRecordError as exc:
            if strict:
                raise
            logger.warning("Skipping %s row %d: %s", label, index + 1, exc)
    logger.info("Loaded %d %s records (%d skipped)", len(records), label, len(rows) - len(records))
    return records


def _read_rows(path: Path, collection: str) -> list[dict[str, Any]]:
    if not path.exists():
        raise StorageError(f"Dataset file not found: {path}")

    if path.suffix.lower() == ".csv":
        return list(_read_csv(path))

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise StorageError(f"Dataset file {path} is not valid JSON: {exc}") from exc

    if isinstance(data, dict):
        data = data.get(collection, [])
    if not isinstance(data, list):
        raise StorageError(f"Dataset file {path} must hold a list of {collection}")
    return [row for row in data if isinstance(row, dict)]


def _read_csv(path: Path) -> Iterator[dict[str, Any]]:
    with path.open(newline="", encoding="utf-8-sig") as f:
        yield from csv.DictReader(f)

"""
Input Manager (CSV + GeoJSON)
Loads the landing records and the world outlines the scenes draw on.
"""
import csv
import json
import logging
import math
import os
import re
from typing import Any, Optional

import numpy as np

from meteoritestory.model.records import Boundary, Dataset, Record, as_dataset

logger = logging.getLogger(__name__)

_YEAR_RE = re.compile(r"\b(\d{4})\b")

REQUIRED_COLUMNS = ("name", "mass (g)", "year")


class LoadFailure(Exception):
    """A data source is missing or cannot be parsed. Fatal for the whole UI."""


def _parse_float(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def _parse_year(raw: Optional[str]) -> Optional[int]:
    """
    Accepts a bare year ("1880") or a date string such as
    "01/01/1880 12:00:00 AM" / "1880-01-01T00:00:00.000".
    """
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    match = _YEAR_RE.search(raw)
    if match:
        return int(match.group(1))
    return None


class IOManager:

    @staticmethod
    def record_from_row(row: dict[str, str]) -> Optional[Record]:
        """Coerce one CSV row. Returns None when year or a positive mass is missing."""
        mass = _parse_float(row.get("mass (g)"))
        year = _parse_year(row.get("year"))
        if year is None or mass is None or mass <= 0:
            return None
        return Record(
            name=(row.get("name") or "").strip(),
            mass=mass,
            year=year,
            lat=_parse_float(row.get("reclat")),
            lon=_parse_float(row.get("reclong")),
            recclass=(row.get("recclass") or "").strip(),
        )

    @staticmethod
    def load_records(filepath: str) -> Dataset:
        logger.info(f"Loading landing records from: {filepath}")
        if not os.path.exists(filepath):
            raise LoadFailure(f"Data file not found: {filepath}")

        records: list[Record] = []
        skipped = 0
        try:
            # utf-8-sig strips the BOM spreadsheet exports put before the first header
            with open(filepath, newline="", encoding="utf-8-sig") as f:
                reader = csv.DictReader(f)
                missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
                if missing:
                    raise LoadFailure(f"CSV header in {filepath} lacks {missing}: {reader.fieldnames}")
                for row in reader:
                    record = IOManager.record_from_row(row)
                    if record is None:
                        skipped += 1
                        continue
                    records.append(record)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise LoadFailure(f"Could not read {filepath}: {e}") from e

        if skipped:
            logger.warning(f"Skipped {skipped} rows without year or mass.")
        logger.info(f"Loaded {len(records)} records.")
        return as_dataset(records)

    @staticmethod
    def boundaries_from_geojson(payload: dict[str, Any]) -> list[Boundary]:
        if not isinstance(payload, dict) or payload.get("type") != "FeatureCollection":
            kind = payload.get("type") if isinstance(payload, dict) else type(payload).__name__
            raise LoadFailure(f"Expected a GeoJSON FeatureCollection, got {kind!r}")
        features = payload.get("features", [])
        if not isinstance(features, list):
            raise LoadFailure(f"GeoJSON 'features' must be a list, got {type(features).__name__}")

        boundaries: list[Boundary] = []
        for i, feature in enumerate(features):
            if not isinstance(feature, dict):
                raise LoadFailure(f"Feature {i} is not an object: {feature!r}")
            geometry = feature.get("geometry") or {}
            props = feature.get("properties") or {}
            name = str(props.get("name") or feature.get("id") or f"feature-{i}")

            match geometry.get("type"):
                case "Polygon":
                    polygons = [geometry["coordinates"]]
                case "MultiPolygon":
                    polygons = geometry["coordinates"]
                case None:
                    continue
                case other:
                    logger.warning(f"Ignoring unsupported geometry '{other}' in {name}.")
                    continue

            rings = [
                np.asarray(ring, dtype=np.float64).reshape(-1, 2)
                for polygon in polygons
                for ring in polygon
                if len(ring) >= 3
            ]
            if rings:
                boundaries.append(Boundary(name=name, rings=rings))
        return boundaries

    @staticmethod
    def load_boundaries(filepath: str) -> list[Boundary]:
        logger.info(f"Loading world outlines from: {filepath}")
        if not os.path.exists(filepath):
            raise LoadFailure(f"Boundary file not found: {filepath}")
        try:
            with open(filepath, encoding="utf-8-sig") as f:
                payload = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LoadFailure(f"Could not parse {filepath}: {e}") from e

        try:
            boundaries = IOManager.boundaries_from_geojson(payload)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise LoadFailure(f"Malformed GeoJSON in {filepath}: {e}") from e
        logger.info(f"Loaded {len(boundaries)} outlines.")
        return boundaries

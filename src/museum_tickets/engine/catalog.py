"""
Museum Catalog - Loads the static museum price table.

The table is read once from CSV configuration data and held in an
immutable, tuple-backed container. Nothing mutates it after load.
"""
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd

from ..config.settings import get_settings, Settings
from .models import Category, Museum

REQUIRED_COLUMNS = ['id', 'name', 'location'] + [c.value for c in Category]


class CatalogError(ValueError):
    """Raised when the museum table is malformed."""


class Catalog:
    """Read-only collection of museums, kept in file order."""

    def __init__(self, museums):
        self._museums = tuple(museums)
        self._by_id = {m.id: m for m in self._museums}
        if len(self._by_id) != len(self._museums):
            seen, dupes = set(), []
            for m in self._museums:
                if m.id in seen:
                    dupes.append(m.id)
                seen.add(m.id)
            raise CatalogError(f"Duplicate museum ids: {', '.join(dupes)}")

    def get(self, museum_id: str) -> Optional[Museum]:
        """Look up a museum by id. Returns None if unknown."""
        return self._by_id.get(str(museum_id).strip())

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(m.id for m in self._museums)

    def __iter__(self) -> Iterator[Museum]:
        return iter(self._museums)

    def __len__(self) -> int:
        return len(self._museums)

    def __contains__(self, museum_id) -> bool:
        return str(museum_id).strip() in self._by_id

    def to_frame(self) -> pd.DataFrame:
        """Tabular view of the catalog, one row per museum."""
        rows = []
        for m in self._museums:
            row = {'ID': m.id, 'Museum': m.name, 'Location': m.location}
            for c in Category:
                row[c.value.capitalize()] = float(m.prices[c])
            rows.append(row)
        return pd.DataFrame(rows)


def _parse_price(raw: str, museum_id: str, category: Category) -> Decimal:
    try:
        price = Decimal(raw.strip())
    except InvalidOperation:
        raise CatalogError(
            f"Invalid {category.value} price {raw!r} for museum {museum_id}"
        ) from None
    if not price.is_finite() or price < 0:
        raise CatalogError(
            f"{category.value} price for museum {museum_id} must be a non-negative amount, got {raw!r}"
        )
    return price


def load_catalog(path: Path) -> Catalog:
    """
    Load the museum catalog from CSV.

    Args:
        path: CSV with columns id, name, location, adult, child, senior, student

    Returns:
        Immutable Catalog in file order
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Museum catalog not found at {path}.")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    # Normalize headers and cells
    df.columns = [str(col).strip().lower() for col in df.columns]
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise CatalogError(f"Museum catalog {path.name} is missing columns: {', '.join(missing)}")
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    museums = []
    for _, row in df.iterrows():
        museum_id = row['id']
        if not museum_id:
            raise CatalogError(f"Museum catalog {path.name} has a row without an id")
        prices = {c: _parse_price(row[c.value], museum_id, c) for c in Category}
        museums.append(Museum(
            id=museum_id,
            name=row['name'] or museum_id,
            location=row['location'],
            prices=prices,
        ))

    return Catalog(museums)


@lru_cache(maxsize=None)
def _load_cached(path: str) -> Catalog:
    return load_catalog(Path(path))


def default_catalog(settings: Optional[Settings] = None) -> Catalog:
    """The configured catalog, loaded once per process."""
    settings = settings or get_settings()
    return _load_cached(str(settings.museum_catalog))

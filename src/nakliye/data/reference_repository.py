"""Location reference data loader: bundled JSON by default, CSV/Excel/JSON override files."""

from __future__ import annotations

import csv
import functools
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Optional

from openpyxl import load_workbook

from ..config import settings
from ..models.domain import Country, ReferenceData

BUNDLED_REFERENCE_FILE = Path(__file__).resolve().parent / "reference" / "locations_tr.json"

_TABLE_COLUMNS = {"Country", "City", "District"}


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _unique(values: Iterable[str], *, label: str) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values:
        cleaned = _clean(value)
        if not cleaned:
            continue
        if cleaned in seen:
            logging.warning(f"Skipping duplicate {label} '{cleaned}' in reference data")
            continue
        seen[cleaned] = None
    return tuple(seen)


def _freeze(
    countries: list[Country],
    cities: dict[str, Iterable[str]],
    districts: dict[str, dict[str, Iterable[str]]],
) -> ReferenceData:
    frozen_cities = {
        code: _unique(names, label=f"city of {code}") for code, names in cities.items()
    }
    frozen_districts: dict[str, MappingProxyType] = {}
    for code, by_city in districts.items():
        known_cities = set(frozen_cities.get(code, ()))
        per_city: dict[str, tuple[str, ...]] = {}
        for city, names in by_city.items():
            city_name = _clean(city)
            if city_name not in known_cities:
                raise ValueError(f"Districts listed for '{city_name}' which is not a city of '{code}'.")
            per_city[city_name] = _unique(names, label=f"district of {city_name}")
        frozen_districts[code] = MappingProxyType(per_city)
    return ReferenceData(
        countries=tuple(countries),
        cities_by_country=MappingProxyType({code: names for code, names in frozen_cities.items() if names}),
        districts_by_city=MappingProxyType(frozen_districts),
    )


def _load_from_json(path: Path) -> ReferenceData:
    with path.open(mode="r", encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, dict):
        raise ValueError(f"Reference file '{path}' must contain a JSON object.")
    missing_keys = {"countries", "cities"} - set(raw)
    if missing_keys:
        raise ValueError(f"Reference file missing keys: {', '.join(sorted(missing_keys))}")

    countries: list[Country] = []
    for entry in raw["countries"]:
        try:
            countries.append(Country(code=_clean(entry["code"]).upper(), name=_clean(entry["name"])))
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Invalid country entry in '{path}': {entry!r}") from exc

    cities = {_clean(code).upper(): names for code, names in raw["cities"].items()}
    districts = {
        _clean(code).upper(): by_city for code, by_city in (raw.get("districts") or {}).items()
    }
    return _freeze(countries, cities, districts)


def _iter_csv_rows(path: Path) -> Iterator[dict[str, Any]]:
    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"Reference file '{path}' is missing a header row.")
        missing_columns = _TABLE_COLUMNS - set(reader.fieldnames)
        if missing_columns:
            raise ValueError(f"Reference file missing columns: {', '.join(sorted(missing_columns))}")
        yield from reader


def _iter_workbook_rows(path: Path) -> Iterator[dict[str, Any]]:
    wb = load_workbook(path, data_only=True, read_only=True)
    try:
        rows = wb.active.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            raise ValueError(f"Reference workbook '{path}' is empty.")

        header_map = {name: idx for idx, name in enumerate(header) if name}
        missing_columns = _TABLE_COLUMNS - set(header_map)
        if missing_columns:
            raise ValueError(f"Reference workbook missing columns: {', '.join(sorted(missing_columns))}")

        for row in rows:
            yield {name: row[idx] if idx < len(row) else None for name, idx in header_map.items()}
    finally:
        wb.close()


def _load_from_table(rows: Iterable[dict[str, Any]]) -> ReferenceData:
    """Build reference data from Country/City/District rows (CountryName optional).

    A row with an empty City only registers the country, which then has no
    enumerated city list.
    """
    countries: dict[str, Country] = {}
    cities: dict[str, list[str]] = {}
    districts: dict[str, dict[str, list[str]]] = {}
    for row in rows:
        code = _clean(row.get("Country")).upper()
        if not code:
            continue
        if code not in countries:
            countries[code] = Country(code=code, name=_clean(row.get("CountryName")) or code)
        city = _clean(row.get("City"))
        if not city:
            continue
        city_list = cities.setdefault(code, [])
        if city not in city_list:
            city_list.append(city)
        district = _clean(row.get("District"))
        if district:
            districts.setdefault(code, {}).setdefault(city, []).append(district)
    return _freeze(list(countries.values()), cities, districts)


@functools.lru_cache(maxsize=1)
def load_reference_data(source: Optional[Path] = None) -> ReferenceData:
    """Load country/city/district tables from the configured file or the bundled defaults."""

    path = source or settings.reference_data_file or BUNDLED_REFERENCE_FILE
    if not path.exists():
        raise FileNotFoundError(f"Reference data file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        data = _load_from_json(path)
    elif suffix == ".csv":
        data = _load_from_table(_iter_csv_rows(path))
    elif suffix in {".xlsx", ".xlsm"}:
        data = _load_from_table(_iter_workbook_rows(path))
    else:
        raise ValueError(f"Unsupported reference data format '{suffix}' for {path}")

    district_lists = sum(len(by_city) for by_city in data.districts_by_city.values())
    logging.info(
        f"Loaded location reference data from {path.name}: {len(data.countries)} countries, "
        f"{sum(len(names) for names in data.cities_by_country.values())} enumerated cities, "
        f"{district_lists} district lists"
    )
    return data

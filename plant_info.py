"""
plant_info.py — Reference information about plant species.

Loads the static PlantInfo.csv dataset shipped with the application into
an in-memory index keyed by record id. The dataset is best-effort:
- malformed rows are skipped (and logged)
- a missing or unreadable file leaves the index empty

Placed plants join to the index through Plant.info_id.
"""

import logging
import os
from typing import Optional, List, Dict, Any, Iterable, Sequence, Union

from models import PlantInfoRecord, derive_info_id


logger = logging.getLogger(__name__)

NO_INFO_MESSAGE = "No information available."

SCHEMA_FULL = 'full'
SCHEMA_LEGACY = 'legacy'

# Column order of the canonical 14-column dataset
FULL_COLUMNS = (
    'id',
    'name',
    'scientific_name',
    'origin_area',
    'family',
    'light_requirement',
    'temperature_requirement',
    'water_requirement',
    'lifecycle_kind',
    'seed_to_seedling_days',
    'seedling_to_growth_days',
    'growth_to_flower_days',
    'flower_to_dormant_or_death_days',
    'dormant_to_growth_days',
)

MIN_COLUMNS = {
    SCHEMA_FULL: len(FULL_COLUMNS),
    SCHEMA_LEGACY: 2,
}


def get_plant_info_path() -> str:
    """Get the reference dataset path from environment or default."""
    default_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data', 'PlantInfo.csv')
    return os.environ.get('PLANT_INFO_PATH', default_path)


# ========================================
# Row Parsing
# ========================================

RawRow = Union[str, Sequence[str]]


def _split_row(row: RawRow, schema: str) -> List[str]:
    """
    Split a raw row into fields.

    Plain comma splitting, no quoting. In the legacy schema only the first
    comma separates the id from the description.
    """
    if isinstance(row, str):
        line = row.rstrip('\r\n')
        if schema == SCHEMA_LEGACY:
            return line.split(',', 1)
        return line.split(',')
    fields = [str(v) for v in row]
    if schema == SCHEMA_LEGACY and len(fields) > 2:
        return [fields[0], ','.join(fields[1:])]
    return fields


def _is_blank(row: RawRow) -> bool:
    if isinstance(row, str):
        return not row.strip()
    return not any(str(v).strip() for v in row)


def parse_row(fields: List[str], schema: str = SCHEMA_FULL) -> Optional[PlantInfoRecord]:
    """Build a record from split fields, or None when the row is too short."""
    if len(fields) < MIN_COLUMNS[schema]:
        return None

    if schema == SCHEMA_LEGACY:
        record_id = fields[0].strip()
        return PlantInfoRecord(id=record_id, name=record_id, description=fields[1].strip())

    # Extra trailing columns are ignored
    values = {col: fields[i].strip() for i, col in enumerate(FULL_COLUMNS)}
    return PlantInfoRecord(**values)


# ========================================
# Index
# ========================================

class PlantInfoIndex:
    """Read-only mapping of reference records keyed by id."""

    def __init__(self, records: Optional[Dict[str, PlantInfoRecord]] = None):
        self._records: Dict[str, PlantInfoRecord] = dict(records or {})

    @classmethod
    def load(cls, raw_rows: Iterable[RawRow], schema: str = SCHEMA_FULL) -> 'PlantInfoIndex':
        """
        Parse a table whose first row is a header.

        Rows may be text lines or already split sequences of fields.
        Rows with too few columns are skipped with a warning; blank rows
        are skipped silently. A later row with a duplicate id replaces the
        earlier one.
        """
        if schema not in MIN_COLUMNS:
            raise ValueError(f"Unknown dataset schema: {schema!r}")

        records: Dict[str, PlantInfoRecord] = {}
        skipped = 0
        rows = iter(raw_rows)
        next(rows, None)  # header

        for line_no, row in enumerate(rows, start=2):
            if _is_blank(row):
                continue
            fields = _split_row(row, schema)
            record = parse_row(fields, schema)
            if record is None or not record.id:
                skipped += 1
                logger.warning(
                    "Skipping plant info row %d (%d columns, need %d and a non-empty id)",
                    line_no, len(fields), MIN_COLUMNS[schema],
                )
                continue
            if record.id in records:
                logger.info("Duplicate plant info id %r on row %d replaces earlier row", record.id, line_no)
            records[record.id] = record

        if skipped:
            logger.info("Loaded %d plant info records, skipped %d rows", len(records), skipped)
        return cls(records)

    @classmethod
    def from_csv(cls, path: Optional[str] = None, schema: str = SCHEMA_FULL) -> 'PlantInfoIndex':
        """
        Load the index from a UTF-8 CSV file.

        A missing or unreadable file gives an empty index; editing does not
        depend on reference data.
        """
        path = path or get_plant_info_path()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Plant info dataset unavailable at %s: %s", path, e)
            return cls()
        return cls.load(lines, schema=schema)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: str) -> bool:
        return record_id in self._records

    def ids(self) -> List[str]:
        return list(self._records)

    def lookup(self, record_id: str) -> Optional[PlantInfoRecord]:
        """Return the record for an id, or None if unknown."""
        return self._records.get(record_id)

    def lookup_by_name(self, name: str) -> Optional[PlantInfoRecord]:
        """Look up a species by display name ("Olive" -> id "olive")."""
        return self.lookup(derive_info_id(name))

    def description(self, record_id: str) -> str:
        record = self.lookup(record_id)
        if record is None or not record.description:
            return NO_INFO_MESSAGE
        return record.description


# ========================================
# Info Cards
# ========================================

def build_info_card(name: str, info_id: str, record: Optional[PlantInfoRecord]) -> Dict[str, Any]:
    """
    Build the display payload for a plant's info card.

    Without a record the card only shows the plant name, an "ID: <id>"
    line and NO_INFO_MESSAGE.
    """
    if record is None:
        return {
            'found': False,
            'name': name,
            'id_line': f"ID: {info_id}",
            'message': NO_INFO_MESSAGE,
        }

    if record.description and not record.scientific_name:
        # Legacy record: free-text description only
        return {
            'found': True,
            'name': name,
            'id_line': f"ID: {info_id}",
            'message': record.description,
        }

    stages = [
        {'label': 'Seed to seedling', 'days': record.seed_to_seedling_days},
        {'label': 'Seedling to growth', 'days': record.seedling_to_growth_days},
        {'label': 'Growth to flower', 'days': record.growth_to_flower_days},
        {
            'label': 'Flower to dormant' if record.is_perennial else 'Flower to death',
            'days': record.flower_to_dormant_or_death_days,
        },
    ]
    if record.is_perennial:
        stages.append({'label': 'Dormant to growth', 'days': record.dormant_to_growth_days})

    return {
        'found': True,
        'name': record.name or name,
        'id_line': f"ID: {info_id}",
        'scientific_name': record.scientific_name,
        'origin_area': record.origin_area,
        'family': record.family,
        'light': record.light_requirement,
        'temperature': record.temperature_requirement,
        'water': record.water_requirement,
        'lifecycle': record.lifecycle_kind,
        'stages': stages,
    }

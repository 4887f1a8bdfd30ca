"""
plant_catalog.py — Fixed list of plant species offered in the picker.
"""

from typing import List

from models import Plant


PLANT_OPTIONS = (
    'Wheat',
    'Barley',
    'Grape',
    'Fig',
    'Pomegranate',
    'Olive',
    'Date',
)


def list_catalog(filter_text: str = "") -> List[str]:
    """
    Return catalog names containing filter_text, case-insensitive.

    An empty filter returns every option. Catalog order is preserved.
    """
    if not filter_text:
        return list(PLANT_OPTIONS)
    needle = filter_text.lower()
    return [name for name in PLANT_OPTIONS if needle in name.lower()]


def create_plant(name: str) -> Plant:
    """Build a fresh Plant for a catalog entry."""
    if name not in PLANT_OPTIONS:
        raise ValueError(f"Unknown plant: {name!r}")
    return Plant(name=name)

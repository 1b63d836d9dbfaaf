# services/health_engine/score_ranges.py
# Lookups over the per-category score range table.

import copy
from typing import Any, Dict, List, Optional

from .definitions import CATEGORY_RANGES


def get_category_range(category_key: str) -> Optional[Dict[str, Any]]:
    """Returns a copy of the range configuration for a category, or None if unknown."""
    category_range = CATEGORY_RANGES.get(category_key)
    return copy.deepcopy(category_range) if category_range is not None else None


def get_category_max_score(category_key: str) -> float:
    """Maximum attainable raw score for a category (0 for unknown keys)."""
    category_range = CATEGORY_RANGES.get(category_key)
    return category_range['maxPossible'] if category_range else 0


def get_category_label(category_key: str) -> str:
    category_range = CATEGORY_RANGES.get(category_key)
    return category_range['label'] if category_range else category_key


def get_category_thresholds(category_key: str) -> Optional[Dict[str, Dict[str, float]]]:
    """
    Derives the low/medium/high bands for a category.

    Bands are inclusive on their upper bound only: a raw score equal to
    `lowRangeTop` is low, one point above it is medium. The `min` values are
    informational (integer scores), classification only looks at `max`.
    """
    category_range = CATEGORY_RANGES.get(category_key)
    if not category_range:
        return None

    return {
        'low': {
            'min': category_range['formLow'],
            'max': category_range['lowRangeTop'],
        },
        'medium': {
            'min': category_range['lowRangeTop'] + 1,
            'max': category_range['medRangeTop'],
        },
        'high': {
            'min': category_range['medRangeTop'] + 1,
            'max': category_range['maxPossible'],
        },
    }


def get_categories_for_section(section_number: Any) -> List[str]:
    """All category keys a section number contributes to (possibly more than one)."""
    return [
        category_key
        for category_key, category_range in CATEGORY_RANGES.items()
        if normalize_section_number(section_number) in category_range['sections']
    ]


def normalize_section_number(section_number: Any) -> Any:
    """
    Canonical (int) form of a section number.

    Stored score maps come back from JSON with string keys ('2'), so int-like
    strings and integral floats are converted. Anything else is returned as is.
    """
    if isinstance(section_number, bool):
        return section_number
    if isinstance(section_number, int):
        return section_number
    if isinstance(section_number, float) and section_number.is_integer():
        return int(section_number)
    if isinstance(section_number, str):
        text = section_number.strip()
        if text.lstrip('-').isdigit():
            return int(text)
    return section_number

# services/health_engine/aggregator.py
# Maps per-section results onto the five business-health categories.

import copy
import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from .definitions import CATEGORY_KEYS, CATEGORY_RANGES
from .score_ranges import normalize_section_number

logger = logging.getLogger(__name__)


def empty_category_scores() -> Dict[str, Dict[str, Any]]:
    """A fresh category-score map with every category at {sections: {}, total: 0}."""
    return {category_key: {'sections': {}, 'total': 0} for category_key in CATEGORY_KEYS}


def section_number_of(section_result: Mapping[str, Any]) -> Any:
    """Section number a result is tagged with ('sectionOrder', else 'sectionNumber')."""
    number = section_result.get('sectionOrder')
    if number is None:
        number = section_result.get('sectionNumber')
    return normalize_section_number(number)


def apply_section_score(
    computed_scores: Optional[Mapping[str, Any]],
    section_number: Any,
    section_score: Optional[float],
) -> Dict[str, Dict[str, Any]]:
    """
    Returns a new category-score map with one section's score applied.

    Every category listing `section_number` gets `sections[section_number]`
    overwritten and its `total` recomputed from `sections`. The input map
    is left untouched. Section keys are normalized to ints, so a map read
    back from JSON ("2" keys) is overwritten in place.
    """
    section_number = normalize_section_number(section_number)
    updated = copy.deepcopy(dict(computed_scores)) if computed_scores else {}
    for category_key in CATEGORY_KEYS:
        if not isinstance(updated.get(category_key), dict):
            updated[category_key] = {'sections': {}, 'total': 0}

    for category_key, category_range in CATEGORY_RANGES.items():
        if section_number not in category_range['sections']:
            continue
        category = updated[category_key]
        sections = {
            normalize_section_number(key): value
            for key, value in (category.get('sections') or {}).items()
        }
        sections[section_number] = section_score or 0
        category['sections'] = sections
        category['total'] = sum((value or 0) for value in sections.values())

    return updated


def aggregate(section_results: Iterable[Mapping[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    Aggregates section results into per-category raw totals.

    Duplicate results for the same section number are not rejected; the
    last one wins. A section scoring zero still appears in `sections`.
    """
    computed_scores = empty_category_scores()
    for section_result in section_results:
        section_number = section_number_of(section_result)
        if section_number is None:
            logger.debug(f"Section result {section_result.get('sectionName')!r} has no section number; skipped")
            continue
        computed_scores = apply_section_score(
            computed_scores, section_number, section_result.get('sectionScore')
        )
    return computed_scores

# services/health_engine/scorer.py
# Converts raw category totals into percentages and health levels.

import copy
import logging
import math
from typing import Any, Dict, List, Mapping, Optional

from .definitions import (
    HEALTH_LEVEL_LABELS,
    OVERALL_HIGH_THRESHOLD,
    OVERALL_MEDIUM_THRESHOLD,
)
from .score_ranges import get_category_label, get_category_max_score, get_category_thresholds

logger = logging.getLogger(__name__)

OVERALL_HEALTH_KEY = 'overallHealth'

# Sort order for priority action items; unknown levels go last
LEVEL_ORDER = {'low': 0, 'medium': 1, 'high': 2}


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def round_one_decimal(value: float) -> float:
    # Half-up (toward +inf), matching the stored reports
    return math.floor(value * 10 + 0.5) / 10


def round_whole(value: float) -> int:
    return int(math.floor(value + 0.5))


# --- Category analytics ---

def normalize_score(raw_score: float, max_possible: float) -> float:
    """Percentage of max_possible, clamped to [0, 100]; 0 when max_possible is 0/None."""
    if not max_possible:
        return 0
    percentage = (raw_score / max_possible) * 100
    return max(0, min(100, percentage))


def determine_health_level(category_key: str, raw_score: float) -> str:
    """Classifies a raw category score as 'low', 'medium' or 'high'."""
    thresholds = get_category_thresholds(category_key)
    if not thresholds:
        logger.debug(f"No thresholds for category {category_key!r}; defaulting to low")
        return 'low'

    if raw_score <= thresholds['low']['max']:
        return 'low'
    elif raw_score <= thresholds['medium']['max']:
        return 'medium'
    else:
        return 'high'


def get_health_level_label(level: str) -> Dict[str, str]:
    """Display labels and colour identifiers for a health level (low for unknown levels)."""
    return copy.deepcopy(HEALTH_LEVEL_LABELS.get(level, HEALTH_LEVEL_LABELS['low']))


def calculate_category_analytics(category_key: str, raw_score: float) -> Dict[str, Any]:
    if not is_number(raw_score):
        logger.debug(f"Non-numeric raw score {raw_score!r} for {category_key!r}; using 0")
        raw_score = 0
    max_possible = get_category_max_score(category_key)
    health_level = determine_health_level(category_key, raw_score)
    percentage = normalize_score(raw_score, max_possible)

    return {
        'rawScore': raw_score,
        'maxPossible': max_possible,
        'percentage': round_one_decimal(percentage),
        'healthLevel': health_level,
        'healthLabel': get_health_level_label(health_level),
    }


# --- Overall health ---

def determine_overall_health_level(percentage: float) -> str:
    """Fixed 70/40 cutoffs, independent of the per-category bands."""
    if percentage >= OVERALL_HIGH_THRESHOLD:
        return 'high'
    elif percentage >= OVERALL_MEDIUM_THRESHOLD:
        return 'medium'
    return 'low'


def calculate_overall_health(category_scores: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Unweighted mean of the category percentages.

    Entries without a numeric percentage are left out of the mean rather
    than counted as zero.
    """
    total_percentage = 0.0
    valid_categories = 0

    for category_key, analytics in category_scores.items():
        if category_key == OVERALL_HEALTH_KEY:
            continue
        if isinstance(analytics, Mapping) and is_number(analytics.get('percentage')):
            total_percentage += analytics['percentage']
            valid_categories += 1

    overall_percentage = total_percentage / valid_categories if valid_categories > 0 else 0
    # Level is decided before rounding
    overall_level = determine_overall_health_level(overall_percentage)

    return {
        'percentage': round_one_decimal(overall_percentage),
        'healthLevel': overall_level,
        'healthLabel': get_health_level_label(overall_level),
        'categoryCount': valid_categories,
    }


def process_computed_scores(computed_scores: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Enhances stored category scores with analytics and adds `overallHealth`.

    Categories keep their stored keys (`sections`, `total`) and gain
    `rawScore`, `maxPossible`, `percentage`, `healthLevel`, `healthLabel`.
    Entries without a numeric `total` are dropped. Returns None for no input.
    """
    if computed_scores is None:
        return None

    enhanced: Dict[str, Any] = {}
    for category_key, category_data in computed_scores.items():
        if isinstance(category_data, Mapping) and is_number(category_data.get('total')):
            enhanced[category_key] = {
                **copy.deepcopy(dict(category_data)),
                **calculate_category_analytics(category_key, category_data['total']),
            }

    enhanced[OVERALL_HEALTH_KEY] = calculate_overall_health(enhanced)
    return enhanced


def category_entries(enhanced_scores: Optional[Mapping[str, Any]]) -> List[tuple]:
    """(category_key, analytics) pairs of an enhanced map, without overallHealth."""
    if not enhanced_scores:
        return []
    return [
        (category_key, analytics)
        for category_key, analytics in enhanced_scores.items()
        if category_key != OVERALL_HEALTH_KEY
    ]


def get_priority_action_items(enhanced_scores: Optional[Mapping[str, Any]], limit: int = 3) -> List[Dict[str, Any]]:
    """Categories ordered lowest health first, capped at `limit`."""
    entries = [(key, analytics) for key, analytics in category_entries(enhanced_scores) if analytics]
    entries.sort(key=lambda item: LEVEL_ORDER.get(item[1].get('healthLevel'), len(LEVEL_ORDER)))

    action_items = []
    for category_key, analytics in entries[:limit]:
        action_items.append({
            'category': category_key,
            'categoryLabel': get_category_label(category_key),
            'healthLevel': analytics.get('healthLevel'),
            'score': analytics.get('percentage'),
            'priority': len(action_items) + 1,
        })
    return action_items


# --- Stored score enhancement ---

def is_enhanced(computed_scores: Optional[Mapping[str, Any]]) -> bool:
    """True when the first stored category already carries a percentage."""
    if not computed_scores:
        return False
    first_category = next(iter(computed_scores.values()))
    return isinstance(first_category, Mapping) and 'percentage' in first_category


def enhance_user_scores(computed_scores: Optional[Mapping[str, Any]], force: bool = False) -> Optional[Dict[str, Any]]:
    """
    Builds the update payload for a stored user record.

    Returns {'computedScores': ..., 'overallHealth': ...}, or None when
    there is nothing to enhance or the scores were enhanced already.
    """
    if not computed_scores:
        return None
    if not force and is_enhanced(computed_scores):
        logger.debug("Stored scores already carry analytics; skipping")
        return None

    enhanced = process_computed_scores(computed_scores)
    updated_scores = copy.deepcopy(dict(computed_scores))
    for category_key, analytics in category_entries(enhanced):
        if category_key in updated_scores:
            updated_scores[category_key] = {**updated_scores[category_key], **analytics}

    return {
        'computedScores': updated_scores,
        OVERALL_HEALTH_KEY: enhanced[OVERALL_HEALTH_KEY],
    }

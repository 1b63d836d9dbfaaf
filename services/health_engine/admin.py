# services/health_engine/admin.py
# Cohort-level aggregations for the admin analytics dashboard.

import logging
import statistics
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .definitions import CATEGORY_KEYS, HEALTH_LEVELS
from .scorer import (
    OVERALL_HEALTH_KEY,
    is_number,
    process_computed_scores,
    round_one_decimal,
    round_whole,
)
from .score_ranges import get_category_label, get_category_max_score

logger = logging.getLogger(__name__)


def _has_scores(user: Mapping[str, Any]) -> bool:
    return bool(user.get('computedScores'))


def aggregate_user_scores(users: Optional[Sequence[Mapping[str, Any]]]) -> Dict[str, Any]:
    """Category totals/averages and overall health level counts across users."""
    if not users:
        return {
            'categoryTotals': {},
            'categoryAverages': {},
            'healthLevelDistribution': {level: 0 for level in HEALTH_LEVELS},
            'totalUsers': 0,
            'usersWithScores': 0,
        }

    category_values: Dict[str, List[float]] = {}
    health_level_counts = {level: 0 for level in HEALTH_LEVELS}
    users_with_scores = 0

    for user in users:
        if not _has_scores(user):
            continue
        users_with_scores += 1

        for category_key, data in user['computedScores'].items():
            if category_key == OVERALL_HEALTH_KEY or not isinstance(data, Mapping):
                continue
            if is_number(data.get('total')):
                category_values.setdefault(category_key, []).append(data['total'])

        overall = user.get(OVERALL_HEALTH_KEY) or {}
        if overall.get('healthLevel') in health_level_counts:
            health_level_counts[overall['healthLevel']] += 1

    category_totals = {key: sum(values) for key, values in category_values.items()}
    category_averages = {
        key: {
            'total': category_totals[key],
            'average': statistics.mean(values) if values else 0,
            'count': len(values),
        }
        for key, values in category_values.items()
    }

    return {
        'categoryTotals': category_totals,
        'categoryAverages': category_averages,
        'healthLevelDistribution': health_level_counts,
        'totalUsers': len(users),
        'usersWithScores': users_with_scores,
    }


def has_completed_assessment(user: Mapping[str, Any]) -> bool:
    """All five categories carry a stored total."""
    computed_scores = user.get('computedScores') or {}
    return all(
        isinstance(computed_scores.get(category_key), Mapping)
        and computed_scores[category_key].get('total') is not None
        for category_key in CATEGORY_KEYS
    )


def calculate_completion_rate(users: Optional[Sequence[Mapping[str, Any]]], total_sections: Optional[int]) -> int:
    """Whole-number percentage of users with every category scored."""
    if not users or not total_sections:
        return 0
    completed = sum(1 for user in users if has_completed_assessment(user))
    return round_whole(completed / len(users) * 100)


def get_health_level_distribution(health_level_counts: Mapping[str, int]) -> Dict[str, Dict[str, int]]:
    total = sum(health_level_counts.values())
    if total == 0:
        return {level: {'count': 0, 'percentage': 0} for level in HEALTH_LEVELS}

    return {
        level: {
            'count': health_level_counts.get(level, 0),
            'percentage': round_whole(health_level_counts.get(level, 0) / total * 100),
        }
        for level in HEALTH_LEVELS
    }


def summarize_category_averages(category_averages: Mapping[str, Mapping[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Average raw score per category, also expressed against the category maximum."""
    summary = {}
    for category_key, data in category_averages.items():
        max_possible = get_category_max_score(category_key)
        average = data.get('average') or 0
        average_percentage = average / max_possible * 100 if max_possible > 0 else 0
        summary[category_key] = {
            'label': get_category_label(category_key),
            'averageScore': round_one_decimal(average),
            'averagePercentage': round_one_decimal(average_percentage),
            'maxPossible': max_possible,
            'count': data.get('count', 0),
        }
    return summary


def calculate_category_trends(users: Sequence[Mapping[str, Any]]) -> Dict[str, Dict[str, int]]:
    """Number of users at each health level, per category."""
    trends = {category_key: {level: 0 for level in HEALTH_LEVELS} for category_key in CATEGORY_KEYS}
    for user in users:
        computed_scores = user.get('computedScores') or {}
        for category_key in CATEGORY_KEYS:
            category_data = computed_scores.get(category_key)
            if not isinstance(category_data, Mapping) or category_data.get('total') is None:
                continue
            processed = process_computed_scores({category_key: category_data})
            level = (processed.get(category_key) or {}).get('healthLevel')
            if level in trends[category_key]:
                trends[category_key][level] += 1
    return trends


def find_low_health_areas(category_trends: Mapping[str, Mapping[str, int]], threshold: float = 50) -> List[Dict[str, Any]]:
    """Categories where more than `threshold` percent of scored users are low."""
    low_areas = []
    for category_key, levels in category_trends.items():
        total = sum(levels.get(level, 0) for level in HEALTH_LEVELS)
        if total == 0:
            continue
        low_percentage = levels.get('low', 0) / total * 100
        if low_percentage > threshold:
            low_areas.append({
                'category': get_category_label(category_key),
                'lowPercentage': round_whole(low_percentage),
                'totalUsers': total,
            })
    return low_areas


def build_dashboard_summary(users: Sequence[Mapping[str, Any]], total_sections: int) -> Dict[str, Any]:
    """Everything the analytics dashboard shows, in one pass over the users."""
    aggregated = aggregate_user_scores(users)

    overall_percentages = [
        user[OVERALL_HEALTH_KEY]['percentage']
        for user in users
        if isinstance(user.get(OVERALL_HEALTH_KEY), Mapping)
        and is_number(user[OVERALL_HEALTH_KEY].get('percentage'))
    ]
    average_overall = statistics.mean(overall_percentages) if overall_percentages else 0
    category_trends = calculate_category_trends(users)

    summary = {
        'totalUsers': aggregated['totalUsers'],
        'usersWithScores': aggregated['usersWithScores'],
        'completionRate': calculate_completion_rate(users, total_sections),
        'averageOverallHealth': round_one_decimal(average_overall),
        'healthLevelDistribution': get_health_level_distribution(aggregated['healthLevelDistribution']),
        'categoryAverages': summarize_category_averages(aggregated['categoryAverages']),
        'categoryTrends': category_trends,
        'lowHealthAreas': find_low_health_areas(category_trends),
    }
    logger.debug(f"Dashboard summary built for {summary['totalUsers']} users")
    return summary

# services/health_engine/results_generator.py
# Selects narrative messages and resources for the report from category health levels.

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional

from .definitions import (
    DEFAULT_HEALTH_BUCKET,
    HEALTH_BUCKETS,
    REPORT_CONTENT,
    UNKNOWN_CATEGORY_REPORT,
)
from .scorer import category_entries

logger = logging.getLogger(__name__)

# Action items only show the first two resources of a category's report
ACTION_ITEM_RESOURCE_LIMIT = 2


class ReportContentSelector:
    """
    Report content lookups over one resolved content table.

    The table is `{category_key: {health_bucket: {label, message, resources}}}`.
    Overrides are resolved before construction (see loader.resolve_report_content);
    the selector never loads or mutates content itself.
    """

    def __init__(self, content: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self.content = copy.deepcopy(dict(content if content is not None else REPORT_CONTENT))

    def get_category_report(self, category_key: str, health_level: Optional[str]) -> Dict[str, Any]:
        """
        Report entry for a category at a health level.

        Unknown categories get a generic stub; unknown health levels fall back
        to the needsTweaking bucket.
        """
        bucket = HEALTH_BUCKETS.get(health_level, DEFAULT_HEALTH_BUCKET)
        category = self.content.get(category_key)

        if not category:
            logger.debug(f"No report content for category {category_key!r}")
            return copy.deepcopy(UNKNOWN_CATEGORY_REPORT)

        entry = category.get(bucket) or category.get(DEFAULT_HEALTH_BUCKET)
        if not entry:
            logger.warning(f"Report content for {category_key!r} has neither {bucket!r} nor {DEFAULT_HEALTH_BUCKET!r}")
            return copy.deepcopy(UNKNOWN_CATEGORY_REPORT)
        return copy.deepcopy(dict(entry))

    def generate_action_items(self, enhanced_scores: Optional[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        """One item per low-health category, carrying its message and top two resources."""
        action_items = []
        for category_key, analytics in category_entries(enhanced_scores):
            if not analytics or analytics.get('healthLevel') != 'low':
                continue
            report = self.get_category_report(category_key, 'low')
            health_label = analytics.get('healthLabel') or {}
            action_items.append({
                'category': category_key,
                'categoryLabel': health_label.get('label') or category_key,
                'priority': 'high',
                'message': report['message'],
                'resources': report['resources'][:ACTION_ITEM_RESOURCE_LIMIT],
            })
        return action_items

    def get_recommended_resources(self, enhanced_scores: Optional[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        """All resources for every category at its current level, de-duplicated by title (first wins)."""
        resources: Dict[str, Dict[str, Any]] = {}
        for category_key, analytics in category_entries(enhanced_scores):
            if not analytics:
                continue
            report = self.get_category_report(category_key, analytics.get('healthLevel'))
            for resource in report['resources']:
                if resource['title'] not in resources:
                    resources[resource['title']] = resource
        return list(resources.values())

    def get_category_reports(self, enhanced_scores: Optional[Mapping[str, Any]]) -> Dict[str, Dict[str, Any]]:
        """Report entry per category, keyed like the enhanced scores."""
        return {
            category_key: self.get_category_report(category_key, analytics.get('healthLevel'))
            for category_key, analytics in category_entries(enhanced_scores)
            if analytics
        }


# --- Module-level API over the default content table ---

default_selector = ReportContentSelector()


def get_category_report(category_key: str, health_level: Optional[str]) -> Dict[str, Any]:
    return default_selector.get_category_report(category_key, health_level)


def generate_action_items(enhanced_scores: Optional[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return default_selector.generate_action_items(enhanced_scores)


def get_recommended_resources(enhanced_scores: Optional[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return default_selector.get_recommended_resources(enhanced_scores)

# services/health_engine/loader.py
# Loads and validates YAML overrides for report content and assessment sections.

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .definitions import CATEGORY_KEYS, REPORT_CONTENT
from .models import AssessmentDefinition, AssessmentSection, ReportContentConfig

logger = logging.getLogger(__name__)


class ContentValidationError(ValueError):
    """Custom exception for content/section validation errors not covered by Pydantic."""
    pass


def _read_yaml(file_path: str) -> Any:
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ContentValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise ContentValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise ContentValidationError(f"YAML file is empty or invalid: {file_path}")
    return data


# --- Report content ---

def load_report_content_data(data: Dict[str, Any]) -> Dict[str, Dict[str, Dict[str, Any]]]:
    """
    Validates a raw report-content override and returns it as plain dicts.

    Raises:
        ValidationError: schema problems (missing message, bad bucket name, ...).
        ContentValidationError: unknown category keys.
    """
    config = ReportContentConfig.model_validate(data)

    unknown = sorted(set(config.categories) - set(CATEGORY_KEYS))
    if unknown:
        raise ContentValidationError(f"Unknown category keys in report content: {unknown}")

    return {
        category_key: {bucket: entry.model_dump() for bucket, entry in buckets.items()}
        for category_key, buckets in config.categories.items()
    }


def resolve_report_content(
    override: Optional[Mapping[str, Mapping[str, Any]]] = None,
    base: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> Dict[str, Dict[str, Dict[str, Any]]]:
    """Merges an override over a copy of the base table, one (category, bucket) entry at a time."""
    resolved = copy.deepcopy(dict(base if base is not None else REPORT_CONTENT))
    for category_key, buckets in (override or {}).items():
        category = resolved.setdefault(category_key, {})
        for bucket, entry in buckets.items():
            category[bucket] = copy.deepcopy(dict(entry))
    return resolved


def load_report_content_from_file(file_path: str) -> Dict[str, Dict[str, Dict[str, Any]]]:
    """Loads an override file and returns the fully resolved report content table."""
    override = load_report_content_data(_read_yaml(file_path))
    logger.info(
        f"Loaded report content override from {file_path}",
        extra={"categories": sorted(override)},
    )
    return resolve_report_content(override)


# --- Assessment sections ---

def load_assessment_sections_data(data: Dict[str, Any]) -> List[AssessmentSection]:
    """
    Validates raw section definitions and performs additional custom validations.
    Option labels are allowed to repeat within a question.
    """
    definition = AssessmentDefinition.model_validate(data)

    orders = set()
    for section in definition.sections:
        if section.order in orders:
            raise ContentValidationError(f"Duplicate section order found: {section.order}")
        orders.add(section.order)

        question_ids = set()
        for question in section.questions:
            if question.id in question_ids:
                raise ContentValidationError(f"Duplicate question ID '{question.id}' in section '{section.title}'")
            question_ids.add(question.id)

    return sorted(definition.sections, key=lambda section: section.order)


def load_assessment_sections_from_file(file_path: str) -> List[Dict[str, Any]]:
    """Loads section definitions from YAML as plain dicts, ordered by section number."""
    sections = load_assessment_sections_data(_read_yaml(file_path))
    logger.info(f"Loaded {len(sections)} assessment sections from {file_path}")
    return [section.model_dump() for section in sections]

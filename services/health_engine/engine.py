import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from services.core.config import HealthEngineSettings, get_settings
from services.core.logging_config import setup_logging

from .aggregator import aggregate, apply_section_score
from .generator import AssessmentDataGenerator
from .loader import load_assessment_sections_from_file, load_report_content_from_file
from .resolver import build_section_result
from .results_generator import ReportContentSelector
from .scorer import OVERALL_HEALTH_KEY, get_priority_action_items, process_computed_scores

logger = logging.getLogger(__name__)


class HealthEngine:
    """
    Wires settings, report content and the scoring functions together.

    Configuration problems (missing or invalid override files) raise at
    construction time. Once built, scoring and report calls never raise.
    """

    def __init__(
        self,
        settings: Optional[HealthEngineSettings] = None,
        report_content: Optional[Mapping[str, Mapping[str, Any]]] = None,
        sections: Optional[List[Mapping[str, Any]]] = None,
        configure_logging: bool = False,
    ):
        """
        Args:
            settings: Engine settings; read from the environment when omitted.
            report_content: Fully resolved report content table. When omitted,
                the override file from settings (if any) is merged over the defaults.
            sections: Assessment section definitions; loaded from
                settings.assessment_sections_path when omitted.
            configure_logging: Install the JSON log handler at settings.log_level.
        """
        self.settings = settings or get_settings()
        if configure_logging:
            setup_logging(self.settings.log_level)

        if report_content is None and self.settings.report_content_path:
            report_content = load_report_content_from_file(self.settings.report_content_path)
        self.selector = ReportContentSelector(report_content)

        if sections is None and self.settings.assessment_sections_path:
            sections = load_assessment_sections_from_file(self.settings.assessment_sections_path)
        self.sections = list(sections or [])
        self._sections_by_order = {section.get('order'): section for section in self.sections}

    def get_section(self, section_number: Any) -> Optional[Mapping[str, Any]]:
        return self._sections_by_order.get(section_number)

    # --- Submission ---

    def submit_section(
        self,
        user_id: Any,
        section: Mapping[str, Any],
        selections: Mapping[str, Any],
        computed_scores: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> Dict[str, Any]:
        """
        Scores one submitted (or admin-edited) section and folds it into the
        user's stored category scores.

        Returns:
            {'sectionResult': full SectionResult, 'computedScores': updated map}
        """
        section_result = build_section_result(user_id, section, selections, **extra)
        updated_scores = apply_section_score(
            computed_scores, section_result['sectionOrder'], section_result['sectionScore']
        )
        logger.debug(
            f"Section {section_result['sectionName']!r} scored {section_result['sectionScore']} for user {user_id}"
        )
        return {'sectionResult': section_result, 'computedScores': updated_scores}

    # --- Scoring and reports ---

    def compute_scores(self, section_results: Iterable[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        return process_computed_scores(aggregate(section_results))

    def build_report(
        self,
        section_results: Optional[Iterable[Mapping[str, Any]]] = None,
        computed_scores: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Full report payload from either raw section results or stored category scores.

        Returns None when there is nothing to show.
        """
        if computed_scores is None:
            if section_results is None:
                return None
            computed_scores = aggregate(section_results)

        enhanced = process_computed_scores(computed_scores)
        if enhanced is None:
            return None

        categories = {key: value for key, value in enhanced.items() if key != OVERALL_HEALTH_KEY}
        return {
            'scores': categories,
            OVERALL_HEALTH_KEY: enhanced[OVERALL_HEALTH_KEY],
            'categoryReports': self.selector.get_category_reports(enhanced),
            'actionItems': self.selector.generate_action_items(enhanced),
            'priorityActionItems': get_priority_action_items(enhanced),
            'recommendedResources': self.selector.get_recommended_resources(enhanced),
        }

    # --- Synthetic data ---

    def data_generator(self, seed: Optional[int] = None) -> AssessmentDataGenerator:
        return AssessmentDataGenerator(
            self.sections,
            seed=seed if seed is not None else self.settings.generator_seed,
        )

    def generate_test_users(self, count: Optional[int] = None) -> List[Dict[str, Any]]:
        return self.data_generator().generate_users(count or self.settings.generator_user_count)

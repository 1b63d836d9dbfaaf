# Business health scoring: answer weights -> category totals -> health levels -> report content
from .aggregator import aggregate, apply_section_score
from .engine import HealthEngine
from .resolver import build_section_result, resolve_answer_weight, score_section
from .results_generator import (
    ReportContentSelector,
    generate_action_items,
    get_category_report,
    get_recommended_resources,
)
from .scorer import (
    calculate_category_analytics,
    calculate_overall_health,
    determine_health_level,
    normalize_score,
    process_computed_scores,
)
from .score_ranges import get_category_max_score, get_category_range, get_category_thresholds

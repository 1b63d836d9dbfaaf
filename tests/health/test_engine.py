import logging

import pytest
import yaml
from pytest import approx

from services.core.config import HealthEngineSettings
from services.core.logging_config import CustomJsonFormatter
from services.health_engine.engine import HealthEngine
from services.health_engine.loader import ContentValidationError
from services.health_engine.scorer import OVERALL_HEALTH_KEY


@pytest.fixture
def bare_settings():
    return HealthEngineSettings(report_content_path=None, assessment_sections_path=None, generator_seed=3)


@pytest.fixture
def engine(bare_settings, section_two):
    return HealthEngine(settings=bare_settings, sections=[section_two])


# --- Submission ---

def test_submit_section_end_to_end(engine, section_two):
    """Answering 'Yes' to q2a scores 10 in section 2 and foundationalStructure."""
    submitted = engine.submit_section("user-1", section_two, {"q2a": "Yes"}, userEmail="a@example.com")
    result = submitted["sectionResult"]
    assert result["sectionScore"] == 10
    assert result["sectionOrder"] == 2
    assert result["userEmail"] == "a@example.com"
    assert submitted["computedScores"]["foundationalStructure"] == {"sections": {2: 10}, "total": 10}


def test_resubmission_replaces_previous_score(engine, section_two):
    first = engine.submit_section("user-1", section_two, {"q2a": "Yes"})
    second = engine.submit_section("user-1", section_two, {"q2a": "No", "q2b": ["B"]}, first["computedScores"])
    assert second["computedScores"]["foundationalStructure"] == {"sections": {2: 3}, "total": 3}
    assert first["computedScores"]["foundationalStructure"]["total"] == 10


# --- Reports ---

def test_build_report_from_section_results(engine, section_two):
    result = engine.submit_section("user-1", section_two, {"q2a": "Yes"})["sectionResult"]
    report = engine.build_report(section_results=[result])

    foundational = report["scores"]["foundationalStructure"]
    assert foundational["percentage"] == approx(7.4)
    assert foundational["healthLevel"] == "low"
    assert OVERALL_HEALTH_KEY not in report["scores"]
    # Unanswered categories count as 0 in the overall mean
    assert report[OVERALL_HEALTH_KEY]["percentage"] == approx(1.5)
    assert report[OVERALL_HEALTH_KEY]["healthLevel"] == "low"

    assert report["categoryReports"]["foundationalStructure"]["label"] == "Needs Attention"
    assert report["categoryReports"]["general"]["label"] == "Needs Tweaking"
    assert [item["category"] for item in report["actionItems"]] == [
        "foundationalStructure", "financialPosition", "salesMarketing", "productService",
    ]
    assert len(report["priorityActionItems"]) == 3
    assert report["priorityActionItems"][0]["category"] == "foundationalStructure"
    titles = [resource["title"] for resource in report["recommendedResources"]]
    assert len(titles) == len(set(titles))


def test_build_report_from_stored_scores(engine, make_scores):
    report = engine.build_report(computed_scores=make_scores(productService=57))
    assert report["scores"]["productService"]["healthLevel"] == "high"
    assert report["actionItems"] == []


def test_build_report_without_input(engine):
    assert engine.build_report() is None


def test_compute_scores(engine):
    enhanced = engine.compute_scores([{"sectionOrder": 19, "sectionScore": 26}])
    assert enhanced["productService"]["healthLevel"] == "medium"
    assert enhanced["productService"]["total"] == 26


# --- Configuration ---

def test_engine_loads_sections_from_settings(sample_assessment_path):
    settings = HealthEngineSettings(report_content_path=None, assessment_sections_path=sample_assessment_path)
    engine = HealthEngine(settings=settings)
    assert [section["order"] for section in engine.sections] == [2, 8, 12, 20]
    assert engine.get_section(8)["title"] == "Products & Pricing"
    assert engine.get_section(99) is None


def test_engine_applies_report_content_override(tmp_path, bare_settings):
    path = tmp_path / "content.yml"
    path.write_text(yaml.safe_dump({
        "categories": {"general": {"needsTweaking": {"label": "Almost there", "message": "Small fixes needed."}}}
    }), encoding="utf-8")
    settings = bare_settings.model_copy(update={"report_content_path": str(path)})
    engine = HealthEngine(settings=settings)
    assert engine.selector.get_category_report("general", "medium")["label"] == "Almost there"
    assert engine.selector.get_category_report("general", "high")["label"] == "Healthy"


def test_engine_fails_fast_on_bad_content_file(tmp_path, bare_settings):
    settings = bare_settings.model_copy(update={"report_content_path": str(tmp_path / "missing.yml")})
    with pytest.raises(ContentValidationError):
        HealthEngine(settings=settings)


# --- Synthetic data ---

def test_generate_test_users_uses_settings(sample_assessment_path):
    settings = HealthEngineSettings(
        report_content_path=None,
        assessment_sections_path=sample_assessment_path,
        generator_seed=11,
        generator_user_count=4,
    )
    engine = HealthEngine(settings=settings)
    generated = engine.generate_test_users()
    assert len(generated) == 4
    again = engine.generate_test_users()
    assert [g["user"]["userId"] for g in generated] == [g["user"]["userId"] for g in again]
    assert len(engine.generate_test_users(count=2)) == 2


def test_engine_can_configure_logging(bare_settings):
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    try:
        settings = bare_settings.model_copy(update={"log_level": "DEBUG"})
        HealthEngine(settings=settings, configure_logging=True)
        assert root_logger.level == logging.DEBUG
        assert any(isinstance(h.formatter, CustomJsonFormatter) for h in root_logger.handlers)
    finally:
        root_logger.handlers = handlers
        root_logger.setLevel(level)

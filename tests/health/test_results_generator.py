import copy
import logging

import pytest

from services.health_engine.definitions import REPORT_CONTENT
from services.health_engine.results_generator import (
    ACTION_ITEM_RESOURCE_LIMIT,
    ReportContentSelector,
    generate_action_items,
    get_category_report,
    get_recommended_resources,
)
from services.health_engine.scorer import process_computed_scores


@pytest.fixture
def enhanced_scores(make_scores):
    return process_computed_scores(make_scores(
        foundationalStructure=100,  # high
        financialPosition=20,       # low
        salesMarketing=50,          # medium
        productService=10,          # low
        general=25,                 # high
    ))


# --- get_category_report ---

@pytest.mark.parametrize("health_level, expected_label", [
    ("low", "Needs Attention"),
    ("medium", "Needs Tweaking"),
    ("high", "Healthy"),
    ("bogus", "Needs Tweaking"),
    (None, "Needs Tweaking"),
])
def test_category_report_by_level(health_level, expected_label):
    report = get_category_report("financialPosition", health_level)
    assert report["label"] == expected_label
    assert report["message"]


def test_unknown_category_report_stub():
    report = get_category_report("marketing", "low")
    assert report == {
        "label": "Unknown",
        "message": "Report content not available for this category.",
        "resources": [],
    }


def test_category_report_is_a_copy():
    report = get_category_report("general", "low")
    report["resources"].clear()
    assert get_category_report("general", "low")["resources"]
    assert REPORT_CONTENT["general"]["unhealthy"]["resources"]


def test_missing_bucket_falls_back_to_needs_tweaking():
    content = copy.deepcopy(REPORT_CONTENT)
    del content["general"]["healthy"]
    selector = ReportContentSelector(content)
    assert selector.get_category_report("general", "high")["label"] == "Needs Tweaking"


def test_missing_both_buckets_returns_stub(caplog):
    selector = ReportContentSelector({"general": {"unhealthy": REPORT_CONTENT["general"]["unhealthy"]}})
    with caplog.at_level(logging.WARNING):
        report = selector.get_category_report("general", "high")
    assert report["label"] == "Unknown"
    assert "general" in caplog.text


# --- Action items ---

def test_action_items_only_for_low_categories(enhanced_scores):
    items = generate_action_items(enhanced_scores)
    assert [item["category"] for item in items] == ["financialPosition", "productService"]
    for item in items:
        assert item["priority"] == "high"
        assert item["categoryLabel"] == "Needs Attention"
        assert item["message"] == REPORT_CONTENT[item["category"]]["unhealthy"]["message"]


def test_action_items_cap_resources(enhanced_scores):
    items = generate_action_items(enhanced_scores)
    for item in items:
        expected = REPORT_CONTENT[item["category"]]["unhealthy"]["resources"][:ACTION_ITEM_RESOURCE_LIMIT]
        assert len(item["resources"]) <= 2
        assert item["resources"] == expected


def test_action_items_empty_inputs():
    assert generate_action_items(None) == []
    assert generate_action_items(process_computed_scores({})) == []


# --- Recommended resources ---

def test_recommended_resources_unique_titles(enhanced_scores):
    resources = get_recommended_resources(enhanced_scores)
    titles = [resource["title"] for resource in resources]
    assert len(titles) == len(set(titles))
    assert "FREE Discovery Session" in titles


def test_recommended_resources_first_occurrence_wins(enhanced_scores):
    resources = get_recommended_resources(enhanced_scores)
    discovery = next(r for r in resources if r["title"] == "FREE Discovery Session")
    first = next(
        r for r in REPORT_CONTENT["financialPosition"]["unhealthy"]["resources"]
        if r["title"] == "FREE Discovery Session"
    )
    assert discovery == first


def test_recommended_resources_cover_every_level(enhanced_scores):
    titles = {resource["title"] for resource in get_recommended_resources(enhanced_scores)}
    # foundationalStructure is high, general is high, salesMarketing is medium
    assert "Vision 20/20 Radio Podcast" in titles
    assert "Tip of the Week" in titles
    assert "Marketing Gap Analysis Tool" in titles


def test_category_reports_keyed_by_category(enhanced_scores):
    reports = ReportContentSelector().get_category_reports(enhanced_scores)
    assert set(reports) == {"foundationalStructure", "financialPosition", "salesMarketing", "productService", "general"}
    assert reports["salesMarketing"]["label"] == "Needs Tweaking"

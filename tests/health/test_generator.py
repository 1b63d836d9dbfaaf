import logging

import pytest

from services.health_engine.definitions import CATEGORY_KEYS, SAMPLE_TEXT_ANSWERS
from services.health_engine.generator import AssessmentDataGenerator
from services.health_engine.loader import load_assessment_sections_from_file
from services.health_engine.resolver import build_section_result, calculate_section_score
from services.health_engine.scorer import OVERALL_HEALTH_KEY


@pytest.fixture
def sections(sample_assessment_path):
    return load_assessment_sections_from_file(sample_assessment_path)


@pytest.fixture
def generator(sections):
    return AssessmentDataGenerator(sections, seed=1234)


def _question(sections, question_id):
    for section in sections:
        for question in section["questions"]:
            if question["id"] == question_id:
                return question
    raise KeyError(question_id)


def _section(sections, order):
    return next(section for section in sections if section["order"] == order)


# --- Selections ---

def test_high_bias_multi_select_takes_top_three(generator, sections):
    question = _question(sections, "q12a")
    assert generator.generate_selection(question, "high") == ["Referrals", "Paid ads", "Social media"]


def test_low_bias_multi_select_takes_bottom_two(generator, sections):
    question = _question(sections, "q12a")
    assert generator.generate_selection(question, "low") == ["Walk-ins", "Social media"]


@pytest.mark.parametrize("bias", ["high", "medium", "low", None])
def test_choice_picks_an_existing_label(generator, sections, bias):
    question = _question(sections, "q8a")
    labels = {option["label"] for option in question["options"]}
    for _ in range(20):
        assert generator.generate_selection(question, bias) in labels


def test_uniform_multi_select_picks_one_to_three_distinct_labels(generator, sections):
    question = _question(sections, "q12a")
    labels = {option["label"] for option in question["options"]}
    for _ in range(20):
        picked = generator.generate_selection(question)
        assert 1 <= len(picked) <= 3
        assert len(set(picked)) == len(picked)
        assert set(picked) <= labels


def test_high_bias_leans_to_heaviest_option(sections):
    generator = AssessmentDataGenerator(sections, seed=99)
    question = _question(sections, "q20a")
    picks = [generator.generate_selection(question, "high") for _ in range(200)]
    assert picks.count("Under 40") > picks.count("Over 60")


def test_text_questions_get_canned_answers(generator, sections):
    assert generator.generate_selection(_question(sections, "q2c"), "high") in SAMPLE_TEXT_ANSWERS
    assert generator.generate_selection(_question(sections, "q20b")) in SAMPLE_TEXT_ANSWERS


def test_questions_without_options_fall_back(generator):
    assert generator.generate_selection({"id": "x", "type": "multipleChoice", "options": []}) == "Yes"
    assert generator.generate_selection({"id": "y", "type": "multipleSelect"}, "high") == ["Yes"]


# --- Users ---

def test_generate_user_scores_match_resolver(generator, sections):
    generated = generator.generate_user("high")
    user = generated["user"]
    assert generated["bias"] == "high"
    assert len(generated["sectionResults"]) == len(sections)

    for result in generated["sectionResults"]:
        assert result["userId"] == user["userId"]
        assert result["userEmail"] == user["email"]
        assert result["sectionScore"] == pytest.approx(calculate_section_score(result["answers"]))

    section_two = next(r for r in generated["sectionResults"] if r["sectionOrder"] == 2)
    assert user["computedScores"]["foundationalStructure"]["total"] == pytest.approx(section_two["sectionScore"])
    for category_key in CATEGORY_KEYS:
        assert "percentage" in user["computedScores"][category_key]
    assert user[OVERALL_HEALTH_KEY]["categoryCount"] == len(CATEGORY_KEYS)


def test_generated_user_record_shape(generator):
    user = generator.generate_user()["user"]
    assert user["email"] == f"{user['username'].lower()}@testuser.com"
    assert user["role"] == "tier1"
    assert user["signupMethod"] == "test"
    assert user["verified"] is True


def test_bias_distribution(generator):
    biases = generator.bias_distribution(10)
    assert sorted(biases) == sorted(["high"] * 3 + ["medium"] * 4 + ["low"] * 3)
    assert generator.bias_distribution(0) == []


def test_generate_users_is_reproducible(sections):
    first = AssessmentDataGenerator(sections, seed=7).generate_users(4)
    second = AssessmentDataGenerator(sections, seed=7).generate_users(4)
    assert [g["user"]["userId"] for g in first] == [g["user"]["userId"] for g in second]
    assert [g["bias"] for g in first] == [g["bias"] for g in second]
    assert [
        [r["answers"] for r in g["sectionResults"]] for g in first
    ] == [
        [r["answers"] for r in g["sectionResults"]] for g in second
    ]


def test_generate_users_without_sections(caplog):
    with caplog.at_level(logging.WARNING):
        assert AssessmentDataGenerator([], seed=1).generate_users(3) == []
    assert "No assessment sections" in caplog.text


# --- Randomizing stored results ---

def test_randomize_keeps_text_answers(generator, sections):
    section = _section(sections, 2)
    stored = build_section_result("u-1", section, {"q2a": "No", "q2c": "Sole owner"}, userEmail="u@example.com")
    randomized = generator.randomize_section_result(stored, section)

    assert randomized["userEmail"] == "u@example.com"
    assert randomized["answers"]["q2c"] == {"answer": "Sole owner", "weight": 0}
    assert set(randomized["answers"]) == {"q2a", "q2b", "q2c"}
    assert randomized["sectionScore"] == pytest.approx(calculate_section_score(randomized["answers"]))


def test_randomize_fills_missing_text_answers(generator, sections):
    section = _section(sections, 2)
    stored = build_section_result("u-1", section, {"q2a": "Yes"})
    randomized = generator.randomize_section_result(stored, section)
    assert randomized["answers"]["q2c"]["answer"].startswith("Random answer ")


def test_randomize_without_questions_is_a_no_op(generator):
    stored = {"userId": "u", "sectionOrder": 2, "answers": {}, "sectionScore": 0}
    assert generator.randomize_section_result(stored, {"title": "Empty", "order": 2, "questions": []}) == stored

import copy
from pathlib import Path

import pytest

SAMPLE_ASSESSMENT_PATH = Path(__file__).resolve().parent.parent / "assets" / "sample_assessment.yml"

YES_NO_QUESTION = {
    "id": "q2a",
    "text": "Is your business legally registered?",
    "type": "multipleChoice",
    "options": [{"label": "Yes", "weight": 10}, {"label": "No", "weight": 0}],
}

ABC_QUESTION = {
    "id": "q2b",
    "text": "Pick all that apply",
    "type": "multipleSelect",
    "options": [
        {"label": "A", "weight": 5},
        {"label": "B", "weight": 3},
        {"label": "C", "weight": 0},
    ],
}

TEXT_QUESTION = {"id": "q2c", "text": "Tell us more", "type": "text", "options": []}


@pytest.fixture
def yes_no_question():
    return copy.deepcopy(YES_NO_QUESTION)


@pytest.fixture
def abc_question():
    return copy.deepcopy(ABC_QUESTION)


@pytest.fixture
def text_question():
    return copy.deepcopy(TEXT_QUESTION)


@pytest.fixture
def section_two(yes_no_question, abc_question, text_question):
    """Section 2 belongs to foundationalStructure only."""
    return {
        "title": "Business Basics",
        "order": 2,
        "questions": [yes_no_question, abc_question, text_question],
    }


@pytest.fixture
def sample_assessment_path() -> str:
    return str(SAMPLE_ASSESSMENT_PATH)


@pytest.fixture
def make_scores():
    """Builds a stored category-score map with a single section per category."""
    def _make(**totals):
        return {key: {"sections": {1: total}, "total": total} for key, total in totals.items()}
    return _make

# services/health_engine/resolver.py
# Turns selected answers into weighted answer records and section scores.
#
# Every path that produces a section score (end-user submission, admin edits,
# synthetic data) goes through build_section_result / resolve_answer_weight.

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

MULTIPLE_CHOICE = 'multipleChoice'
MULTIPLE_SELECT = 'multipleSelect'
TEXT = 'text'
OTHER = 'other'

AnswerRecord = Dict[str, Any]
ResolvedAnswer = Union[AnswerRecord, List[AnswerRecord]]


def _find_option(options: Iterable[Mapping[str, Any]], label: Any) -> Optional[Mapping[str, Any]]:
    # Labels are not guaranteed unique; the first matching option wins.
    for option in options:
        if option.get('label') == label:
            return option
    return None


def _resolve_single(question_id: Any, options: List[Mapping[str, Any]], value: Any) -> AnswerRecord:
    option = _find_option(options, value)
    if option is None:
        logger.debug(f"No option labelled {value!r} for question {question_id}; weight 0")
        return {'answer': value, 'weight': 0}
    return {'answer': value, 'weight': option.get('weight') or 0}


def resolve_answer_weight(question: Mapping[str, Any], selected: Any) -> ResolvedAnswer:
    """
    Resolves the selected value(s) for one question into answer record(s).

    - multipleChoice: one record, weight of the option whose label matches.
    - multipleSelect: one record per selected value, in selection order.
    - text/other (and unknown types): raw value stored, weight 0.

    Unmatched labels contribute 0 and never raise.
    """
    question_type = question.get('type')
    options = list(question.get('options') or [])
    question_id = question.get('id')

    if question_type == MULTIPLE_CHOICE:
        return _resolve_single(question_id, options, selected)

    if question_type == MULTIPLE_SELECT:
        if selected is None:
            values = []
        elif isinstance(selected, str):
            values = [selected]
        else:
            values = list(selected)
        return [_resolve_single(question_id, options, value) for value in values]

    return {'answer': selected, 'weight': 0}


def answer_weight(answer: Any) -> float:
    """Total weight carried by a stored answer (a single record or a list of them)."""
    if isinstance(answer, Mapping):
        return answer.get('weight') or 0
    if isinstance(answer, (list, tuple)):
        return sum(answer_weight(item) for item in answer)
    return 0


def calculate_section_score(answers: Optional[Mapping[str, Any]]) -> float:
    """Sums the frozen weights of an already-resolved answers map."""
    if not answers:
        return 0
    return sum(answer_weight(answer) for answer in answers.values())


def score_section(questions: Iterable[Mapping[str, Any]], selections: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Resolves every answered question of a section.

    Questions without an entry in `selections` are skipped.

    Returns:
        {'answers': {question_id: record(s)}, 'sectionScore': total weight}
    """
    answers: Dict[str, ResolvedAnswer] = {}
    for question in questions:
        question_id = question.get('id')
        if question_id not in selections:
            continue
        answers[question_id] = resolve_answer_weight(question, selections[question_id])

    return {
        'answers': answers,
        'sectionScore': calculate_section_score(answers),
    }


def build_section_result(
    user_id: Any,
    section: Mapping[str, Any],
    selections: Mapping[str, Any],
    **extra: Any,
) -> Dict[str, Any]:
    """
    Builds a complete SectionResult for one (user, section) pair.

    A save always replaces answers and sectionScore together, so callers
    persist the whole record. Extra keyword arguments (e.g. userEmail,
    submittedAt) are copied onto the record.
    """
    scored = score_section(section.get('questions') or [], selections)
    result = {
        'userId': user_id,
        'sectionName': section.get('title'),
        'sectionOrder': section.get('order'),
        'answers': scored['answers'],
        'sectionScore': scored['sectionScore'],
    }
    result.update(extra)
    return result

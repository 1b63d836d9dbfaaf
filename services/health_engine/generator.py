# services/health_engine/generator.py
# Synthetic users and randomized answers for demo and load-testing data.
#
# The generator only picks option labels. Turning picks into weights and
# section scores is left to the resolver, same as a real submission.

import logging
import random
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .aggregator import aggregate
from .definitions import SAMPLE_TEXT_ANSWERS
from .resolver import MULTIPLE_CHOICE, MULTIPLE_SELECT, build_section_result
from .scorer import enhance_user_scores

logger = logging.getLogger(__name__)

FIRST_NAMES = [
    'John', 'Jane', 'Michael', 'Sarah', 'David', 'Emily', 'James', 'Jessica',
    'Robert', 'Ashley', 'William', 'Amanda', 'Richard', 'Melissa', 'Joseph', 'Deborah',
    'Thomas', 'Michelle', 'Charles', 'Laura', 'Christopher', 'Lisa', 'Daniel', 'Nancy',
    'Matthew', 'Karen', 'Anthony', 'Betty', 'Mark', 'Helen',
]

LAST_NAMES = [
    'Smith', 'Johnson', 'Williams', 'Brown', 'Jones', 'Garcia', 'Miller', 'Davis',
    'Rodriguez', 'Martinez', 'Hernandez', 'Lopez', 'Wilson', 'Anderson', 'Thomas', 'Taylor',
    'Moore', 'Jackson', 'Martin', 'Lee', 'Thompson', 'White', 'Harris', 'Clark',
    'Lewis', 'Robinson', 'Walker', 'Young', 'Allen', 'King',
]

BUSINESS_TYPES = [
    'Tech', 'Consulting', 'Retail', 'Food', 'Fitness', 'Design', 'Marketing', 'Finance',
    'RealEstate', 'Healthcare', 'Education', 'Legal', 'Construction', 'Automotive', 'Beauty',
]

BIASES = ('high', 'medium', 'low')

# Label used when a choice question has no options at all
FALLBACK_LABEL = 'Yes'


class AssessmentDataGenerator:
    """
    Generates biased or uniformly random answers for assessment sections.

    Args:
        sections: Section definitions `{title, order, questions}` as plain dicts.
        seed: Optional seed; the same seed reproduces the same data set.
    """

    def __init__(self, sections: Sequence[Mapping[str, Any]], seed: Optional[int] = None):
        self.sections = list(sections)
        self.random = random.Random(seed)

    # --- Option picking ---

    @staticmethod
    def _by_weight(question: Mapping[str, Any]) -> List[Mapping[str, Any]]:
        # Highest weight first; stable for ties
        return sorted(question.get('options') or [], key=lambda option: option.get('weight') or 0, reverse=True)

    def _pick_choice(self, options: List[Mapping[str, Any]], bias: Optional[str]) -> Mapping[str, Any]:
        roll = self.random.random()
        if bias == 'high':
            if roll < 0.7:
                return options[0]
            if roll < 0.95 and len(options) > 1:
                return options[1]
            return options[self.random.randrange(min(2, len(options)))]
        if bias == 'low':
            worst_first = list(reversed(options))
            if roll < 0.7:
                return worst_first[0]
            if roll < 0.95 and len(worst_first) > 1:
                return worst_first[1]
            return options[self.random.randrange(len(options))]
        if bias == 'medium':
            if roll < 0.3 and len(options) > 1:
                return options[0]
            if roll < 0.6 and len(options) > 2:
                return options[len(options) // 2]
        return options[self.random.randrange(len(options))]

    def _pick_many(self, options: List[Mapping[str, Any]], bias: Optional[str]) -> List[Mapping[str, Any]]:
        if bias == 'high':
            return options[:min(3, len(options))]
        if bias == 'low':
            return list(reversed(options))[:min(2, len(options))]
        count = self.random.randrange(min(3, len(options))) + 1
        return self.random.sample(options, count)

    def generate_selection(self, question: Mapping[str, Any], bias: Optional[str] = None) -> Any:
        """
        Picks the label(s) a user with the given bias would select.

        `bias=None` picks uniformly. Returns a label for multipleChoice, a list
        of labels for multipleSelect and a canned sentence for text questions.
        """
        question_type = question.get('type')
        options = self._by_weight(question)

        if question_type == MULTIPLE_CHOICE:
            if not options:
                return FALLBACK_LABEL
            return self._pick_choice(options, bias).get('label') or FALLBACK_LABEL

        if question_type == MULTIPLE_SELECT:
            if not options:
                return [FALLBACK_LABEL]
            return [option.get('label') or FALLBACK_LABEL for option in self._pick_many(options, bias)]

        return self.random.choice(SAMPLE_TEXT_ANSWERS)

    def generate_selections(self, section: Mapping[str, Any], bias: Optional[str] = None) -> Dict[str, Any]:
        return {
            question['id']: self.generate_selection(question, bias)
            for question in section.get('questions') or []
        }

    # --- Section results ---

    def randomize_section_result(self, section_result: Mapping[str, Any], section: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Replaces a stored result's answers with uniformly random picks.

        Existing free-text answers are kept. The score is recomputed through
        the resolver.
        """
        if not section or not section.get('questions'):
            return dict(section_result)

        stored_answers = section_result.get('answers') or {}
        selections = {}
        for question in section['questions']:
            question_id = question['id']
            if question.get('type') in (MULTIPLE_CHOICE, MULTIPLE_SELECT):
                selections[question_id] = self.generate_selection(question)
            else:
                stored = stored_answers.get(question_id)
                if isinstance(stored, Mapping) and stored.get('answer'):
                    selections[question_id] = stored['answer']
                else:
                    selections[question_id] = f"Random answer {self.random.randrange(1000)}"

        rebuilt = build_section_result(section_result.get('userId'), section, selections)
        return {
            **section_result,
            'answers': rebuilt['answers'],
            'sectionScore': rebuilt['sectionScore'],
        }

    # --- Users ---

    def _new_user(self) -> Dict[str, Any]:
        first_name = self.random.choice(FIRST_NAMES)
        last_name = self.random.choice(LAST_NAMES)
        business_type = self.random.choice(BUSINESS_TYPES)
        username = f"{business_type}{first_name}{self.random.randrange(1000)}"
        return {
            'userId': str(uuid.UUID(int=self.random.getrandbits(128), version=4)),
            'firstName': first_name,
            'lastName': last_name,
            'username': username,
            'email': f"{username.lower()}@testuser.com",
            'verified': True,
            'signupMethod': 'test',
            'role': 'tier1',
            'createdAt': datetime.now(timezone.utc),
            'lastLoggedOn': None,
            'lastLoggedOff': None,
        }

    def generate_user(self, bias: str = 'medium') -> Dict[str, Any]:
        """
        One synthetic user with a result for every section that has questions.

        Returns:
            {'user': user record incl. computedScores/overallHealth,
             'sectionResults': [...], 'bias': bias}
        """
        user = self._new_user()
        section_results = []
        for section in self.sections:
            if not section.get('questions'):
                continue
            selections = self.generate_selections(section, bias)
            section_results.append(build_section_result(
                user['userId'], section, selections,
                userEmail=user['email'],
                submittedAt=datetime.now(timezone.utc),
            ))

        update = enhance_user_scores(aggregate(section_results), force=True)
        if update:
            user.update(update)

        return {'user': user, 'sectionResults': section_results, 'bias': bias}

    def bias_distribution(self, count: int) -> List[str]:
        """30% high, 40% medium, the rest low, shuffled."""
        biases = ['high'] * int(count * 0.3) + ['medium'] * int(count * 0.4)
        biases += ['low'] * (count - len(biases))
        self.random.shuffle(biases)
        return biases

    def generate_users(self, count: int = 25) -> List[Dict[str, Any]]:
        if not self.sections:
            logger.warning("No assessment sections available; no users generated")
            return []

        generated = [self.generate_user(bias) for bias in self.bias_distribution(count)]
        response_count = sum(len(item['sectionResults']) for item in generated)
        logger.info(
            f"Generated {len(generated)} test users with {response_count} section responses",
            extra={"user_count": len(generated), "response_count": response_count},
        )
        return generated

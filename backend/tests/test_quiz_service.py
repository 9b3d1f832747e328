from types import SimpleNamespace

import pytest

from quizapp.schemas.quiz import SubmittedAnswer
from quizapp.services.quiz_service import compute_percentage, parse_question_id, score_answers


@pytest.mark.parametrize(
    "score,total,expected",
    [
        (0, 0, 0),
        (1, 2, 50),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (3, 8, 38),
        (5, 5, 100),
    ],
)
def test_compute_percentage_rounds_half_up(score, total, expected):
    assert compute_percentage(score, total) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        (5, 5),
        ("12", 12),
        (" 7 ", 7),
        (0, None),
        (-3, None),
        ("abc", None),
        ("", None),
        ("1.5", None),
        (1.5, None),
        (None, None),
        ({"$ne": 1}, None),
        (True, None),
        (2 ** 40, None),
    ],
)
def test_parse_question_id(raw, expected):
    assert parse_question_id(raw) == expected


def test_score_answers_reports_unscored():
    questions = {
        1: SimpleNamespace(id=1, correct_answer="A"),
        2: SimpleNamespace(id=2, correct_answer="C"),
    }
    answers = [
        SubmittedAnswer(questionId=1, answer="A"),
        SubmittedAnswer(questionId=2, answer="B"),
        SubmittedAnswer(questionId=3, answer="A"),
    ]

    card = score_answers(answers, questions)

    assert (card.score, card.total, card.percentage, card.unscored) == (1, 3, 33, 1)


def test_score_answers_empty():
    card = score_answers([], {})

    assert (card.score, card.total, card.percentage, card.unscored) == (0, 0, 0, 0)

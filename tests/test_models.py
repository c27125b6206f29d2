import dataclasses

import pytest

from cueline.models.alignment_op import AlignmentOp
from cueline.models.feedback import FeedbackResult


def test_feedback_to_dict_drops_unset_fields():
    result = FeedbackResult(accurate=True, score=100, feedback="Nailed it!")
    assert result.to_dict() == {
        "accurate": True, "score": 100, "feedback": "Nailed it!", "source": "local",
    }


def test_feedback_is_immutable():
    result = FeedbackResult(accurate=True, score=100, feedback="Nailed it!")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.score = 0


def test_from_dict_clamps_and_rounds_score():
    assert FeedbackResult.from_dict({"score": 120, "feedback": "x"}).score == 100
    assert FeedbackResult.from_dict({"score": -3, "feedback": "x"}).score == 0
    assert FeedbackResult.from_dict({"score": "84.6", "feedback": "x"}).score == 85


def test_from_dict_derives_accurate():
    assert FeedbackResult.from_dict({"score": 80, "feedback": "x"}).accurate is True
    assert FeedbackResult.from_dict({"score": 79, "feedback": "x"}).accurate is False
    assert FeedbackResult.from_dict({"score": 10, "feedback": "x", "accurate": True}).accurate is True


def test_from_dict_rejects_bad_payloads():
    for payload in (
        {}, {"score": "lots", "feedback": "x"}, {"score": 50}, ["score"],
        {"score": float("inf"), "feedback": "x"},
        {"score": float("-inf"), "feedback": "x"},
        {"score": float("nan"), "feedback": "x"},
        {"score": "1e999", "feedback": "x"},
    ):
        with pytest.raises(ValueError):
            FeedbackResult.from_dict(payload)


def test_alignment_op_constructors():
    assert AlignmentOp.match("a", "a").is_match
    assert AlignmentOp.substitution("a", "b") == AlignmentOp("sub", "a", "b")
    assert AlignmentOp.insertion("x") == AlignmentOp("ins", spoken="x")
    assert AlignmentOp.deletion("y") == AlignmentOp("del", correct="y")

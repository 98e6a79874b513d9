"""Tests for question text and options."""

from __future__ import annotations

import pytest

from strategy_advisor.engine.questions import QUESTIONS, get_question, option_labels
from strategy_advisor.engine.rules import Step, valid_tokens


@pytest.mark.parametrize("key", list(QUESTIONS))
def test_options_match_rule_tokens(key):
    step, context = key
    answers = {} if context is None else {Step.GOAL: context}
    question = QUESTIONS[key]
    assert tuple(o.value for o in question.options) == valid_tokens(step, answers)
    assert question.prompt


def test_detail_question_depends_on_goal():
    schemas = get_question(Step.DETAIL, {Step.GOAL: "schemas-data"})
    iceberg = get_question(Step.DETAIL, {Step.GOAL: "iceberg-conversion"})
    assert schemas.prompt == "Can your clusters access each other's storage?"
    assert iceberg.prompt == "Where do you want the Iceberg tables?"


@pytest.mark.parametrize("step", [Step.ERROR, Step.CONFIRMATION])
def test_terminal_steps_have_no_question(step):
    assert get_question(step, {Step.GOAL: "schemas-data"}) is None


def test_to_dict_and_labels():
    question = get_question(Step.GOAL, {})
    data = question.to_dict()
    assert data["prompt"] == question.prompt
    assert len(data["options"]) == 7
    assert data["options"][0]["value"] == "schemas-data"
    assert option_labels(question)[0].startswith("schemas-data: ")

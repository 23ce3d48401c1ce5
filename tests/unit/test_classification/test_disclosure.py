#!/usr/bin/env python3
"""Tests for the doctor-prescription disclosure flow."""

import pytest

from medexpense.classification.disclosure import (
    ConditionalDisclosureFlow,
    DisclosureState,
    DisclosureStateError,
    PrescriptionAnswer,
)


@pytest.fixture
def answers():
    return []


@pytest.fixture
def flow(answers):
    return ConditionalDisclosureFlow(answers.append)


@pytest.fixture
def prescribed_selection(resolver):
    return resolver.resolve("Doctor-Prescribed Items", "Nutritional Supplements")


@pytest.mark.classification
class TestTransitions:
    """Test IDLE <-> AWAITING_RESPONSE transitions."""

    def test_starts_idle(self, flow):
        assert flow.state == DisclosureState.IDLE
        assert not flow.is_awaiting_response

    def test_prescription_selection_opens_prompt(self, flow, prescribed_selection):
        assert flow.select(prescribed_selection) is True
        assert flow.state == DisclosureState.AWAITING_RESPONSE

    def test_category_object_selection_opens_prompt(self, flow, default_store):
        category = default_store.find_category_by_label("Doctor-Prescribed Items")
        assert flow.select(category) is True
        assert flow.is_awaiting_response

    def test_ordinary_selection_stays_idle(self, flow, resolver, answers):
        assert flow.select(resolver.resolve("Dental & Vision", "Dental Care")) is False
        assert flow.state == DisclosureState.IDLE
        assert answers == []

    def test_reselecting_keeps_single_prompt(self, flow, prescribed_selection, answers):
        flow.select(prescribed_selection)
        flow.select(prescribed_selection)
        flow.answer_unsure()

        assert len(answers) == 1
        assert flow.state == DisclosureState.IDLE

    def test_cancel_returns_to_idle_without_answer(self, flow, prescribed_selection, answers):
        flow.select(prescribed_selection)
        flow.cancel()

        assert flow.state == DisclosureState.IDLE
        assert answers == []


@pytest.mark.classification
class TestAnswers:
    """Test that each answer reaches the callback exactly once."""

    def test_prescribed_with_note(self, flow, prescribed_selection, answers):
        flow.select(prescribed_selection)
        flow.answer_prescribed("  Vitamin D for deficiency  ")

        assert answers == [PrescriptionAnswer(prescribed=True, note="Vitamin D for deficiency")]
        assert flow.state == DisclosureState.IDLE

    def test_prescribed_blank_note_dropped(self, flow, prescribed_selection, answers):
        flow.select(prescribed_selection)
        flow.answer_prescribed("   ")

        assert answers == [PrescriptionAnswer(prescribed=True, note=None)]

    def test_not_prescribed(self, flow, prescribed_selection, answers):
        flow.select(prescribed_selection)
        flow.answer_not_prescribed()

        assert answers == [PrescriptionAnswer(prescribed=False)]

    def test_unsure_is_distinct_from_false(self, flow, prescribed_selection, answers):
        flow.select(prescribed_selection)
        flow.answer_unsure()

        assert len(answers) == 1
        assert answers[0].prescribed is None
        assert answers[0].prescribed is not False

    def test_answer_while_idle_raises(self, flow, answers):
        with pytest.raises(DisclosureStateError):
            flow.answer_prescribed()
        assert answers == []

    def test_second_answer_raises(self, flow, prescribed_selection, answers):
        flow.select(prescribed_selection)
        flow.answer_not_prescribed()

        with pytest.raises(DisclosureStateError):
            flow.answer_not_prescribed()
        assert len(answers) == 1

    def test_state_is_idle_when_callback_runs(self, prescribed_selection):
        seen_states = []
        flow = ConditionalDisclosureFlow(lambda answer: seen_states.append(flow.state))

        flow.select(prescribed_selection)
        flow.answer_unsure()

        assert seen_states == [DisclosureState.IDLE]


@pytest.mark.classification
class TestAnnotate:
    """Test applying an answer to an expense record."""

    def test_annotate_sets_prescription_fields(self, sample_expense):
        annotated = PrescriptionAnswer(prescribed=True, note="Rx 123").annotate(sample_expense)

        assert annotated.prescription_confirmed is True
        assert annotated.prescription_note == "Rx 123"
        assert sample_expense.prescription_confirmed is None  # original untouched

    def test_annotate_unsure(self, sample_expense):
        annotated = PrescriptionAnswer(prescribed=None).annotate(sample_expense)

        assert annotated.prescription_confirmed is None
        assert annotated.prescription_note is None

#!/usr/bin/env python3
"""
Doctor Prescription Disclosure

Some expenses (supplements, prescribed exercise, special foods, ...) are
deductible only when a doctor prescribed them. Selecting such a category
opens a prompt; the user's answer is forwarded to the caller so it can be
stored on the expense record.

The flow is owned by a single expense-entry session and is never persisted.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..core.models import ExpenseRecord
from ..taxonomy.models import MedicalCategory
from .resolver import Resolution

logger = logging.getLogger(__name__)


class DisclosureState(Enum):
    """States of the prescription prompt."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting-response"


class DisclosureStateError(RuntimeError):
    """Raised when an answer arrives while no prompt is open."""


@dataclass(frozen=True)
class PrescriptionAnswer:
    """
    The user's answer.

    prescribed is True, False, or None for "unsure"; None is deliberately
    distinct from False. note is only kept for prescribed=True.
    """

    prescribed: bool | None
    note: str | None = None

    def annotate(self, expense: ExpenseRecord) -> ExpenseRecord:
        return expense.with_prescription(self.prescribed, self.note)


AnswerCallback = Callable[[PrescriptionAnswer], None]


class ConditionalDisclosureFlow:
    """
    Two-state prompt: IDLE -> AWAITING_RESPONSE on selecting a
    prescription-only category, back to IDLE on any answer.

    Example:
        >>> answers = []
        >>> flow = ConditionalDisclosureFlow(answers.append)
        >>> flow.select(resolution)  # a doctor-prescribed-only selection
        True
        >>> flow.answer_prescribed("Rx for vitamin D deficiency")
        >>> answers[0].prescribed
        True
    """

    def __init__(self, on_answer: AnswerCallback):
        self._on_answer = on_answer
        self._state = DisclosureState.IDLE

    @property
    def state(self) -> DisclosureState:
        return self._state

    @property
    def is_awaiting_response(self) -> bool:
        return self._state == DisclosureState.AWAITING_RESPONSE

    def select(self, selection: Resolution | MedicalCategory) -> bool:
        """
        Notify the flow of a category/subcategory selection.

        Returns:
            True if the prescription prompt is now open
        """
        if selection.requires_prescription:
            if not self.is_awaiting_response:
                logger.debug("Opening prescription prompt for %s", _label(selection))
            self._state = DisclosureState.AWAITING_RESPONSE
            return True
        return False

    def answer_prescribed(self, note: str | None = None) -> None:
        """User confirmed a doctor prescribed this, optionally with details."""
        cleaned = note.strip() if note else None
        self._answer(PrescriptionAnswer(prescribed=True, note=cleaned or None))

    def answer_not_prescribed(self) -> None:
        self._answer(PrescriptionAnswer(prescribed=False))

    def answer_unsure(self) -> None:
        self._answer(PrescriptionAnswer(prescribed=None))

    def cancel(self) -> None:
        """Close the prompt without an answer (e.g. the selection was changed)."""
        self._state = DisclosureState.IDLE

    def _answer(self, answer: PrescriptionAnswer) -> None:
        if not self.is_awaiting_response:
            raise DisclosureStateError("No prescription prompt is open")

        self._state = DisclosureState.IDLE
        logger.debug("Prescription answer recorded: prescribed=%s", answer.prescribed)
        self._on_answer(answer)


def _label(selection: Resolution | MedicalCategory) -> str:
    if isinstance(selection, Resolution):
        return selection.category.label
    return selection.label

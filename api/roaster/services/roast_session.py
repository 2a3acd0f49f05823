"""Presentation state for one roast form: idle -> loading -> success | failure.

Framework-free; the static page implements the same transitions in JS.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from roaster.models.roast import RoastFailure, RoastResult, RoastSuccess


class RoastPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class SessionBusyError(RuntimeError):
    pass


class SessionStateError(RuntimeError):
    pass


class RoastSession:
    def __init__(self, input_text: str = "") -> None:
        self.input_text = input_text
        self.phase = RoastPhase.IDLE
        self.error: Optional[str] = None
        self.result: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.phase is RoastPhase.LOADING

    @property
    def can_submit(self) -> bool:
        return not self.loading and bool(self.input_text.strip())

    def set_input(self, text: str) -> None:
        self.input_text = text

    def begin(self) -> None:
        if not self.can_submit:
            raise SessionBusyError("submit is disabled while loading or with empty input")
        self.error = None
        self.result = None
        self.phase = RoastPhase.LOADING

    def finish(self, outcome: RoastResult) -> None:
        if not self.loading:
            raise SessionStateError(f"finish() requires a submit in flight, phase is {self.phase.value}")
        if isinstance(outcome, RoastSuccess):
            self.result = outcome.roast
            self.error = None
            self.input_text = ""
            self.phase = RoastPhase.SUCCESS
        elif isinstance(outcome, RoastFailure):
            self.error = outcome.message
            self.result = None
            self.phase = RoastPhase.FAILURE
        else:
            raise TypeError(f"unexpected roast outcome: {type(outcome).__name__}")

    def submit(self, roast_fn: Callable[[str], RoastResult]) -> RoastResult:
        """Run one full submit cycle against ``roast_fn`` (usually ``RoastService.roast``)."""
        self.begin()
        try:
            outcome = roast_fn(self.input_text)
        except Exception as exc:
            self.error = str(exc) or exc.__class__.__name__
            self.phase = RoastPhase.FAILURE
            raise
        self.finish(outcome)
        return outcome

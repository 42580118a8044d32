from __future__ import annotations

from enum import StrEnum


class RoundStatus(StrEnum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not RoundStatus.IN_PROGRESS


class SessionEventKind(StrEnum):
    ROUND_STARTED = "round_started"
    GUESS_RECORDED = "guess_recorded"
    COMMENTARY_APPLIED = "commentary_applied"

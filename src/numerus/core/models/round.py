from __future__ import annotations

from datetime import datetime

import msgspec

from numerus.core.constants import SECRET_LENGTH
from numerus.core.models.enums import RoundStatus


class EvaluationResult(msgspec.Struct, frozen=True):
    """Strike/ball score of one guess against the secret."""

    strikes: int
    balls: int

    @property
    def is_win(self) -> bool:
        return self.strikes == SECRET_LENGTH


class GuessRecord(msgspec.Struct):
    """One submitted guess and its score.

    Note: GuessRecord is intentionally mutable (not frozen) because the
    commentary is attached after the record is appended to the round history.
    Only GameSession writes ``commentary``, and only once; the score fields
    never change after creation.
    """

    id: str
    guess: str
    strikes: int
    balls: int
    submitted_at: datetime
    commentary: str | None = None

    @property
    def evaluation(self) -> EvaluationResult:
        return EvaluationResult(strikes=self.strikes, balls=self.balls)


class Round(msgspec.Struct):
    """One playthrough from secret generation to a win or loss."""

    id: str
    secret: str
    started_at: datetime
    status: RoundStatus = RoundStatus.IN_PROGRESS
    history: list[GuessRecord] = msgspec.field(default_factory=list)
    finished_at: datetime | None = None

    def find_record(self, record_id: str) -> GuessRecord | None:
        for record in self.history:
            if record.id == record_id:
                return record
        return None


class SessionStats(msgspec.Struct, frozen=True):
    """Win/loss tally for the running process."""

    wins: int = 0
    losses: int = 0
    best_score: int | None = None

    @property
    def rounds_played(self) -> int:
        return self.wins + self.losses


class CommentaryRequest(msgspec.Struct, frozen=True):
    """Everything a commentary provider gets to see about the latest guess."""

    secret: str
    history: tuple[GuessRecord, ...]
    latest_guess: str
    strikes: int
    balls: int

from __future__ import annotations

from datetime import UTC, datetime

import attrs
import msgspec

from numerus.core.models.enums import RoundStatus, SessionEventKind
from numerus.core.models.round import GuessRecord, Round, SessionStats


@attrs.frozen(slots=True)
class CommentaryTicket:
    """Identifies the record an outstanding commentary fetch will patch."""

    round_id: str
    record_id: str


@attrs.frozen(slots=True)
class SessionEvent:
    kind: SessionEventKind
    round_id: str
    record_id: str | None = None


@attrs.frozen(slots=True)
class RoundView:
    """Read-only snapshot of the current round for the presentation layer.

    The secret is withheld while the round is in progress or won, so the
    rendering side can never leak it by accident.
    """

    round_id: str
    status: RoundStatus
    history: tuple[GuessRecord, ...]
    max_attempts: int
    awaiting_commentary: bool = False
    secret: str | None = None

    @property
    def attempts(self) -> int:
        return len(self.history)

    @property
    def attempts_left(self) -> int:
        return max(self.max_attempts - self.attempts, 0)

    @property
    def last_record(self) -> GuessRecord | None:
        return self.history[-1] if self.history else None

    @classmethod
    def from_round(cls, round_: Round, max_attempts: int, awaiting: bool) -> RoundView:
        return cls(
            round_id=round_.id,
            status=round_.status,
            history=tuple(msgspec.structs.replace(record) for record in round_.history),
            max_attempts=max_attempts,
            awaiting_commentary=awaiting,
            secret=round_.secret if round_.status is RoundStatus.LOST else None,
        )


def apply_guess(round_: Round, record: GuessRecord, max_attempts: int) -> RoundStatus:
    """Append ``record`` and settle the round status.

    The win check runs before the attempt cap, so a winning final guess wins.
    """
    round_.history.append(record)
    if record.evaluation.is_win:
        round_.status = RoundStatus.WON
    elif len(round_.history) >= max_attempts:
        round_.status = RoundStatus.LOST
    if round_.status.is_terminal:
        round_.finished_at = datetime.now(UTC)
    return round_.status


def record_win(stats: SessionStats, attempts: int) -> SessionStats:
    best = attempts if stats.best_score is None else min(stats.best_score, attempts)
    return msgspec.structs.replace(stats, wins=stats.wins + 1, best_score=best)


def record_loss(stats: SessionStats) -> SessionStats:
    return msgspec.structs.replace(stats, losses=stats.losses + 1)

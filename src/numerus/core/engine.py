from __future__ import annotations

import random
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from datetime import UTC, datetime
from functools import partial
from types import TracebackType
from uuid import uuid4

import structlog

from numerus.core.constants import FALLBACK_COMMENTARY, MAX_ATTEMPTS, SECRET_LENGTH
from numerus.core.evaluator import evaluate
from numerus.core.generator import generate_secret
from numerus.core.models.enums import RoundStatus, SessionEventKind
from numerus.core.models.round import CommentaryRequest, GuessRecord, Round, SessionStats
from numerus.core.protocols import CommentaryProvider
from numerus.core.state import (
    CommentaryTicket,
    RoundView,
    SessionEvent,
    apply_guess,
    record_loss,
    record_win,
)
from numerus.core.validator import is_valid_guess

log: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

SessionListener = Callable[[SessionEvent], None]


class GameSession:
    """Drives rounds with explicit state transitions.

    All mutations happen under one lock. A submitted guess is scored, recorded
    and settled synchronously; the commentary for it is fetched on the executor
    and patched into the record later, unless a new round started meanwhile.
    """

    def __init__(
        self,
        provider: CommentaryProvider,
        stats: SessionStats | None = None,
        rng: random.Random | None = None,
        executor: Executor | None = None,
        max_attempts: int = MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self._provider = provider
        self._stats = stats if stats is not None else SessionStats()
        self._rng = rng
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="numerus-commentary"
        )
        self._max_attempts = max_attempts
        self._lock = threading.Lock()
        self._round: Round | None = None
        self._pending: Future[str] | None = None
        self._pending_ticket: CommentaryTicket | None = None
        self._settled = threading.Event()
        self._settled.set()
        self._listeners: list[SessionListener] = []

    def __enter__(self) -> GameSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def awaiting_commentary(self) -> bool:
        return self._pending_ticket is not None

    @property
    def current_round(self) -> RoundView | None:
        """Snapshot of the round in play, or None before the first round."""
        with self._lock:
            if self._round is None:
                return None
            return RoundView.from_round(
                self._round, self._max_attempts, self._pending_ticket is not None
            )

    def view(self) -> RoundView:
        with self._lock:
            if self._round is None:
                raise RuntimeError("No round has been started.")
            return RoundView.from_round(
                self._round, self._max_attempts, self._pending_ticket is not None
            )

    def get_stats(self) -> SessionStats:
        return self._stats

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener`` for session events; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def start_round(self) -> RoundView:
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
                log.debug("commentary_abandoned", round_id=self._round.id if self._round else None)
            self._pending = None
            self._pending_ticket = None
            self._settled.set()
            self._round = Round(
                id=uuid4().hex,
                secret=generate_secret(SECRET_LENGTH, self._rng),
                started_at=datetime.now(UTC),
            )
            view = RoundView.from_round(self._round, self._max_attempts, False)
        log.info("round_started", round_id=view.round_id, max_attempts=self._max_attempts)
        self._notify(SessionEvent(kind=SessionEventKind.ROUND_STARTED, round_id=view.round_id))
        return view

    def submit_guess(self, guess: str) -> GuessRecord | None:
        """Score and record ``guess``.

        Out-of-contract calls (no round, finished round, commentary pending,
        malformed guess) are ignored and return None.
        """
        with self._lock:
            round_ = self._round
            reason = self._rejection_reason(round_, guess)
            if round_ is None or reason is not None:
                log.debug("guess_rejected", reason=reason or "no_round")
                return None
            result = evaluate(round_.secret, guess)
            record = GuessRecord(
                id=uuid4().hex,
                guess=guess,
                strikes=result.strikes,
                balls=result.balls,
                submitted_at=datetime.now(UTC),
            )
            status = apply_guess(round_, record, self._max_attempts)
            attempts = len(round_.history)
            if status is RoundStatus.WON:
                self._stats = record_win(self._stats, attempts)
            elif status is RoundStatus.LOST:
                self._stats = record_loss(self._stats)
            ticket = CommentaryTicket(round_id=round_.id, record_id=record.id)
            request = CommentaryRequest(
                secret=round_.secret,
                history=tuple(round_.history[:-1]),
                latest_guess=guess,
                strikes=result.strikes,
                balls=result.balls,
            )
            self._pending_ticket = ticket
            self._settled.clear()
        log.debug(
            "guess_recorded",
            round_id=ticket.round_id,
            strikes=record.strikes,
            balls=record.balls,
            progress=f"{attempts}/{self._max_attempts}",
        )
        if status is RoundStatus.WON:
            log.info("round_won", round_id=ticket.round_id, attempts=attempts)
        elif status is RoundStatus.LOST:
            log.info("round_lost", round_id=ticket.round_id, attempts=attempts)
        self._notify(
            SessionEvent(
                kind=SessionEventKind.GUESS_RECORDED,
                round_id=ticket.round_id,
                record_id=ticket.record_id,
            )
        )
        self._dispatch(ticket, request)
        return record

    def wait_for_commentary(self, timeout: float | None = None) -> bool:
        """Block until the outstanding commentary (if any) is applied."""
        return self._settled.wait(timeout)

    def close(self) -> None:
        """Stop accepting commentary work on an owned executor.

        Queued fetches are cancelled and the call returns without joining the
        worker. A request already in flight runs to completion (bounded by the
        provider timeout) before the worker thread exits.
        """
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

    def _rejection_reason(self, round_: Round | None, guess: str) -> str | None:
        if round_ is None:
            return "no_round"
        if round_.status is not RoundStatus.IN_PROGRESS:
            return "round_finished"
        if self._pending_ticket is not None:
            return "awaiting_commentary"
        if not is_valid_guess(guess):
            return "invalid_guess"
        return None

    def _dispatch(self, ticket: CommentaryTicket, request: CommentaryRequest) -> None:
        try:
            future = self._executor.submit(self._provider.comment, request)
        except RuntimeError as exc:
            log.warning("commentary_failed", round_id=ticket.round_id, error=str(exc))
            self._apply_commentary(ticket, FALLBACK_COMMENTARY)
            return
        with self._lock:
            if self._pending_ticket == ticket:
                self._pending = future
        future.add_done_callback(partial(self._on_commentary_done, ticket))

    def _on_commentary_done(self, ticket: CommentaryTicket, future: Future[str]) -> None:
        if future.cancelled():
            log.debug("commentary_discarded", round_id=ticket.round_id, reason="cancelled")
            return
        exc = future.exception()
        if exc is not None:
            log.warning("commentary_failed", round_id=ticket.round_id, error=str(exc))
            text = FALLBACK_COMMENTARY
        else:
            result = future.result()
            if isinstance(result, str) and result.strip():
                text = result.strip()
            else:
                log.warning("commentary_failed", round_id=ticket.round_id, error="empty response")
                text = FALLBACK_COMMENTARY
        self._apply_commentary(ticket, text)

    def _apply_commentary(self, ticket: CommentaryTicket, text: str) -> None:
        with self._lock:
            round_ = self._round
            if (
                ticket != self._pending_ticket
                or round_ is None
                or round_.id != ticket.round_id
            ):
                log.debug("commentary_discarded", round_id=ticket.round_id, reason="stale")
                return
            self._pending = None
            self._pending_ticket = None
            record = round_.find_record(ticket.record_id)
            if record is not None and record.commentary is None:
                record.commentary = text
            self._settled.set()
        log.debug("commentary_applied", round_id=ticket.round_id, record_id=ticket.record_id)
        self._notify(
            SessionEvent(
                kind=SessionEventKind.COMMENTARY_APPLIED,
                round_id=ticket.round_id,
                record_id=ticket.record_id,
            )
        )

    def _notify(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as exc:
                log.warning(
                    "listener_failed",
                    kind=event.kind.value,
                    round_id=event.round_id,
                    error=str(exc),
                )

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from threading import RLock

from . import events as ev
from .events import Audience, OutboundEvent
from .models import Phase, Player, StrokeEvent
from .words import DEFAULT_WORDS, pick_word


MAX_ROUNDS = 3
MIN_PLAYERS_TO_START = 2
POINTS_PER_CORRECT_GUESS = 10


@dataclass
class GameRoom:
    """State and transition logic for one game session.

    Every operation returns the events it produced instead of emitting them,
    so a transport layer decides how an ``Audience`` maps to live connections.
    Callers must hold ``lock`` for the duration of an operation.
    """

    room_id: str
    max_rounds: int = MAX_ROUNDS
    min_players: int = MIN_PLAYERS_TO_START
    points_per_guess: int = POINTS_PER_CORRECT_GUESS
    words: Sequence[str] = DEFAULT_WORDS
    phase: Phase = "waiting"
    round: int = 0
    current_drawer_id: str | None = None
    current_word: str = ""
    players: list[Player] = field(default_factory=list)
    scores: dict[str, int] = field(default_factory=dict)
    stroke_log: list[StrokeEvent] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    lock: RLock = field(default_factory=RLock, repr=False, compare=False)

    # ---- queries ----

    def get_player(self, connection_id: str) -> Player | None:
        for p in self.players:
            if p.id == connection_id:
                return p
        return None

    def has_player(self, connection_id: str) -> bool:
        return self.get_player(connection_id) is not None

    def is_empty(self) -> bool:
        return not self.players

    def _players_payload(self) -> list[dict]:
        return [p.to_dict() for p in self.players]

    def snapshot(self) -> dict:
        # Never exposes current_word; the drawer learns it from gameStarted/nextRound.
        return {
            "roomId": self.room_id,
            "players": self._players_payload(),
            "gameState": self.phase,
            "round": self.round,
            "maxRounds": self.max_rounds,
            "currentDrawer": self.current_drawer_id,
            "scores": dict(self.scores),
            "strokeCount": len(self.stroke_log),
        }

    # ---- intents ----

    def join(self, connection_id: str, name: str) -> list[OutboundEvent]:
        player = self.get_player(connection_id)
        if player is None:
            self.players.append(Player(id=connection_id, name=name))
            self.scores[connection_id] = 0
        else:
            # Same connection joining again: rename, keep the score.
            player.name = name

        return [
            OutboundEvent(
                ev.ROOM_JOINED,
                {"roomId": self.room_id, "players": self._players_payload(), "gameState": self.phase},
                Audience.SENDER,
            ),
            OutboundEvent(
                ev.PLAYER_JOINED,
                {"playerId": connection_id, "playerName": name},
                Audience.ROOM_EXCEPT_SENDER,
            ),
        ]

    def start(self) -> list[OutboundEvent]:
        if self.phase != "waiting" or len(self.players) < self.min_players:
            return []

        self.phase = "playing"
        self.round = 1
        self.current_drawer_id = self.players[0].id
        self.current_word = self.pick_word()
        self.stroke_log = []

        return [
            OutboundEvent(
                ev.GAME_STARTED,
                {
                    "currentDrawer": self.current_drawer_id,
                    "currentWord": self.current_word,
                    "round": self.round,
                    "maxRounds": self.max_rounds,
                },
                Audience.WHOLE_ROOM,
            )
        ]

    def submit_stroke(self, data: StrokeEvent) -> list[OutboundEvent]:
        # Any member may draw, not only the current drawer.
        if self.phase != "playing":
            return []
        self.stroke_log.append(data)
        return [OutboundEvent(ev.DRAWING, data, Audience.ROOM_EXCEPT_SENDER)]

    def clear_canvas(self) -> list[OutboundEvent]:
        self.stroke_log = []
        return [OutboundEvent(ev.CANVAS_CLEARED, None, Audience.ROOM_EXCEPT_SENDER)]

    def submit_guess(self, connection_id: str, text: str, display_name: str) -> list[OutboundEvent]:
        # Only members can score; anyone else falls through to wrongGuess.
        if self.phase == "playing" and self.is_correct(text) and connection_id in self.scores:
            self.scores[connection_id] += self.points_per_guess
            out = [
                OutboundEvent(
                    ev.CORRECT_GUESS,
                    {"playerId": connection_id, "playerName": display_name, "guess": text},
                    Audience.WHOLE_ROOM,
                )
            ]
            out.append(self.advance_round())
            return out

        # Out-of-phase guesses land here as well.
        return [
            OutboundEvent(
                ev.WRONG_GUESS,
                {"playerName": display_name, "guess": text},
                Audience.ROOM_EXCEPT_SENDER,
            )
        ]

    def is_correct(self, text: str) -> bool:
        return bool(self.current_word) and self.current_word.lower() == text.lower()

    def advance_round(self) -> OutboundEvent:
        self.round += 1
        if self.round > self.max_rounds:
            self.phase = "finished"
            return OutboundEvent(
                ev.GAME_FINISHED,
                {"scores": dict(self.scores), "players": self._players_payload()},
                Audience.WHOLE_ROOM,
            )

        self.current_drawer_id = self._next_drawer_id()
        self.current_word = self.pick_word()
        self.stroke_log = []
        return OutboundEvent(
            ev.NEXT_ROUND,
            {
                "currentDrawer": self.current_drawer_id,
                "currentWord": self.current_word,
                "round": self.round,
                "scores": dict(self.scores),
            },
            Audience.WHOLE_ROOM,
        )

    def leave(self, connection_id: str) -> list[OutboundEvent]:
        player = self.get_player(connection_id)
        if player is None:
            return []

        # The drawer is not replaced here; the round waits for a correct guess.
        self.players = [p for p in self.players if p.id != connection_id]
        self.scores.pop(connection_id, None)

        return [
            OutboundEvent(
                ev.PLAYER_LEFT,
                {"playerId": connection_id, "playerName": player.name},
                Audience.ROOM_EXCEPT_SENDER,
            )
        ]

    def pick_word(self) -> str:
        return pick_word(self.words, self.rng)

    def _next_drawer_id(self) -> str | None:
        if not self.players:
            return None
        ids = [p.id for p in self.players]
        idx = ids.index(self.current_drawer_id) if self.current_drawer_id in ids else -1
        return ids[(idx + 1) % len(ids)]

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Audience(str, Enum):
    SENDER = "sender"
    ROOM_EXCEPT_SENDER = "room_except_sender"
    WHOLE_ROOM = "whole_room"


# Outbound Socket.IO event names
ROOM_JOINED = "roomJoined"
PLAYER_JOINED = "playerJoined"
PLAYER_LEFT = "playerLeft"
GAME_STARTED = "gameStarted"
DRAWING = "drawing"
CANVAS_CLEARED = "canvasCleared"
CORRECT_GUESS = "correctGuess"
WRONG_GUESS = "wrongGuess"
NEXT_ROUND = "nextRound"
GAME_FINISHED = "gameFinished"
ROOM_ERROR = "roomError"


@dataclass(frozen=True)
class OutboundEvent:
    """One event a room operation wants delivered, and to whom.

    ``payload`` is ``None`` for events that carry no body (``canvasCleared``).
    """

    name: str
    payload: Any
    audience: Audience

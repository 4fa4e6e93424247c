from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal


Phase = Literal["waiting", "playing", "finished"]

# {"type": "start" | "draw", "x": float, "y": float, "color"?: str, "width"?: float}
# Relayed as-is; geometry is never interpreted server-side.
StrokeEvent = dict[str, Any]


@dataclass
class Player:
    id: str
    name: str

    def to_dict(self) -> dict:
        return asdict(self)

import json
from typing import List, Dict, Any, Optional

from .solver import Move


class MoveLogger:
    """
    Collects per-move frames for replay/visualization.

    Frame schema:
      { "type": "header", "disks": int, "total": int }
      {
        "type": "move",
        "index": int,          # 1-based position in the sequence
        "from": int,
        "to": int,
        "pegs": { label: [disk, ...], ... }   # optional, state after the move
      }
    """

    def __init__(self):
        self.events: List[Dict[str, Any]] = []

    def header(self, disks: int, total: int):
        self.events.append({"type": "header", "disks": disks, "total": total})

    def record(self, index: int, move: Move, pegs: Optional[Dict[str, List[int]]] = None):
        frame: Dict[str, Any] = {
            "type": "move",
            "index": index,
            "from": move.from_peg,
            "to": move.to_peg,
        }
        if pegs is not None:
            frame["pegs"] = pegs
        self.events.append(frame)

    def moves(self) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["type"] == "move"]

    def to_json(self, path: str):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.events, f, indent=2)

"""
Slot Layout Module - Layered slot geometry and the blocking rule.

A slot is blocked while any occupied slot on a strictly higher layer
overlaps its rectangle. Only unblocked, occupied slots are selectable.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import numpy as np

from ..solver.board import EMPTY

logger = logging.getLogger(__name__)

# Tile width and height in layout pixels (same for all levels)
TILE_SIZE = 48


@dataclass(frozen=True)
class Slot:
    """
    One board position in layout space.

    Attributes:
        px: Left edge in pixels
        py: Top edge in pixels
        z: Layer index (higher layers sit on top)
        slot_id: Human-readable identifier
    """
    px: float
    py: float
    z: int
    slot_id: str = ""


class SlotLayout:
    """
    Fixed slot geometry for a level.

    The covers matrix is computed once: covers[i, j] is True when slot j
    sits on a higher layer than slot i and their rectangles overlap.
    Edge or corner contact alone is not an overlap.

    The instance is callable and can be passed directly as the
    selectable-positions collaborator of is_solvable().
    """

    def __init__(self, slots: Sequence[Slot], tile_w: float = TILE_SIZE,
                 tile_h: float = TILE_SIZE):
        """
        Initialize the layout.

        Args:
            slots: Slots in board-position order
            tile_w: Tile width in pixels
            tile_h: Tile height in pixels
        """
        self.slots: List[Slot] = list(slots)
        self.tile_w = tile_w
        self.tile_h = tile_h

        xs = np.array([s.px for s in self.slots], dtype=np.float64)
        ys = np.array([s.py for s in self.slots], dtype=np.float64)
        zs = np.array([s.z for s in self.slots], dtype=np.int64)

        overlap_x = (xs[:, None] < xs[None, :] + tile_w) & (xs[:, None] + tile_w > xs[None, :])
        overlap_y = (ys[:, None] < ys[None, :] + tile_h) & (ys[:, None] + tile_h > ys[None, :])
        higher = zs[None, :] > zs[:, None]

        self._covers = overlap_x & overlap_y & higher

    def __len__(self) -> int:
        return len(self.slots)

    def __call__(self, board: Sequence[int]) -> List[int]:
        return self.selectable_positions(board)

    def selectable_positions(self, board: Sequence[int]) -> List[int]:
        """
        Positions that hold a piece and are not covered by any other piece.

        Board positions beyond the layout's slots are never selectable.

        Args:
            board: Slot values (piece type or EMPTY)

        Returns:
            Selectable positions in ascending order
        """
        count = len(self.slots)
        occupied = np.zeros(count, dtype=bool)
        used = min(count, len(board))
        if used:
            occupied[:used] = np.asarray(board[:used]) != EMPTY

        blocked = (self._covers & occupied[None, :]).any(axis=1)
        return np.flatnonzero(occupied & ~blocked).tolist()

    def blockers_of(self, position: int) -> List[int]:
        """All slots that would cover position while occupied."""
        return np.flatnonzero(self._covers[position]).tolist()

    def layer_counts(self) -> Dict[int, int]:
        """Number of slots per layer."""
        counts: Dict[int, int] = {}
        for slot in self.slots:
            counts[slot.z] = counts.get(slot.z, 0) + 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        """Serializable representation (inverse of from_dict)."""
        return {
            "tile_w": self.tile_w,
            "tile_h": self.tile_h,
            "slots": [
                {"px": s.px, "py": s.py, "z": s.z, "slot_id": s.slot_id}
                for s in self.slots
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SlotLayout':
        """
        Create a layout from its dict representation.

        Args:
            data: {"tile_w": .., "tile_h": .., "slots": [{"px", "py", "z", "slot_id"}]}

        Returns:
            SlotLayout instance

        Raises:
            ValueError: If the slot list is missing or a slot is malformed
        """
        raw_slots = data.get("slots")
        if not isinstance(raw_slots, list):
            raise ValueError("Layout must contain a 'slots' list")

        slots = []
        for index, raw in enumerate(raw_slots):
            try:
                slots.append(Slot(
                    px=float(raw["px"]),
                    py=float(raw["py"]),
                    z=int(raw["z"]),
                    slot_id=str(raw.get("slot_id", f"slot_{index}")),
                ))
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"Malformed slot {index}: {e}") from e

        return cls(
            slots,
            tile_w=float(data.get("tile_w", TILE_SIZE)),
            tile_h=float(data.get("tile_h", TILE_SIZE)),
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'SlotLayout':
        """
        Load a layout from a JSON file.

        Raises:
            ValueError: If the file cannot be read, is not valid JSON or
                is not a valid layout
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid layout file {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read layout file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Invalid layout file {path}: expected an object")

        layout = cls.from_dict(data)
        logger.debug(f"Loaded layout {path}: {len(layout)} slots, layers {layout.layer_counts()}")
        return layout

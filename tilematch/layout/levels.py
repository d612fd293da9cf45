"""
Level Layouts - Built-in slot geometries.
"""

from typing import Callable, Dict, List

from .slots import TILE_SIZE, Slot, SlotLayout

GAP_X = 18
GAP_Y = 18


def build_level1_slots() -> List[Slot]:
    """
    Two 3x3 layers; the top layer is shifted down by a quarter tile.

    Each top tile covers exactly the bottom tile beneath it.
    """
    slots = []
    for z, name, shift in ((0, "bottom", 0), (1, "top", TILE_SIZE / 4)):
        for row in range(3):
            for col in range(3):
                slots.append(Slot(
                    px=col * (TILE_SIZE + GAP_X),
                    py=row * (TILE_SIZE + GAP_Y) + shift,
                    z=z,
                    slot_id=f"level1_{name}_{row}_{col}",
                ))
    return slots


def build_flat_slots(count: int, columns: int = 6) -> List[Slot]:
    """Single layer grid; nothing is ever blocked."""
    return [
        Slot(
            px=(index % columns) * (TILE_SIZE + GAP_X),
            py=(index // columns) * (TILE_SIZE + GAP_Y),
            z=0,
            slot_id=f"flat_{index}",
        )
        for index in range(count)
    ]


def build_stacked_slots(rows: int, cols: int, layers: int) -> List[Slot]:
    """
    Pyramid stacking: layer z has (rows - z) x (cols - z) tiles offset by
    half a tile per layer, so an upper tile covers up to four tiles below.
    """
    slots = []
    for z in range(layers):
        offset = z * TILE_SIZE / 2
        for row in range(rows - z):
            for col in range(cols - z):
                slots.append(Slot(
                    px=offset + col * TILE_SIZE,
                    py=offset + row * TILE_SIZE,
                    z=z,
                    slot_id=f"stacked_z{z}_{row}_{col}",
                ))
    return slots


# Named layouts available from the command line
LEVELS: Dict[str, Callable[[], List[Slot]]] = {
    "level1": build_level1_slots,
    "flat": lambda: build_flat_slots(18),
    "stacked": lambda: build_stacked_slots(6, 7, 2),
}


def create_layout(name: str) -> SlotLayout:
    """
    Build a named layout.

    Raises:
        ValueError: If name is not a known layout
    """
    if name not in LEVELS:
        available = ", ".join(LEVELS.keys())
        raise ValueError(f"Unknown level: {name}. Available: {available}")
    return SlotLayout(LEVELS[name]())

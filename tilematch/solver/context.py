"""
Solve Context Module - Budget configuration and per-call context for strategies.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

from .board import BoardState

# Pure function from slot values to the positions a player could pick now
SelectablePositions = Callable[[Tuple[int, ...]], Iterable[int]]

DEFAULT_BEAM_WIDTH = 100
DEFAULT_MAX_EXPANSIONS = 5000
DEFAULT_MAX_DEPTH = 200

# Accepted spellings for each budget option
_CONFIG_KEYS = {
    "beam_width": ("beam_width", "beamWidth"),
    "max_expansions": ("max_expansions", "maxExpansions"),
    "max_depth": ("max_depth", "maxDepth"),
}


@dataclass(frozen=True)
class SolverConfig:
    """
    Search budget for one solve call.

    Attributes:
        beam_width: Maximum frontier size kept per depth
        max_expansions: Global cap on move expansions across the search
        max_depth: Maximum number of picks considered
    """
    beam_width: int = DEFAULT_BEAM_WIDTH
    max_expansions: int = DEFAULT_MAX_EXPANSIONS
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        for name in _CONFIG_KEYS:
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> 'SolverConfig':
        """
        Build a config from a dict of options.

        Both snake_case and camelCase keys are accepted. Missing or falsy
        values fall back to the defaults.

        Args:
            options: Mapping such as {"beamWidth": 50}

        Returns:
            SolverConfig instance
        """
        values = {}
        for name, keys in _CONFIG_KEYS.items():
            for key in keys:
                if options.get(key):
                    values[name] = int(options[key])
                    break
        return cls(**values)

    @classmethod
    def coerce(
        cls,
        config: Union['SolverConfig', Mapping[str, Any], None]
    ) -> 'SolverConfig':
        """Normalize None, a mapping or a SolverConfig into a SolverConfig."""
        if config is None:
            return cls()
        if isinstance(config, SolverConfig):
            return config
        return cls.from_mapping(config)


@dataclass
class SolveContext:
    """
    Everything a strategy needs for one solve call.

    Attributes:
        board: Initial board snapshot
        selectable_positions: Layering collaborator owned by the caller
        config: Search budget
        progress_callback: Optional callback for per-depth progress
    """
    board: BoardState
    selectable_positions: SelectablePositions
    config: SolverConfig = field(default_factory=SolverConfig)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

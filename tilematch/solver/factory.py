"""
Strategy Factory Module - Registry of solver strategies by name.
"""

from typing import Dict, List, Type, Any

from .base import SolverStrategy


# Strategy classes keyed by their name attribute
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "beam"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a solver strategy to the registry.

    Usage:
        @register_strategy
        class DepthFirstStrategy(SolverStrategy):
            name = "dfs"
            ...
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str = DEFAULT_STRATEGY, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate a registered solver strategy.

    Args:
        name: Strategy name, e.g. "beam"
        **kwargs: Passed to the strategy constructor (e.g. weights=...)

    Raises:
        ValueError: If no strategy is registered under name
    """
    try:
        cls = _STRATEGIES[name]
    except KeyError:
        available = ", ".join(get_strategy_names())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None
    return cls(**kwargs)


def get_strategy_names() -> List[str]:
    """Registered strategy names, sorted."""
    return sorted(_STRATEGIES)


def describe_strategies() -> str:
    """One "name: description" line per registered strategy, for help text."""
    return "\n".join(
        f"  {name}: {_STRATEGIES[name].description}"
        for name in get_strategy_names()
    )

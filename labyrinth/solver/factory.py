"""
Algorithm Registry - Maps algorithm names to their classes.

Strategy modules decorate their class with @register_algorithm; the CLI,
the executor builder and the saved settings then refer to algorithms by
name only.
"""

import logging
from typing import Any, Dict, List, Type

from ..errors import ConfigurationError
from .base import Algorithm

logger = logging.getLogger(__name__)


# name -> class, in registration order
_ALGORITHMS: Dict[str, Type[Algorithm]] = {}

# Used when neither the command line nor config.json names an algorithm
DEFAULT_ALGORITHM = "depth-first"


def register_algorithm(cls: Type[Algorithm]) -> Type[Algorithm]:
    """
    Class decorator adding an Algorithm subclass under its `name`.

    A later class with the same name replaces the earlier one.

    Example:
        @register_algorithm
        class WallFollower(Algorithm):
            name = "wall-follower"
    """
    if cls.name in _ALGORITHMS:
        logger.warning(f"Algorithm {cls.name!r} registered twice, keeping {cls.__name__}")
    _ALGORITHMS[cls.name] = cls
    return cls


def create_algorithm(name: str, **kwargs: Any) -> Algorithm:
    """
    Instantiate a registered algorithm.

    Every call returns a new instance, so no search state is shared
    between runs.

    Raises:
        ConfigurationError: If no algorithm is registered under `name`
    """
    try:
        cls = _ALGORITHMS[name]
    except KeyError:
        known = ", ".join(_ALGORITHMS) or "none"
        raise ConfigurationError(f"Unknown algorithm: {name}. Available: {known}") from None
    logger.debug(f"Instantiating {cls.__name__} for {name!r}")
    return cls(**kwargs)


def get_algorithm_names() -> List[str]:
    return list(_ALGORITHMS)


def get_algorithm_info() -> List[Dict[str, str]]:
    """Name and one-line description of each registered algorithm."""
    return [
        {"name": name, "description": cls.description}
        for name, cls in _ALGORITHMS.items()
    ]


def get_default_algorithm_name() -> str:
    """
    Name of the algorithm used when none is chosen.

    Falls back to the first registered algorithm if DEFAULT_ALGORITHM is
    not registered.

    Raises:
        ConfigurationError: If no algorithm is registered at all
    """
    if DEFAULT_ALGORITHM in _ALGORITHMS:
        return DEFAULT_ALGORITHM
    if not _ALGORITHMS:
        raise ConfigurationError("No algorithms are registered")
    return next(iter(_ALGORITHMS))

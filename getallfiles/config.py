"""Configuration system for getallfiles.

This module defines how users describe a traversal: which directories to
skip, whether the root is resolved to an absolute path, and how the
asynchronous walker schedules its directory reads.
"""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, List, Optional, Sequence, Union


PathLike = Union[str, "os.PathLike[str]"]

# Default cap on simultaneously in-flight directory reads (async mode)
DEFAULT_MAX_CONCURRENT = 32


class TraversalStrategy(Enum):
    """How the asynchronous walker schedules directory reads."""
    WORKER_POOL = "pool"     # Bounded workers pulling from a shared queue
    LEVEL_ORDER = "level"    # One frontier level at a time


def parse_strategy(value):
    """Map a strategy name ('pool', 'level', any case) to TraversalStrategy.

    Anything that is not a known name is returned unchanged, so callers
    can report it in their own terms.
    """
    if isinstance(value, str):
        try:
            return TraversalStrategy(value.lower())
        except ValueError:
            return value
    return value


class ConfigurationError(ValueError):
    """Raised when a TraversalConfig is not usable."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid traversal configuration: " + "; ".join(self.errors))


@dataclass
class TraversalConfig:
    """Complete configuration for a file listing.

    Exclusion is evaluated against the directory path exactly as the
    traversal constructs it, so entries in ``excluded_dirs`` must match
    the form of the root (relative or resolved).
    """

    # Exact-match exclusion list (compared after separator normalization)
    excluded_dirs: Sequence[PathLike] = field(default_factory=list)

    # Predicate receiving the constructed directory path
    is_excluded_dir: Optional[Callable[[str], bool]] = None

    # Resolve the root (only the root) to an absolute path
    resolve: bool = False

    # Async scheduling
    max_concurrent: int = DEFAULT_MAX_CONCURRENT
    strategy: TraversalStrategy = TraversalStrategy.WORKER_POOL

    def __post_init__(self):
        # Unknown names are left as-is and reported by validate()
        self.strategy = parse_strategy(self.strategy)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if isinstance(self.excluded_dirs, (str, bytes)) or hasattr(self.excluded_dirs, '__fspath__'):
            errors.append("excluded_dirs must be a sequence of paths, not a single path")
        elif self.excluded_dirs is None:
            errors.append("excluded_dirs cannot be None")

        if self.is_excluded_dir is not None and not callable(self.is_excluded_dir):
            errors.append("is_excluded_dir must be callable")

        if isinstance(self.max_concurrent, bool) or not isinstance(self.max_concurrent, int):
            errors.append("max_concurrent must be an integer")
        elif self.max_concurrent < 1:
            errors.append("max_concurrent must be at least 1")

        if not isinstance(self.strategy, TraversalStrategy):
            choices = ', '.join(s.value for s in TraversalStrategy)
            errors.append(f"Unknown traversal strategy: {self.strategy!r}. Choose from: {choices}")

        return errors

    def ensure_valid(self) -> 'TraversalConfig':
        """Raise ConfigurationError if validate() reports problems."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(errors)
        return self


def build_config(config: Optional[TraversalConfig] = None, **options) -> TraversalConfig:
    """Create (or override) a validated TraversalConfig.

    Args:
        config: Base configuration (defaults if None)
        **options: TraversalConfig field overrides

    Raises:
        ConfigurationError: If the resulting configuration is invalid
        TypeError: If an option is not a TraversalConfig field
    """
    if config is None:
        config = TraversalConfig(**options)
    elif options:
        config = replace(config, **options)
    return config.ensure_valid()

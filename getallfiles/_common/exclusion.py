"""Directory exclusion shared by both traversal modes."""

import logging

from ..config import TraversalConfig
from .paths import normalize_path

logger = logging.getLogger(__name__)


def is_excluded(dir_path: str, config: TraversalConfig) -> bool:
    """Decide whether a directory (and its whole subtree) is skipped.

    The ``is_excluded_dir`` predicate runs first and short-circuits. The
    ``excluded_dirs`` entries only match on full normalized equality with
    the path the traversal constructed, never on a prefix.

    Args:
        dir_path: Directory path as built by the traversal
        config: Active traversal configuration

    Returns:
        True if the directory must not be listed
    """
    if config.is_excluded_dir is not None and config.is_excluded_dir(dir_path):
        logger.debug("Skipping %s (is_excluded_dir)", dir_path)
        return True

    if config.excluded_dirs:
        candidate = normalize_path(dir_path)
        for excluded in config.excluded_dirs:
            if normalize_path(excluded) == candidate:
                logger.debug("Skipping %s (excluded_dirs)", dir_path)
                return True

    return False

"""
Checkpoint vocabulary membership.
"""

from typing import Any

from ..config.constants import KNOWN_CHECKPOINTS


def is_valid_checkpoint(checkpoint: Any) -> bool:
    """
    Check whether a checkpoint name belongs to the known vocabulary.

    Matching is exact and case-sensitive. Retired checkpoints are
    reported as unknown.

    Args:
        checkpoint: Checkpoint name reported by the client

    Returns:
        True if the checkpoint is in the active vocabulary

    Examples:
        >>> is_valid_checkpoint("click")
        True
        >>> is_valid_checkpoint("Click")
        False
    """
    return isinstance(checkpoint, str) and checkpoint in KNOWN_CHECKPOINTS

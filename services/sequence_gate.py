"""
Sequence number uniqueness check.
"""
from core.db import Database
from core.logger import setup_logger

logger = setup_logger(__name__)


class SequenceGate:
    """Answers whether a sequence number has already been recorded."""

    def __init__(self, db: Database):
        self.db = db

    def exists(self, seq: int) -> bool:
        """
        Check whether seq is already stored.

        Args:
            seq: Sequence number to look up

        Returns:
            True if a wire message with this seq exists

        Raises:
            InfrastructureError: If the lookup itself fails
        """
        found = self.db.sequence_exists(seq)
        logger.debug(f"Sequence {seq} exists: {found}")
        return found

"""
Wire message intake service.
Orchestrates parse -> sequence check -> persist, plus retrieval.
"""
from typing import List, Optional

from core.config import Settings, get_settings
from core.db import Database
from core.exceptions import ConflictError, NotFoundError, ParseError, ValidationError
from core.logger import setup_logger
from core.parsing import parse_wire_message
from core.schema import WireMessageRecord
from services.sequence_gate import SequenceGate

logger = setup_logger(__name__)


class WireMessageService:
    """Service for accepting and retrieving wire messages."""

    def __init__(self, db: Database, settings: Optional[Settings] = None):
        """
        Initialize wire message service.

        Args:
            db: Persistence layer
            settings: Application settings (defaults to the global settings)
        """
        self.db = db
        self.settings = settings or get_settings()
        self.sequence_gate = SequenceGate(db)

    def ingest(self, raw: str, caller: Optional[str] = None) -> WireMessageRecord:
        """
        Parse, de-duplicate and persist a single wire message.

        Every failure happens before or instead of the insert, so a failed
        call leaves stored state unchanged.

        Args:
            raw: Unparsed message text
            caller: Authenticated username, for logging only

        Returns:
            Persisted record with id and created_at

        Raises:
            ParseError: If the message violates a format rule
            ConflictError: If the sequence number is already recorded
            InfrastructureError: If the store cannot be queried or written
        """
        try:
            candidate = parse_wire_message(raw)
        except ParseError as e:
            logger.info(f"Rejected wire message from {caller or 'anonymous'}: {e.message}")
            raise

        if self.sequence_gate.exists(candidate.seq):
            logger.info(f"Rejected duplicate sequence number {candidate.seq}")
            raise ConflictError(candidate.seq)

        record = self.db.insert_wire_message(candidate)
        logger.info(
            f"Accepted wire message seq={record.seq} id={record.id} "
            f"from {caller or 'anonymous'}"
        )
        return record

    def get_wire_message(self, seq: int) -> WireMessageRecord:
        """
        Get a stored wire message by sequence number.

        Raises:
            NotFoundError: If no message has this sequence number
        """
        record = self.db.get_wire_message(seq)
        if record is None:
            raise NotFoundError("Wire message not found", details={"seq": seq})
        return record

    def list_wire_messages(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[WireMessageRecord]:
        """
        List stored wire messages, optionally one page at a time.

        Args:
            page: 1-based page number; defaults to 1 when only limit is given
            limit: Page size; defaults to the configured page size when only page is given

        Returns:
            Records ordered by id

        Raises:
            ValidationError: If page or limit is less than 1
        """
        if page is None and limit is None:
            return self.db.list_wire_messages()

        page = 1 if page is None else page
        limit = self.settings.default_page_size if limit is None else limit

        if page < 1:
            raise ValidationError("Invalid page number", details={"page": page})
        if limit < 1:
            raise ValidationError("Invalid limit number", details={"limit": limit})

        return self.db.list_wire_messages(limit=limit, offset=(page - 1) * limit)

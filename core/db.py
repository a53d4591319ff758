import sqlite3
from typing import List, Optional

from core.config import Settings, get_settings
from core.exceptions import ConflictError, InfrastructureError
from core.logger import setup_logger
from core.schema import WireMessageCandidate, WireMessageRecord

logger = setup_logger(__name__)

RECORD_COLUMNS = (
    "id, seq, sender_rtn, sender_an, receiver_rtn, receiver_an, "
    "amount, raw_message, created_at"
)


class Database:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.db_path = self.settings.database_path
        self.timeout = self.settings.database_timeout

    def get_connection(self) -> sqlite3.Connection:
        """Create a database connection."""
        try:
            conn = sqlite3.connect(self.db_path, timeout=self.timeout)
        except sqlite3.Error as e:
            logger.error(f"Failed to open database {self.db_path}: {e}")
            raise InfrastructureError(
                "failed to connect to database",
                details={"database_path": self.db_path, "error": str(e)}
            )
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        """Initialize database tables."""
        conn = self.get_connection()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS wire_messages (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    seq INTEGER NOT NULL UNIQUE,
                    sender_rtn TEXT NOT NULL,
                    sender_an TEXT NOT NULL,
                    receiver_rtn TEXT NOT NULL,
                    receiver_an TEXT NOT NULL,
                    amount INTEGER NOT NULL CHECK (amount >= 0),
                    raw_message TEXT NOT NULL,
                    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
                )
            """)
            conn.commit()
            logger.info("Database initialized successfully")
        except sqlite3.Error as e:
            logger.error(f"Database initialization failed: {e}")
            raise InfrastructureError(
                "failed to initialize database",
                details={"error": str(e)}
            )
        finally:
            conn.close()

    def sequence_exists(self, seq: int) -> bool:
        """Check whether a wire message with this sequence number is stored."""
        conn = self.get_connection()
        cursor = conn.cursor()

        try:
            cursor.execute(
                "SELECT EXISTS(SELECT 1 FROM wire_messages WHERE seq = ?)",
                (seq,)
            )
            return bool(cursor.fetchone()[0])
        except (sqlite3.Error, OverflowError) as e:
            logger.error(f"Failed to check sequence number {seq}: {e}")
            raise InfrastructureError(
                f"failed to check sequence number: {e}",
                details={"seq": seq}
            )
        finally:
            conn.close()

    def insert_wire_message(self, candidate: WireMessageCandidate) -> WireMessageRecord:
        """
        Insert a candidate and return it with the store-assigned id and timestamp.

        The UNIQUE constraint on seq is the authoritative duplicate guard:
        a violation is reported as ConflictError, same as the pre-check.
        """
        conn = self.get_connection()
        cursor = conn.cursor()

        try:
            cursor.execute(
                """
                INSERT INTO wire_messages
                    (seq, sender_rtn, sender_an, receiver_rtn, receiver_an, amount, raw_message)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    candidate.seq,
                    candidate.sender_rtn,
                    candidate.sender_an,
                    candidate.receiver_rtn,
                    candidate.receiver_an,
                    candidate.amount,
                    candidate.raw_message,
                )
            )
            cursor.execute(
                f"SELECT {RECORD_COLUMNS} FROM wire_messages WHERE id = ?",
                (cursor.lastrowid,)
            )
            row = cursor.fetchone()
            conn.commit()
            return _row_to_record(row)
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if "UNIQUE" in str(e) and "seq" in str(e):
                logger.warning(f"Insert rejected by unique constraint for seq {candidate.seq}")
                raise ConflictError(candidate.seq)
            logger.error(f"Failed to insert wire message {candidate.seq}: {e}")
            raise InfrastructureError(
                f"failed to insert wire message: {e}",
                details={"seq": candidate.seq}
            )
        except (sqlite3.Error, OverflowError) as e:
            conn.rollback()
            logger.error(f"Failed to insert wire message {candidate.seq}: {e}")
            raise InfrastructureError(
                f"failed to insert wire message: {e}",
                details={"seq": candidate.seq}
            )
        finally:
            conn.close()

    def get_wire_message(self, seq: int) -> Optional[WireMessageRecord]:
        """Get a wire message by sequence number, or None if absent."""
        conn = self.get_connection()
        cursor = conn.cursor()

        try:
            cursor.execute(
                f"SELECT {RECORD_COLUMNS} FROM wire_messages WHERE seq = ?",
                (seq,)
            )
            row = cursor.fetchone()
            return _row_to_record(row) if row is not None else None
        except (sqlite3.Error, OverflowError) as e:
            logger.error(f"Failed to get wire message {seq}: {e}")
            raise InfrastructureError(str(e), details={"seq": seq})
        finally:
            conn.close()

    def list_wire_messages(
        self,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[WireMessageRecord]:
        """
        List wire messages in insertion order.

        Args:
            limit: Maximum number of records, or None for all
            offset: Number of records to skip

        Returns:
            List of records ordered by id
        """
        conn = self.get_connection()
        cursor = conn.cursor()

        try:
            # SQLite treats a negative LIMIT as unbounded
            cursor.execute(
                f"SELECT {RECORD_COLUMNS} FROM wire_messages ORDER BY id LIMIT ? OFFSET ?",
                (-1 if limit is None else limit, offset)
            )
            return [_row_to_record(row) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            logger.error(f"Failed to list wire messages: {e}")
            raise InfrastructureError(str(e))
        finally:
            conn.close()


def _row_to_record(row: sqlite3.Row) -> WireMessageRecord:
    return WireMessageRecord(
        id=row["id"],
        seq=row["seq"],
        sender_rtn=row["sender_rtn"],
        sender_an=row["sender_an"],
        receiver_rtn=row["receiver_rtn"],
        receiver_an=row["receiver_an"],
        amount=row["amount"],
        raw_message=row["raw_message"],
        created_at=row["created_at"],
    )

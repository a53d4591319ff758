"""
Wire message parsing.

A wire message is six semicolon-separated key=value segments, e.g.:
    seq=5;sender_rtn=021000021;sender_an=629385443170308;
    receiver_rtn=121145307;receiver_an=136657407199052;amount=6666

Parsing stops at the first violated rule; errors are never aggregated.
"""
from typing import Any, Callable, Dict

from core.exceptions import ParseError, ParseErrorKind
from core.logger import setup_logger
from core.schema import WireMessageCandidate
from core.validators import is_exact_length_digits, is_numeric_string

logger = setup_logger(__name__)

SEGMENT_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="
REQUIRED_SEGMENTS = 6
ROUTING_NUMBER_LENGTH = 9

# Largest value the store keeps in an INTEGER column
MAX_STORED_INTEGER = 2 ** 63 - 1
MAX_STORED_INTEGER_DIGITS = len(str(MAX_STORED_INTEGER))


def to_stored_integer(value: str, kind: ParseErrorKind) -> int:
    """
    Convert a digit-only value, rejecting numbers the store cannot hold.

    Length is checked before conversion so oversized input never reaches int().
    """
    significant = value.lstrip("0") or "0"
    if len(significant) > MAX_STORED_INTEGER_DIGITS:
        raise ParseError(kind, details={"digits": len(value)})
    number = int(significant)
    if number > MAX_STORED_INTEGER:
        raise ParseError(kind, details={"digits": len(value)})
    return number


def parse_seq(value: str) -> int:
    """Validate and convert a sequence number."""
    if not value or not is_numeric_string(value):
        raise ParseError(ParseErrorKind.INVALID_SEQ_FORMAT)
    return to_stored_integer(value, ParseErrorKind.INVALID_SEQ_FORMAT)


def parse_routing_number(value: str) -> str:
    """Validate a 9-digit routing number."""
    if not is_exact_length_digits(value, ROUTING_NUMBER_LENGTH):
        raise ParseError(ParseErrorKind.INVALID_ROUTING_NUMBER)
    return value


def parse_account_number(value: str) -> str:
    """Validate a non-empty, digit-only account number."""
    if not value or not is_numeric_string(value):
        raise ParseError(ParseErrorKind.INVALID_ACCOUNT_NUMBER)
    return value


def parse_amount(value: str) -> int:
    """
    Validate and convert a transfer amount.

    Args:
        value: Raw amount text

    Returns:
        Non-negative integer amount

    Raises:
        ParseError: If the value is not numeric, too large to store,
            or converts to a negative number
    """
    if not value or not is_numeric_string(value):
        raise ParseError(ParseErrorKind.INVALID_AMOUNT_FORMAT)
    amount = to_stored_integer(value, ParseErrorKind.INVALID_AMOUNT_FORMAT)
    if amount < 0:
        raise ParseError(ParseErrorKind.NEGATIVE_AMOUNT)
    return amount


FIELD_PARSERS: Dict[str, Callable[[str], Any]] = {
    "seq": parse_seq,
    "sender_rtn": parse_routing_number,
    "sender_an": parse_account_number,
    "receiver_rtn": parse_routing_number,
    "receiver_an": parse_account_number,
    "amount": parse_amount,
}


def parse_wire_message(raw: str) -> WireMessageCandidate:
    """
    Parse raw wire message text into a candidate record.

    Segments without '=' are skipped but still count toward the six
    required segments. Unknown keys are ignored.

    Args:
        raw: Message text exactly as received

    Returns:
        Validated candidate with raw_message set to the untouched input

    Raises:
        ParseError: On the first format rule violated, scanning segments in order
    """
    segments = raw.split(SEGMENT_SEPARATOR)
    if len(segments) != REQUIRED_SEGMENTS:
        logger.debug(f"Rejected message with {len(segments)} segments")
        raise ParseError(
            ParseErrorKind.MALFORMED_MESSAGE,
            details={"segments": len(segments)}
        )

    fields: Dict[str, Any] = {}
    for segment in segments:
        key, separator, value = segment.partition(KEY_VALUE_SEPARATOR)
        if not separator:
            continue

        key = key.strip().lower()
        parser = FIELD_PARSERS.get(key)
        if parser is None:
            continue

        fields[key] = parser(value.strip())

    # Skipped segments, unknown or repeated keys leave a field unset
    missing = sorted(set(FIELD_PARSERS) - set(fields))
    if missing:
        logger.debug(f"Rejected message missing fields: {missing}")
        raise ParseError(
            ParseErrorKind.MALFORMED_MESSAGE,
            details={"missing_fields": missing}
        )

    return WireMessageCandidate(raw_message=raw, **fields)

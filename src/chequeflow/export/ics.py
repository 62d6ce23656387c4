"""
ChequeFlow iCalendar Export

Encodes cheque reminders as RFC 5545 iCalendar documents for import into
calendar applications.

Each cheque becomes one all-day VEVENT on its effective date (reminder date
if set, else due date) with a one-day-before VALARM. Output is deterministic:
the same cheques and the same `now` always produce the same bytes.
"""
from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from ..models import Cheque

CRLF = "\r\n"
MAX_LINE_OCTETS = 75

UID_DOMAIN = "chequeflow.app"
CALENDAR_NAME = "ChequeFlow Reminders"
SINGLE_PRODID = "-//ChequeFlow//Cheque Reminder//EN"
BATCH_PRODID = "-//ChequeFlow//Cheque Reminders//EN"


# =============================================================================
# Value Formatting
# =============================================================================

def format_amount(amount: Decimal, currency: str = "LKR") -> str:
    """
    Format a cheque amount for display.

    Thousands separators, at most two decimals, no trailing zero decimals:
    Decimal("150000") -> "LKR 150,000", Decimal("1234.50") -> "LKR 1,234.5".
    """
    quantized = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{quantized:,.2f}".rstrip("0").rstrip(".")
    return f"{currency} {text}"


def format_ics_date(value: date) -> str:
    return value.strftime("%Y%m%d")


def format_ics_timestamp(value: datetime) -> str:
    """UTC timestamp; naive datetimes are taken to be UTC already."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y%m%dT%H%M%SZ")


def escape_text(value: str) -> str:
    """Escape a TEXT property value (RFC 5545 section 3.3.11)."""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def fold_line(line: str) -> str:
    """
    Fold a content line to at most 75 octets per physical line.

    Continuation lines start with a single space. Multi-byte UTF-8
    characters are never split.
    """
    if len(line.encode("utf-8")) <= MAX_LINE_OCTETS:
        return line

    parts: list[str] = []
    current = ""
    current_octets = 0
    limit = MAX_LINE_OCTETS
    for char in line:
        char_octets = len(char.encode("utf-8"))
        if current_octets + char_octets > limit:
            parts.append(current)
            current = ""
            current_octets = 0
            # Leading space of the continuation line counts toward the limit
            limit = MAX_LINE_OCTETS - 1
        current += char
        current_octets += char_octets
    parts.append(current)
    return (CRLF + " ").join(parts)


# =============================================================================
# Event Construction
# =============================================================================

def event_uid(cheque: Cheque) -> str:
    """Stable event identifier derived from the cheque ID."""
    return f"cheque-{cheque.id}@{UID_DOMAIN}"


def build_event_description(cheque: Cheque) -> list[str]:
    """Description lines for a cheque event; notes omitted when absent."""
    lines = [
        f"Cheque Number: {cheque.cheque_number}",
        f"Payee: {cheque.payee_name}",
        f"Amount: {format_amount(cheque.amount)}",
        f"Bank: {cheque.bank_name}",
        f"Branch: {cheque.branch}",
    ]
    if cheque.notes:
        lines.append(f"Notes: {cheque.notes}")
    return lines


def build_event_lines(cheque: Cheque, stamp: str) -> list[str]:
    """Unfolded content lines of one VEVENT block."""
    event_date = format_ics_date(cheque.effective_date)
    description = "\\n".join(escape_text(line) for line in build_event_description(cheque))
    payee = escape_text(cheque.payee_name)
    amount = escape_text(format_amount(cheque.amount))

    return [
        "BEGIN:VEVENT",
        f"UID:{event_uid(cheque)}",
        f"DTSTAMP:{stamp}",
        f"DTSTART;VALUE=DATE:{event_date}",
        f"DTEND;VALUE=DATE:{event_date}",
        f"SUMMARY:\U0001F4B0 Cheque Due: {payee}",
        f"DESCRIPTION:{description}",
        "BEGIN:VALARM",
        "TRIGGER:-P1D",
        "ACTION:DISPLAY",
        f"DESCRIPTION:Cheque reminder: {payee} - {amount}",
        "END:VALARM",
        "END:VEVENT",
    ]


def _calendar_header(prodid: str) -> list[str]:
    return [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{prodid}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
    ]


def _render(lines: Iterable[str]) -> str:
    return "".join(fold_line(line) + CRLF for line in lines)


# =============================================================================
# Documents
# =============================================================================

def generate_ics_event(cheque: Cheque, now: datetime) -> str:
    """
    Encode one cheque as a self-contained calendar document.

    Args:
        cheque: The cheque to export
        now: Generation time written to DTSTAMP

    Returns:
        iCalendar text with CRLF line endings
    """
    stamp = format_ics_timestamp(now)
    lines = _calendar_header(SINGLE_PRODID)
    lines.extend(build_event_lines(cheque, stamp))
    lines.append("END:VCALENDAR")
    return _render(lines)


def generate_ics_calendar(cheques: Sequence[Cheque], now: datetime) -> str:
    """
    Encode many cheques as one calendar document, one event each, in order.

    An empty sequence yields an envelope with no events; deciding not to
    export at all is up to the caller.
    """
    stamp = format_ics_timestamp(now)
    lines = _calendar_header(BATCH_PRODID)
    lines.append(f"X-WR-CALNAME:{CALENDAR_NAME}")
    for cheque in cheques:
        lines.extend(build_event_lines(cheque, stamp))
    lines.append("END:VCALENDAR")
    return _render(lines)

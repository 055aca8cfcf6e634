"""PDF date strings (``D:YYYYMMDDHHmmSS+HH'mm``)."""

from __future__ import annotations

from datetime import datetime

from .objects import PdfString


def format_pdf_date_time(moment: datetime) -> str:
    """Format an aware datetime as a PDF date string.

    Raises :class:`ValueError` for a naive datetime, which has no offset.
    """
    offset = moment.utcoffset()
    if offset is None:
        raise ValueError("a PDF date needs a timezone-aware datetime")
    total_seconds = int(offset.total_seconds())
    sign = "-" if total_seconds < 0 else "+"
    hours, remainder = divmod(abs(total_seconds), 3600)
    minutes = remainder // 60
    return (
        f"D:{moment.year:04d}{moment.month:02d}{moment.day:02d}"
        f"{moment.hour:02d}{moment.minute:02d}{moment.second:02d}"
        f"{sign}{hours:02d}'{minutes:02d}"
    )


def pdf_date_object(moment: datetime) -> PdfString:
    """The PDF date as a literal string object."""
    return PdfString.literal(format_pdf_date_time(moment))
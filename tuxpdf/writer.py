"""Assembling indirect objects into a complete PDF file."""

from __future__ import annotations

import io
import logging
from operator import itemgetter
from typing import Any, BinaryIO

from .dictionary import Dictionary
from .errors import LowPdfError
from .objects import (
    ObjectId,
    PdfVersion,
    encode_object,
    requires_end_separator,
    requires_separator,
)
from .stream import Stream
from .trailer import PdfTrailer, StandardTrailer
from .xref import Xref, XrefEntry, XrefType, encode_xref_table

logger = logging.getLogger(__name__)

_SKIPPED_TYPES = frozenset({b"ObjStm", b"XRef", b"Linearized"})


class CountingWriter:
    """Wraps a binary stream and counts the bytes written through it."""

    def __init__(self, inner: BinaryIO) -> None:
        self.inner = inner
        self.count = 0

    def write(self, data: bytes) -> int:
        written = self.inner.write(data)
        if written is None:
            written = len(data)
        self.count += written
        return written

    def flush(self) -> None:
        self.inner.flush()


def encode_indirect_object(object_id: ObjectId, value: Any) -> bytes:
    """Encode ``value`` as ``N G obj ... endobj``."""
    header = f"{object_id.object_number} {object_id.generation_number} obj\n"
    lead = b" " if requires_separator(value) else b""
    tail = b" " if requires_end_separator(value) else b""
    return header.encode("ascii") + lead + encode_object(value) + tail + b"\nendobj\n"


def _should_skip(value: Any) -> bool:
    if isinstance(value, Dictionary):
        dictionary = value
    elif isinstance(value, Stream) and isinstance(value.dictionary, Dictionary):
        dictionary = value.dictionary
    else:
        return False
    try:
        kind = dictionary.dictionary_type()
    except LowPdfError:
        return False
    return kind is not None and kind.value in _SKIPPED_TYPES


class PdfDocumentWriter:
    """Collects indirect objects and writes them out as a PDF file."""

    def __init__(self, version: PdfVersion | tuple[int, int] | None = None) -> None:
        if version is None:
            version = PdfVersion()
        elif not isinstance(version, PdfVersion):
            version = PdfVersion(*version)
        self.version = version
        self.trailer = PdfTrailer()
        self.cross_reference_type = XrefType.CROSS_REFERENCE_TABLE
        self._objects: dict[ObjectId, Any] = {}
        self._max_id = 0

    @property
    def max_id(self) -> int:
        """The highest object number handed out so far."""
        return self._max_id

    def next_object_id(self) -> ObjectId:
        """Reserve and return the next object number."""
        self._max_id += 1
        return ObjectId(self._max_id)

    def add_object(self, value: Any) -> ObjectId:
        """Add an object under a fresh id and return that id."""
        object_id = self.next_object_id()
        self._objects[object_id] = value
        return object_id

    def set_object(self, object_id: ObjectId, value: Any) -> None:
        """Store an object under a specific id."""
        self._objects[object_id] = value

    def get_object(self, object_id: ObjectId) -> Any | None:
        return self._objects.get(object_id)

    def remove_object(self, object_id: ObjectId) -> Any | None:
        return self._objects.pop(object_id, None)

    def find_objects_by_number(self, object_number: int) -> list[Any]:
        """All objects with the given object number, in generation order."""
        return [
            value
            for object_id, value in sorted(self._objects.items(), key=itemgetter(0))
            if object_id.object_number == object_number
        ]

    def save(self, writer: BinaryIO) -> None:
        """Write the complete document to a binary stream."""
        xref = Xref(self._max_id + 1, self.cross_reference_type)
        out = CountingWriter(writer)
        out.write(self.version.encode())

        for object_id, value in sorted(self._objects.items(), key=itemgetter(0)):
            if _should_skip(value):
                logger.debug("Skipping object %s", object_id)
                continue
            logger.debug("Writing object %s", object_id)
            xref.insert(
                object_id.object_number,
                XrefEntry.normal(out.count, object_id.generation_number),
            )
            out.write(encode_indirect_object(object_id, value))

        xref_start = out.count
        if self.cross_reference_type is XrefType.CROSS_REFERENCE_STREAM:
            out.write(encode_xref_table(xref))
            out.write(b"trailer\n")
            out.write(StandardTrailer(self.trailer, self._max_id + 1).encode())
        else:
            out.write(xref.write_as_stream(self.trailer, xref_start, self._max_id))
        out.write(f"\nstartxref\n{xref_start}\n%%EOF".encode("ascii"))

    def to_bytes(self) -> bytes:
        """The complete document as bytes."""
        buffer = io.BytesIO()
        self.save(buffer)
        return buffer.getvalue()
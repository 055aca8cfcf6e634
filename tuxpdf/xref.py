"""Cross-reference tables and cross-reference streams."""

from __future__ import annotations

import dataclasses
import struct
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from .objects import Name, ObjectId
from .stream import Stream
from .trailer import PdfTrailer, XRefPdfTrailer

XREF_FIELD_WIDTHS = (1, 4, 2)
_STREAM_RECORD = struct.Struct(">BIH")
_UNUSABLE_GENERATION = 65535


class XrefType(Enum):
    """How cross-reference information is written."""

    CROSS_REFERENCE_STREAM = "stream"
    CROSS_REFERENCE_TABLE = "table"


class XrefEntryKind(Enum):
    """The kind of a cross-reference entry."""

    FREE = "free"
    UNUSABLE_FREE = "unusable_free"
    NORMAL = "normal"
    COMPRESSED = "compressed"


@dataclass(frozen=True)
class XrefEntry:
    """One entry of a cross-reference section."""

    kind: XrefEntryKind
    offset: int = 0
    generation: int = 0
    container: int = 0
    index: int = 0

    @classmethod
    def free(cls) -> XrefEntry:
        return cls(XrefEntryKind.FREE)

    @classmethod
    def unusable_free(cls) -> XrefEntry:
        return cls(XrefEntryKind.UNUSABLE_FREE)

    @classmethod
    def normal(cls, offset: int, generation: int = 0) -> XrefEntry:
        return cls(XrefEntryKind.NORMAL, offset=offset, generation=generation)

    @classmethod
    def compressed(cls, container: int, index: int) -> XrefEntry:
        return cls(XrefEntryKind.COMPRESSED, container=container, index=index)

    @property
    def is_normal(self) -> bool:
        return self.kind is XrefEntryKind.NORMAL

    @property
    def is_compressed(self) -> bool:
        return self.kind is XrefEntryKind.COMPRESSED

    def table_line(self) -> bytes:
        """The 20-byte line of a classic cross-reference table."""
        if self.kind is XrefEntryKind.NORMAL:
            return b"%010d %05d n \n" % (self.offset, self.generation)
        if self.kind is XrefEntryKind.FREE:
            return b"%010d %05d f \n" % (0, 0)
        return b"%010d %05d f \n" % (0, _UNUSABLE_GENERATION)


def _stream_record(entry: XrefEntry, object_number: int) -> bytes:
    if entry.kind is XrefEntryKind.FREE:
        return _STREAM_RECORD.pack(0, object_number, 0)
    if entry.kind is XrefEntryKind.UNUSABLE_FREE:
        return _STREAM_RECORD.pack(0, object_number, _UNUSABLE_GENERATION)
    if entry.kind is XrefEntryKind.NORMAL:
        return _STREAM_RECORD.pack(1, entry.offset, entry.generation)
    return _STREAM_RECORD.pack(2, entry.container, entry.index)


@dataclass
class XrefSection:
    """A run of consecutive object numbers starting at ``starting_id``."""

    starting_id: int
    entries: list[XrefEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def add_entry(self, entry: XrefEntry) -> None:
        self.entries.append(entry)

    def add_unusable_free_entry(self) -> None:
        self.add_entry(XrefEntry.unusable_free())

    def encode(self) -> bytes:
        """The section as written in a cross-reference table; empty if no entries."""
        if self.is_empty:
            return b""
        header = f"{self.starting_id} {len(self.entries)}\n".encode("ascii")
        return header + b"".join(entry.table_line() for entry in self.entries)


class XRefStreamFilter(Enum):
    """Filter applied to the data of a cross-reference stream."""

    ASCII_HEX_DECODE = "ASCIIHexDecode"
    NONE = None

    @property
    def pdf_name(self) -> Name | None:
        return None if self.value is None else Name(self.value)


@dataclass
class Xref:
    """Cross-reference entries keyed by object number."""

    size: int
    cross_reference_type: XrefType = XrefType.CROSS_REFERENCE_TABLE
    entries: dict[int, XrefEntry] = field(default_factory=dict)

    def get(self, object_number: int) -> XrefEntry | None:
        return self.entries.get(object_number)

    def insert(self, object_number: int, entry: XrefEntry) -> None:
        self.entries[object_number] = entry

    def merge(self, other: Xref) -> None:
        """Add the other table's entries without replacing existing ones."""
        for object_number, entry in other.entries.items():
            self.entries.setdefault(object_number, entry)

    def clear(self) -> None:
        self.entries.clear()

    def max_id(self) -> int:
        return max(self.entries, default=0)

    def write_as_stream(
        self, trailer: PdfTrailer, xref_start: int, max_id: int
    ) -> bytes:
        """Encode a cross-reference stream object placed at ``xref_start``.

        The stream takes object number ``max_id + 1``; this table is left
        unchanged.
        """
        from .writer import encode_indirect_object

        stream_number = max_id + 1
        table = dataclasses.replace(self, entries=dict(self.entries))
        table.insert(stream_number, XrefEntry.normal(xref_start, 0))

        stream_filter = XRefStreamFilter.NONE
        data, length, index = create_xref_stream(table, stream_filter)
        dictionary = XRefPdfTrailer(
            trailer=trailer,
            size=stream_number + 1,
            w=list(XREF_FIELD_WIDTHS),
            index=index,
            filter=stream_filter.pdf_name,
            length=length,
        )
        stream = Stream(dictionary=dictionary, content=data)
        return encode_indirect_object(ObjectId(stream_number), stream)


def _sections(
    lookup: Callable[[int], XrefEntry | None], object_numbers: Iterable[int]
) -> Iterator[XrefSection]:
    section: XrefSection | None = None
    for object_number in object_numbers:
        entry = lookup(object_number)
        if entry is None:
            if section is not None:
                yield section
                section = None
            continue
        if section is None:
            section = XrefSection(object_number)
        section.add_entry(entry)
    if section is not None:
        yield section


def create_xref_stream(
    xref: Xref, stream_filter: XRefStreamFilter = XRefStreamFilter.NONE
) -> tuple[bytes, int, list[int]]:
    """Build cross-reference stream data.

    Returns the (possibly filtered) data, the unfiltered length and the
    ``/Index`` array of first object number and count pairs.
    """
    data = bytearray()
    index: list[int] = []
    for section in _sections(xref.get, range(1, xref.size + 1)):
        index.extend((section.starting_id, len(section)))
        for object_number, entry in enumerate(section.entries, section.starting_id):
            data += _stream_record(entry, object_number)

    length = len(data)
    encoded = bytes(data)
    if stream_filter is XRefStreamFilter.ASCII_HEX_DECODE:
        encoded = encoded.hex().upper().encode("ascii")
    return encoded, length, index


def encode_xref_table(xref: Xref) -> bytes:
    """Encode a classic ``xref`` table, object 0 always being unusable."""

    def lookup(object_number: int) -> XrefEntry | None:
        if object_number == 0:
            return XrefEntry.unusable_free()
        entry = xref.get(object_number)
        if entry is not None and entry.is_compressed:
            return XrefEntry.unusable_free()
        return entry

    sections = _sections(lookup, range(max(xref.size, 1)))
    return b"xref\n" + b"".join(section.encode() for section in sections)
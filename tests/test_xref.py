import struct

import pytest

from tuxpdf.objects import Name, ObjectId
from tuxpdf.trailer import PdfTrailer
from tuxpdf.xref import (
    Xref,
    XrefEntry,
    XrefEntryKind,
    XrefSection,
    XRefStreamFilter,
    XrefType,
    create_xref_stream,
    encode_xref_table,
)

RECORD = struct.Struct(">BIH")


def _records(data, index):
    records = {}
    position = 0
    for first, count in zip(index[::2], index[1::2]):
        for number in range(first, first + count):
            records[number] = RECORD.unpack(data[position : position + RECORD.size])
            position += RECORD.size
    return records


@pytest.mark.parametrize("offset,generation", [(0, 0), (17, 0), (123456, 3)])
def test_normal_table_line_round_trip(offset, generation):
    line = XrefEntry.normal(offset, generation).table_line()
    assert len(line) == 20
    assert int(line[:10]) == offset
    assert int(line[11:16]) == generation
    assert line.endswith(b" n \n")


def test_free_table_lines():
    assert XrefEntry.free().table_line() == b"0000000000 00000 f \n"
    assert XrefEntry.unusable_free().table_line() == b"0000000000 65535 f \n"
    assert XrefEntry.compressed(4, 2).table_line() == XrefEntry.unusable_free().table_line()


def test_entry_kind_predicates():
    assert XrefEntry.normal(5).is_normal
    assert not XrefEntry.normal(5).is_compressed
    assert XrefEntry.compressed(1, 2).is_compressed
    assert XrefEntry.free().kind is XrefEntryKind.FREE


def test_empty_section_encodes_nothing():
    section = XrefSection(4)
    assert section.is_empty
    assert section.encode() == b""


def test_section_encode_lists_entries():
    section = XrefSection(5)
    section.add_entry(XrefEntry.normal(10))
    section.add_unusable_free_entry()
    lines = section.encode().split(b"\n")
    assert [int(part) for part in lines[0].split()] == [5, 2]
    assert lines[1] + b"\n" == XrefEntry.normal(10).table_line()
    assert lines[2] + b"\n" == XrefEntry.unusable_free().table_line()


def test_xref_insert_get_clear_and_max_id():
    xref = Xref(10)
    assert xref.max_id() == 0
    entry = XrefEntry.normal(99)
    xref.insert(7, entry)
    xref.insert(3, XrefEntry.free())
    assert xref.get(7) == entry
    assert xref.get(4) is None
    assert xref.max_id() == 7
    xref.clear()
    assert xref.get(7) is None
    assert xref.cross_reference_type is XrefType.CROSS_REFERENCE_TABLE


def test_merge_keeps_existing_entries():
    first = Xref(5)
    first.insert(1, XrefEntry.normal(10))
    second = Xref(5)
    second.insert(1, XrefEntry.normal(20))
    second.insert(2, XrefEntry.normal(30))
    first.merge(second)
    assert first.get(1) == XrefEntry.normal(10)
    assert first.get(2) == XrefEntry.normal(30)


def test_create_xref_stream_splits_sections_at_gaps():
    xref = Xref(4)
    xref.insert(1, XrefEntry.normal(15, 0))
    xref.insert(2, XrefEntry.normal(40, 1))
    xref.insert(4, XrefEntry.compressed(9, 3))
    data, length, index = create_xref_stream(xref, XRefStreamFilter.NONE)
    assert index == [1, 2, 4, 1]
    assert len(data) == length
    assert length == RECORD.size * len(xref.entries)
    records = _records(data, index)
    assert records[1] == (1, 15, 0)
    assert records[2] == (1, 40, 1)
    assert records[4] == (2, 9, 3)


def test_create_xref_stream_free_records_carry_object_number():
    xref = Xref(2)
    xref.insert(1, XrefEntry.free())
    xref.insert(2, XrefEntry.unusable_free())
    data, _, index = create_xref_stream(xref)
    records = _records(data, index)
    assert records[1] == (0, 1, 0)
    assert records[2] == (0, 2, 65535)


def test_create_xref_stream_hex_filter():
    xref = Xref(2)
    xref.insert(1, XrefEntry.normal(300))
    xref.insert(2, XrefEntry.normal(700))
    raw, raw_length, raw_index = create_xref_stream(xref, XRefStreamFilter.NONE)
    hexed, hex_length, hex_index = create_xref_stream(
        xref, XRefStreamFilter.ASCII_HEX_DECODE
    )
    assert hexed == raw.hex().upper().encode("ascii")
    assert hex_length == raw_length
    assert hex_index == raw_index


def test_filter_names():
    assert XRefStreamFilter.ASCII_HEX_DECODE.pdf_name == Name("ASCIIHexDecode")
    assert XRefStreamFilter.NONE.pdf_name is None


def test_encode_xref_table_contiguous():
    xref = Xref(3)
    xref.insert(1, XrefEntry.normal(9))
    xref.insert(2, XrefEntry.normal(50))
    lines = encode_xref_table(xref).split(b"\n")
    assert lines[0] == b"xref"
    assert [int(part) for part in lines[1].split()] == [0, xref.size]
    assert lines[2] + b"\n" == XrefEntry.unusable_free().table_line()
    assert lines[3] + b"\n" == XrefEntry.normal(9).table_line()
    assert lines[4] + b"\n" == XrefEntry.normal(50).table_line()


def test_encode_xref_table_gap_and_compressed():
    xref = Xref(4)
    xref.insert(1, XrefEntry.normal(9))
    xref.insert(3, XrefEntry.compressed(7, 1))
    lines = encode_xref_table(xref).split(b"\n")
    assert [int(part) for part in lines[1].split()] == [0, 2]
    assert [int(part) for part in lines[4].split()] == [3, 1]
    assert lines[5] + b"\n" == XrefEntry.unusable_free().table_line()


def test_encode_xref_table_without_objects_keeps_object_zero():
    table = encode_xref_table(Xref(0))
    lines = table.split(b"\n")
    assert [int(part) for part in lines[1].split()] == [0, 1]
    assert lines[2] + b"\n" == XrefEntry.unusable_free().table_line()


def test_write_as_stream_places_stream_object():
    max_id = 2
    xref = Xref(max_id + 1)
    xref.insert(1, XrefEntry.normal(9))
    xref.insert(2, XrefEntry.normal(40))
    root = ObjectId(1)
    encoded = xref.write_as_stream(PdfTrailer(root=root), 80, max_id)

    assert encoded.startswith(f"{max_id + 1} 0 obj\n".encode("ascii"))
    assert encoded.endswith(b"endstream \nendobj\n")
    assert b"/Type/XRef" in encoded
    assert b"/W[1 4 2]" in encoded
    assert b"/Root " + root.encode() in encoded
    assert f"/Size {max_id + 2}".encode("ascii") in encoded
    assert xref.get(max_id + 1) is None

    content = encoded.split(b"\nstream\n", 1)[1].rsplit(b"\nendstream", 1)[0]
    records = _records(content, [1, max_id + 1])
    assert records[max_id + 1] == (1, 80, 0)
    assert records[1] == (1, 9, 0)
import pytest

from tuxpdf.content import Content, Operation
from tuxpdf.dictionary import Dictionary
from tuxpdf.objects import Name, requires_end_separator, requires_separator
from tuxpdf.stream import Stream
from tuxpdf.trailer import PdfTrailer, StandardTrailer


def test_stream_encoding_sets_length():
    stream = Stream(Dictionary(), b"abc")
    assert stream.encode() == b"<</Length 3>>\nstream\nabc\nendstream"


def test_encoding_does_not_mutate_dictionary():
    dictionary = Dictionary({"Filter": Name("FlateDecode")})
    stream = Stream(dictionary, b"data")
    stream.encode()
    assert list(dictionary) == [Name("Filter")]


def test_length_replaces_existing_entry():
    stream = Stream(Dictionary({"Length": 999}), b"12345")
    encoded = stream.encode()
    assert b"999" not in encoded
    assert encoded.startswith(b"<</Length 5>>")


def test_typed_dictionary_is_written_as_is():
    trailer = StandardTrailer(PdfTrailer(), size=3)
    stream = Stream(trailer, b"x")
    assert stream.encode() == trailer.encode() + b"\nstream\nx\nendstream"


def test_content_object_is_encoded():
    content = Content([Operation("BT"), Operation("ET")])
    stream = Stream(Dictionary(), content)
    assert stream.content_bytes == content.encode()
    assert stream.encode().endswith(b"\nstream\n" + content.encode() + b"\nendstream")


def test_with_compression_returns_copy():
    stream = Stream(Dictionary(), b"a")
    assert stream.allows_compression is True
    changed = stream.with_compression(False)
    assert changed.allows_compression is False
    assert stream.allows_compression is True
    assert changed.content == stream.content


def test_separator_flags():
    stream = Stream()
    assert requires_separator(stream) is False
    assert requires_end_separator(stream) is True


def test_invalid_content_rejected():
    with pytest.raises(TypeError):
        Stream(Dictionary(), "text").encode()
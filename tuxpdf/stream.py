"""PDF stream objects: a dictionary followed by raw content."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, ClassVar

from .dictionary import Dictionary


def _content_bytes(content: Any) -> bytes:
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    encode = getattr(content, "encode", None)
    if callable(encode) and not isinstance(content, str):
        return encode()
    raise TypeError(f"{type(content).__name__} cannot be used as stream content")


@dataclass
class Stream:
    """A stream object.

    ``dictionary`` is either a :class:`Dictionary`, whose ``/Length`` entry is
    filled in on encoding, or a typed dictionary such as a trailer that
    provides its own ``encode()``.  ``content`` is bytes or an object with an
    ``encode()`` method returning bytes.
    """

    dictionary: Any = field(default_factory=Dictionary)
    content: Any = b""
    allows_compression: bool = True
    start_position: int | None = None

    separator_required: ClassVar[bool] = False
    end_separator_required: ClassVar[bool] = True
    pdf_type_name: ClassVar[str] = "Stream"

    @property
    def content_bytes(self) -> bytes:
        """The content encoded to bytes."""
        return _content_bytes(self.content)

    def with_compression(self, value: bool) -> Stream:
        """A copy of the stream with compression allowed or disallowed."""
        return dataclasses.replace(self, allows_compression=value)

    def encode(self) -> bytes:
        content = self.content_bytes
        if isinstance(self.dictionary, Dictionary):
            header = self.dictionary.copy()
            header["Length"] = len(content)
            encoded_header = header.encode()
        else:
            encoded_header = self.dictionary.encode()
        return encoded_header + b"\nstream\n" + content + b"\nendstream"
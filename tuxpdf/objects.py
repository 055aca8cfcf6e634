"""Primitive PDF objects and their byte encoding.

Plain Python values stand in for the simple PDF objects: ``None`` is null,
``bool`` is a boolean, ``int`` an integer, ``float`` a real number and a
``list`` or ``tuple`` an array.  Richer objects (names, strings, references
and the containers built on them) are classes that provide ``encode()`` and
the class attributes ``separator_required`` and ``end_separator_required``.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Any, ClassVar

_NAME_DELIMITERS = frozenset(b" \t\n\r\x0c()<>[]{}/%#")
_U32_MAX = 0xFFFFFFFF
_U16_MAX = 0xFFFF
_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def _as_bytes(value: Any) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


@dataclass(frozen=True)
class PdfVersion:
    """The version written in the file header."""

    major: int = 1
    minor: int = 7

    def encode(self) -> bytes:
        return f"%PDF-{self.major}.{self.minor}\n".encode("ascii")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True)
class Null:
    """The PDF null object."""

    separator_required: ClassVar[bool] = True
    end_separator_required: ClassVar[bool] = True
    pdf_type_name: ClassVar[str] = "Null"

    def encode(self) -> bytes:
        return b"null"


NULL = Null()


@dataclass(frozen=True, order=True)
class ObjectId:
    """An indirect object reference: object number and generation number."""

    object_number: int
    generation_number: int = 0

    separator_required: ClassVar[bool] = True
    end_separator_required: ClassVar[bool] = True
    pdf_type_name: ClassVar[str] = "Reference"

    def __post_init__(self) -> None:
        if not 0 <= self.object_number <= _U32_MAX:
            raise ValueError(f"object number out of range: {self.object_number}")
        if not 0 <= self.generation_number <= _U16_MAX:
            raise ValueError(
                f"generation number out of range: {self.generation_number}"
            )

    def encode(self) -> bytes:
        return f"{self.object_number} {self.generation_number} R".encode("ascii")

    def next_generation(self) -> ObjectId:
        """Return the same object number with the generation raised by one."""
        return ObjectId(self.object_number, self.generation_number + 1)

    def __str__(self) -> str:
        return f"{self.object_number} {self.generation_number} R"


@dataclass(frozen=True)
class Name:
    """A PDF name object such as ``/Type``; accepts ``str`` or ``bytes``."""

    value: bytes

    separator_required: ClassVar[bool] = False
    end_separator_required: ClassVar[bool] = True
    pdf_type_name: ClassVar[str] = "Name"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _as_bytes(self.value))

    def encode(self) -> bytes:
        out = bytearray(b"/")
        for byte in self.value:
            if byte in _NAME_DELIMITERS or not 33 <= byte <= 126:
                out += b"#%02X" % byte
            else:
                out.append(byte)
        return bytes(out)

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return "/" + self.value.decode("utf-8", errors="replace")


def escape_literal(text: bytes | str) -> bytes:
    """Escape backslashes, carriage returns and unbalanced parentheses."""
    data = _as_bytes(text)
    marked: list[int] = []
    open_parens: list[int] = []
    for index, byte in enumerate(data):
        if byte == 0x28:
            open_parens.append(index)
        elif byte == 0x29:
            if open_parens:
                open_parens.pop()
            else:
                marked.append(index)
        elif byte in (0x5C, 0x0D):
            marked.append(index)
    if not marked and not open_parens:
        return data
    to_escape = set(marked) | set(open_parens)
    out = bytearray()
    for index, byte in enumerate(data):
        if index in to_escape:
            out.append(0x5C)
        out.append(byte)
    return bytes(out)


@dataclass(frozen=True)
class PdfString:
    """A PDF string, literal ``(...)`` or hexadecimal ``<...>``.

    Constructing it directly stores the bytes as given; use :meth:`literal`
    to have them escaped.
    """

    data: bytes = b""
    is_hexadecimal: bool = False

    separator_required: ClassVar[bool] = False
    end_separator_required: ClassVar[bool] = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _as_bytes(self.data))

    @classmethod
    def literal(cls, value: bytes | str) -> PdfString:
        """A literal string with its special characters escaped."""
        return cls(escape_literal(value))

    @classmethod
    def hexadecimal(cls, value: bytes | str) -> PdfString:
        """A string written in hexadecimal form."""
        return cls(_as_bytes(value), is_hexadecimal=True)

    @property
    def pdf_type_name(self) -> str:
        return "String(Hexadecimal)" if self.is_hexadecimal else "String(Literal)"

    def encode(self) -> bytes:
        if self.is_hexadecimal:
            return b"<" + self.data.hex().upper().encode("ascii") + b">"
        return b"(" + self.data + b")"

    def __bytes__(self) -> bytes:
        return self.data


def _to_f32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _shortest_digits(value: float) -> tuple[str, int]:
    """Shortest digit string and decimal exponent that round-trip as f32."""
    text = f"{value:.8e}"
    for precision in range(9):
        candidate = f"{value:.{precision}e}"
        if _to_f32(float(candidate)) == value:
            text = candidate
            break
    mantissa, exponent = text.split("e")
    digits = mantissa.replace(".", "").rstrip("0") or "0"
    return digits, int(exponent) - (len(digits) - 1)


def format_real(value: float) -> str:
    """Format a number as a single-precision real in shortest form."""
    number = _to_f32(float(value))
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    sign = "-" if math.copysign(1.0, number) < 0 else ""
    if number == 0:
        return sign + "0.0"
    digits, k = _shortest_digits(abs(number))
    length = len(digits)
    kk = length + k
    if 0 <= k and kk <= 13:
        body = digits + "0" * k + ".0"
    elif 0 < kk <= 13:
        body = digits[:kk] + "." + digits[kk:]
    elif -6 < kk <= 0:
        body = "0." + "0" * (-kk) + digits
    elif length == 1:
        body = f"{digits}e{kk - 1}"
    else:
        body = f"{digits[0]}.{digits[1:]}e{kk - 1}"
    return sign + body


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (bool, int, float))


def _class_flag(value: Any, attribute: str) -> bool:
    if isinstance(value, _TEXT_TYPES):
        raise TypeError(
            f"{type(value).__name__} is not a PDF object; wrap it in Name or PdfString"
        )
    try:
        return bool(getattr(type(value), attribute))
    except AttributeError:
        raise TypeError(f"{type(value).__name__} is not a PDF object") from None


def requires_separator(value: Any) -> bool:
    """Whether a space must precede the object when it follows another."""
    if _is_scalar(value):
        return True
    if isinstance(value, (list, tuple)):
        return False
    return _class_flag(value, "separator_required")


def requires_end_separator(value: Any) -> bool:
    """Whether a space must follow the object before ``endobj``."""
    if _is_scalar(value):
        return True
    if isinstance(value, (list, tuple)):
        return False
    return _class_flag(value, "end_separator_required")


def type_name(value: Any) -> str:
    """A short human-readable name for the kind of PDF object."""
    if value is None:
        return NULL.pdf_type_name
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, int):
        return "Number"
    if isinstance(value, float):
        return "Real"
    if isinstance(value, (list, tuple)):
        return "Array"
    return str(getattr(value, "pdf_type_name", type(value).__name__))


def _encode_array(items: list[Any] | tuple[Any, ...]) -> bytes:
    parts = [b"["]
    for position, item in enumerate(items):
        if position and requires_separator(item):
            parts.append(b" ")
        parts.append(encode_object(item))
    parts.append(b"]")
    return b"".join(parts)


def encode_object(value: Any) -> bytes:
    """Encode any PDF object to its byte form."""
    if value is None:
        return NULL.encode()
    if isinstance(value, bool):
        return b"true" if value else b"false"
    if isinstance(value, int):
        return str(value).encode("ascii")
    if isinstance(value, float):
        return format_real(value).encode("ascii")
    if isinstance(value, (list, tuple)):
        return _encode_array(value)
    if isinstance(value, _TEXT_TYPES):
        raise TypeError(
            f"{type(value).__name__} is not a PDF object; wrap it in Name or PdfString"
        )
    encode = getattr(value, "encode", None)
    if not callable(encode):
        raise TypeError(f"{type(value).__name__} is not a PDF object")
    return encode()
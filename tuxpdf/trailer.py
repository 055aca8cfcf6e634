"""Trailer dictionaries written at the end of a PDF file."""

from __future__ import annotations

from dataclasses import dataclass, field

from .dictionary import Dictionary
from .objects import Name, ObjectId


@dataclass
class PdfTrailer:
    """References to the document catalog and the info dictionary."""

    root: ObjectId | None = None
    info: ObjectId | None = None


@dataclass
class StandardTrailer:
    """A classic trailer: ``/Root``, ``/Info`` and ``/Size``."""

    trailer: PdfTrailer = field(default_factory=PdfTrailer)
    size: int = 0

    def to_dictionary(self) -> Dictionary:
        dictionary = Dictionary()
        if self.trailer.root is not None:
            dictionary["Root"] = self.trailer.root
        if self.trailer.info is not None:
            dictionary["Info"] = self.trailer.info
        dictionary["Size"] = self.size
        return dictionary

    def encode(self) -> bytes:
        return self.to_dictionary().encode()


@dataclass
class XRefPdfTrailer:
    """The dictionary of a cross-reference stream."""

    trailer: PdfTrailer
    size: int
    w: list[int]
    index: list[int]
    filter: Name | None
    length: int

    def to_dictionary(self) -> Dictionary:
        dictionary = Dictionary()
        dictionary["Type"] = Name("XRef")
        if self.trailer.root is not None:
            dictionary["Root"] = self.trailer.root
        if self.trailer.info is not None:
            dictionary["Info"] = self.trailer.info
        dictionary["Size"] = self.size
        dictionary["W"] = list(self.w)
        dictionary["Index"] = list(self.index)
        if self.filter is not None:
            dictionary["Filter"] = self.filter
        dictionary["Length"] = self.length
        return dictionary

    def encode(self) -> bytes:
        return self.to_dictionary().encode()
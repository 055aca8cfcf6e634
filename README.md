# tuxpdf

A small library with no dependencies for writing PDF files from the object level up.
You build dictionaries, streams and content operations, add them to a
`PdfDocumentWriter` as indirect objects, and save. The writer numbers the
objects, records their byte offsets and writes the cross-reference section and
trailer for you.

## Installation

```
pip install tuxpdf
```

## Hello world

```python
from tuxpdf.content import Content, Operation
from tuxpdf.dictionary import Dictionary
from tuxpdf.objects import Name, PdfString
from tuxpdf.stream import Stream
from tuxpdf.writer import PdfDocumentWriter

doc = PdfDocumentWriter()
pages_id = doc.next_object_id()          # reserve a number, fill it in later

font = Dictionary({"Type": Name("Font"), "Subtype": Name("Type1"), "BaseFont": Name("Courier")})
font_id = doc.add_object(font)
resources_id = doc.add_object(Dictionary({"Font": Dictionary({"F1": font_id})}))

content = Content([
    Operation("BT"),
    Operation("Tf", [Name("F1"), 48]),
    Operation("Td", [100, 600]),
    Operation("Tj", [PdfString.literal("Hello World!")]),
    Operation("ET"),
])
content_id = doc.add_object(Stream(Dictionary(), content.encode()))

page = Dictionary({
    "Parent": pages_id,
    "Contents": content_id,
    "MediaBox": [0, 0, 595, 842],
    "Resources": resources_id,
})
page.set_type("Page")
page_id = doc.add_object(page)

pages = Dictionary({"Kids": [page_id], "Count": 1})
pages.set_type("Pages")
doc.set_object(pages_id, pages)

catalog = Dictionary({"Pages": pages_id})
catalog.set_type("Catalog")
doc.trailer.root = doc.add_object(catalog)

with open("hello_world.pdf", "wb") as fh:
    doc.save(fh)

data = doc.to_bytes()                    # or get the whole file as bytes
```

## PDF objects

Plain Python values are used for the simple objects: `None` is `null`, `bool`
a boolean, `int` an integer, `float` a real number (written as the shortest
single-precision form, e.g. `1.5`, `3.0`) and `list`/`tuple` an array. `str`
and `bytes` are rejected; wrap them in `Name` or `PdfString`.

- `tuxpdf.objects` – `ObjectId` (references, `next_generation()`), `Name`
  (with `#XX` escaping of delimiters and non-printable bytes), `PdfString`
  (`PdfString.literal()` escapes backslashes, carriage returns and unbalanced
  parentheses; `PdfString.hexadecimal()` writes `<...>`), `Null`, `PdfVersion`,
  and the helpers `encode_object`, `format_real`, `escape_literal`,
  `requires_separator`, `requires_end_separator`, `type_name`.
- `tuxpdf.dictionary` – `Dictionary`, an insertion-ordered mutable mapping
  whose keys are stored as `Name`. `set_type()`, `get_or_raise()` (raises
  `MissingDictionaryKeyError`) and `dictionary_type()` (raises
  `InvalidDictionaryTypeError` when `/Type` is not a name).
- `tuxpdf.stream` – `Stream`; when its dictionary is a `Dictionary`, `/Length`
  is set from the content on encoding. Content may be bytes or anything with an
  `encode()` method, such as `Content`. `with_compression()` returns a copy with
  the `allows_compression` flag changed.
- `tuxpdf.content` – `Operation` (operands followed by the operator) and
  `Content` (operations joined by newlines).
- `tuxpdf.trailer` – `PdfTrailer` (`root`, `info`), `StandardTrailer` and
  `XRefPdfTrailer`.
- `tuxpdf.errors` – `LowPdfError` and its subclasses
  `InvalidDictionaryTypeError`, `MissingDictionaryKeyError`,
  `InvalidDictionaryValueError`.

## Writing documents

`tuxpdf.writer.PdfDocumentWriter` keeps objects by `ObjectId` and writes them
in id order. `next_object_id()`, `add_object()`, `set_object()`,
`get_object()`, `remove_object()` and `find_objects_by_number()` manage the
objects; `save(stream)` writes to a binary stream and `to_bytes()` returns the
file. Dictionaries (and streams with a `Dictionary`) whose `/Type` is
`ObjStm`, `XRef` or `Linearized` are skipped when saving.

The cross-reference section depends on `cross_reference_type`:

- `XrefType.CROSS_REFERENCE_TABLE` (the default) writes a cross-reference
  stream object with field widths `[1 4 2]` and no filter, numbered one past
  the highest object number.
- `XrefType.CROSS_REFERENCE_STREAM` writes a classic `xref` table followed by
  `trailer` and a `/Root`, `/Info`, `/Size` dictionary.

`encode_indirect_object()` and `CountingWriter` are available on their own, and
`tuxpdf.xref` exposes `Xref`, `XrefEntry`, `XrefSection`, `XRefStreamFilter`,
`create_xref_stream()` and `encode_xref_table()`.

## Units and dates

- `tuxpdf.units` – `Pt`, `Mm` (floating point, equal when they agree to three
  decimal places), `Px` (whole pixels, `into_pt_with_dpi()`,
  `into_mm_with_dpi()`) and `Percentage`. `Mm.to_pt()` and `Pt.to_mm()`
  convert between millimetres and points. The helpers `pt()`, `mm()` and
  `px()` take a plain number without scaling it (`px()` truncates), or call the
  matching method of a unit.
- `tuxpdf.pdftime` – `format_pdf_date_time()` turns a timezone-aware
  `datetime` into a PDF date such as `D:20241216152949+00'00` (a naive one
  raises `ValueError`); `pdf_date_object()` wraps it in a literal `PdfString`.
- `tuxpdf.utils` – `random_character_string(length)` returns random ASCII
  letters and digits.

## What it does not do

It only writes. It cannot read or parse existing PDF files, does not compress
streams (`allows_compression` is only recorded), and has no fonts, text
measurement, page model or layout: pages, resources and content are built by
hand from the objects above.

## Running the tests

```
pip install -e .[test]
pytest
```
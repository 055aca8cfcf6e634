"""Low-level PDF object model, document writer, units and PDF date helpers."""

__version__ = "0.1.0"

__all__ = [
    "content",
    "dictionary",
    "errors",
    "objects",
    "pdftime",
    "stream",
    "trailer",
    "units",
    "utils",
    "writer",
    "xref",
]
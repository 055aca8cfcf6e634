"""PDF dictionary objects: ordered maps from names to PDF objects."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, ClassVar

from .errors import InvalidDictionaryTypeError, MissingDictionaryKeyError
from .objects import Name, encode_object, requires_separator, type_name

START_DICTIONARY = b"<<"
END_DICTIONARY = b">>"

KeyLike = Name | str | bytes


def _key(key: KeyLike) -> Name:
    return key if isinstance(key, Name) else Name(key)


class Dictionary(MutableMapping):
    """An insertion-ordered PDF dictionary.

    Keys may be given as :class:`Name`, ``str`` or ``bytes``; they are
    stored as :class:`Name`.  Re-setting a key keeps its original position.
    """

    separator_required: ClassVar[bool] = False
    end_separator_required: ClassVar[bool] = False
    pdf_type_name: ClassVar[str] = "Dictionary"

    def __init__(
        self,
        items: Mapping[KeyLike, Any] | Iterable[tuple[KeyLike, Any]] | None = None,
    ) -> None:
        self._entries: dict[Name, Any] = {}
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self[key] = value

    def __getitem__(self, key: KeyLike) -> Any:
        return self._entries[_key(key)]

    def __setitem__(self, key: KeyLike, value: Any) -> None:
        self._entries[_key(key)] = value

    def __delitem__(self, key: KeyLike) -> None:
        name = _key(key)
        if name not in self._entries:
            raise KeyError(name)
        self._entries.pop(name)

    def __iter__(self) -> Iterator[Name]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{key}: {value!r}" for key, value in self._entries.items())
        return f"Dictionary({{{body}}})"

    def copy(self) -> Dictionary:
        """A shallow copy keeping the entry order."""
        return Dictionary(self._entries.items())

    def set_type(self, value: KeyLike) -> None:
        """Set the ``/Type`` entry to the given name."""
        self["Type"] = _key(value)

    def get_or_raise(self, key: KeyLike) -> Any:
        """Return the value for ``key`` or raise :class:`MissingDictionaryKeyError`."""
        name = _key(key)
        try:
            return self._entries[name]
        except KeyError:
            raise MissingDictionaryKeyError(
                name.value.decode("utf-8", errors="replace")
            ) from None

    def dictionary_type(self) -> Name | None:
        """The ``/Type`` entry, or ``None`` when the dictionary has none.

        Raises :class:`InvalidDictionaryTypeError` if the entry is not a name.
        """
        value = self._entries.get(Name("Type"))
        if value is None:
            return None
        if not isinstance(value, Name):
            raise InvalidDictionaryTypeError(actual=type_name(value), expected="Name")
        return value

    def encode(self) -> bytes:
        parts = [START_DICTIONARY]
        for key, value in self._entries.items():
            parts.append(key.encode())
            if requires_separator(value):
                parts.append(b" ")
            parts.append(encode_object(value))
        parts.append(END_DICTIONARY)
        return b"".join(parts)
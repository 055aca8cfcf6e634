"""Content streams: sequences of operators with their operands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .objects import encode_object


@dataclass
class Operation:
    """One content-stream operator preceded by its operands."""

    operation: str
    arguments: list[Any] = field(default_factory=list)

    def encode(self) -> bytes:
        operator = (
            self.operation.encode("utf-8")
            if isinstance(self.operation, str)
            else bytes(self.operation)
        )
        return b"".join(encode_object(argument) + b" " for argument in self.arguments) + operator


@dataclass
class Content:
    """A list of operations, written one per line."""

    operations: list[Operation] = field(default_factory=list)

    def encode(self) -> bytes:
        return b"\n".join(operation.encode() for operation in self.operations)
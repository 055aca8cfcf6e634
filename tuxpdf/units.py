"""Units of measurement.

=========  ==========  ===========================
Unit       Name        Note
=========  ==========  ===========================
``Pt``     point       standard PDF unit
``Mm``     millimetre
``Px``     pixels      needs a DPI for conversion
=========  ==========  ===========================
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar

from .objects import format_real

MM_TO_PT = 2.834646
PT_TO_MM = 0.352778
PT_TO_PX = 1.3333334
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _saturating_int(value: float) -> int:
    """Truncate toward zero, clamping to the 64-bit range; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if value >= _I64_MAX:
        return _I64_MAX
    if value <= _I64_MIN:
        return _I64_MIN
    return int(value)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _comparable(value: float) -> bool:
    """True for zero and normal numbers, false for NaN, infinities and subnormals."""
    if math.isnan(value) or math.isinf(value):
        return False
    return value == 0 or abs(value) >= 2.2250738585072014e-308


def _float_div(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _float_min(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _float_max(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _is_plain_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_float(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True, eq=False)
class _FloatUnit:
    """A floating-point length compared to three decimal places."""

    value: float = 0.0

    separator_required: ClassVar[bool] = True
    end_separator_required: ClassVar[bool] = True
    pdf_type_name: ClassVar[str] = "Real"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def _operand(self, other: Any) -> float | None:
        if type(other) is type(self):
            return other.value
        if _is_plain_number(other):
            return float(other)
        return None

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        if not (_comparable(self.value) and _comparable(other.value)):
            return False
        return _round_half_away(self.value * 1000.0) == _round_half_away(
            other.value * 1000.0
        )

    def __hash__(self) -> int:
        if _comparable(self.value):
            return hash((type(self).__name__, _round_half_away(self.value * 1000.0)))
        return hash((type(self).__name__, "special"))

    def _compare_with(self, other: Any) -> float | None:
        return other.value if type(other) is type(self) else None

    def __lt__(self, other: Any) -> bool:
        value = self._compare_with(other)
        return NotImplemented if value is None else self.value < value

    def __le__(self, other: Any) -> bool:
        value = self._compare_with(other)
        return NotImplemented if value is None else self.value <= value

    def __gt__(self, other: Any) -> bool:
        value = self._compare_with(other)
        return NotImplemented if value is None else self.value > value

    def __ge__(self, other: Any) -> bool:
        value = self._compare_with(other)
        return NotImplemented if value is None else self.value >= value

    def __add__(self, other: Any):
        value = self._operand(other)
        return NotImplemented if value is None else type(self)(self.value + value)

    def __radd__(self, other: Any):
        # Lets ``sum()`` start from its integer zero.
        if _is_plain_number(other):
            return type(self)(float(other) + self.value)
        return NotImplemented

    def __sub__(self, other: Any):
        value = self._operand(other)
        return NotImplemented if value is None else type(self)(self.value - value)

    def __mul__(self, other: Any):
        value = self._operand(other)
        return NotImplemented if value is None else type(self)(self.value * value)

    def __truediv__(self, other: Any):
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return type(self)(_float_div(self.value, value))

    def __neg__(self):
        return type(self)(-self.value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return _format_float(self.value)

    def _check_same(self, other: Any) -> None:
        if type(other) is not type(self):
            raise TypeError(f"expected {type(self).__name__}, got {type(other).__name__}")

    def _smaller(self, other):
        self._check_same(other)
        return type(self)(_float_min(self.value, other.value))

    def _larger(self, other):
        self._check_same(other)
        return type(self)(_float_max(self.value, other.value))

    def encode(self) -> bytes:
        """The value as a PDF real number."""
        return format_real(self.value).encode("ascii")


@dataclass(frozen=True, eq=False)
class Mm(_FloatUnit):
    """A length in millimetres."""

    def min(self, other: Mm) -> Mm:
        """The smaller of the two; a NaN operand is ignored."""
        return self._smaller(other)

    def max(self, other: Mm) -> Mm:
        """The larger of the two; a NaN operand is ignored."""
        return self._larger(other)

    def mm(self) -> Mm:
        return self

    def pt(self) -> Pt:
        return Pt(self.value / MM_TO_PT)

    def px(self) -> Px:
        return Px(_saturating_int(self.value))

    def to_pt(self) -> Pt:
        """Convert millimetres to points."""
        return Pt(self.value * MM_TO_PT)


@dataclass(frozen=True, eq=False)
class Pt(_FloatUnit):
    """A length in points, the standard PDF unit."""

    def min(self, other: Pt) -> Pt:
        """The smaller of the two; a NaN operand is ignored."""
        return self._smaller(other)

    def max(self, other: Pt) -> Pt:
        """The larger of the two; a NaN operand is ignored."""
        return self._larger(other)

    def mm(self) -> Mm:
        return Mm(self.value * PT_TO_MM)

    def pt(self) -> Pt:
        return self

    def px(self) -> Px:
        return Px(_saturating_int(self.value * PT_TO_PX))

    def to_mm(self) -> Mm:
        """Convert points to millimetres."""
        return Mm(self.value * PT_TO_MM)


def _int_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass(frozen=True, order=True)
class Px:
    """A length in whole pixels."""

    value: int = 0

    separator_required: ClassVar[bool] = True
    end_separator_required: ClassVar[bool] = True
    pdf_type_name: ClassVar[str] = "Number"

    def __post_init__(self) -> None:
        if isinstance(self.value, float):
            raise TypeError("Px holds whole pixels; use px() to truncate a float")
        object.__setattr__(self, "value", int(self.value))

    def _operand(self, other: Any) -> int | None:
        if type(other) is Px:
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __add__(self, other: Any):
        value = self._operand(other)
        return NotImplemented if value is None else Px(self.value + value)

    def __radd__(self, other: Any):
        if isinstance(other, int) and not isinstance(other, bool):
            return Px(other + self.value)
        return NotImplemented

    def __sub__(self, other: Any):
        value = self._operand(other)
        return NotImplemented if value is None else Px(self.value - value)

    def __mul__(self, other: Any):
        value = self._operand(other)
        return NotImplemented if value is None else Px(self.value * value)

    def __truediv__(self, other: Any):
        value = self._operand(other)
        if value is None:
            return NotImplemented
        if value == 0:
            raise ZeroDivisionError("pixel division by zero")
        return Px(_int_div(self.value, value))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def min(self, other: Px) -> Px:
        return Px(min(self.value, other.value))

    def max(self, other: Px) -> Px:
        return Px(max(self.value, other.value))

    def mm(self) -> Mm:
        return Mm(self.value)

    def pt(self) -> Pt:
        return Pt(self.value)

    def px(self) -> Px:
        return self

    def into_pt_with_dpi(self, dpi: float) -> Pt:
        """Convert to points at the given resolution."""
        return Pt(_float_div(float(self.value), float(dpi)) * 72.0)

    def into_mm_with_dpi(self, dpi: float) -> Mm:
        """Convert to millimetres at the given resolution."""
        return Mm(_float_div(float(self.value), float(dpi)) * 25.4)

    def encode(self) -> bytes:
        """The value as a PDF integer."""
        return str(self.value).encode("ascii")


@dataclass(frozen=True, order=True)
class Percentage:
    """A fraction of some reference length."""

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return _format_float(self.value)


def _check_number(value: Any) -> None:
    if not _is_plain_number(value):
        raise TypeError(f"expected a number or unit, got {type(value).__name__}")


def mm(value: Any) -> Mm:
    """A number taken as millimetres without scaling, or a unit's ``mm()``."""
    if isinstance(value, (Mm, Pt, Px)):
        return value.mm()
    _check_number(value)
    return Mm(value)


def pt(value: Any) -> Pt:
    """A number taken as points without scaling, or a unit's ``pt()``."""
    if isinstance(value, (Mm, Pt, Px)):
        return value.pt()
    _check_number(value)
    return Pt(value)


def px(value: Any) -> Px:
    """A number truncated to whole pixels, or a unit's ``px()``."""
    if isinstance(value, (Mm, Pt, Px)):
        return value.px()
    _check_number(value)
    if isinstance(value, float):
        return Px(_saturating_int(value))
    return Px(value)
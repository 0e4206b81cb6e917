"""Typed content stream instructions.

Raw ``(operands, operator)`` pairs from the document backend are turned into
a closed set of instruction dataclasses.  Operand counts and types are
validated once, here, so the text-state machine only ever dispatches on
well-formed instructions.  Operators that do not influence text extraction
become :class:`OtherOperation`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Iterable, Sequence, Union

from .exceptions import OperatorParseError

__all__ = [
    "TextRenderingMode",
    "SetCharacterSpacing",
    "SetWordSpacing",
    "SetHorizontalScaling",
    "SetLeading",
    "SetTextFont",
    "SetRenderingMode",
    "SetTextRise",
    "BeginText",
    "EndText",
    "MoveTextPosition",
    "NextLine",
    "SetTextMatrix",
    "ShowText",
    "ShowTextAdjusted",
    "MoveAndShowText",
    "SetSpacingMoveAndShowText",
    "OtherOperation",
    "Instruction",
    "operator_name",
    "parse_operation",
    "parse_operations",
]


class TextRenderingMode(IntEnum):
    FILL = 0
    STROKE = 1
    FILL_STROKE = 2
    INVISIBLE = 3
    FILL_CLIP = 4
    STROKE_CLIP = 5
    FILL_STROKE_CLIP = 6
    CLIP = 7


# -- Text state --------------------------------------------------------------


@dataclass(frozen=True)
class SetCharacterSpacing:
    char_space: float


@dataclass(frozen=True)
class SetWordSpacing:
    word_space: float


@dataclass(frozen=True)
class SetHorizontalScaling:
    scale: float


@dataclass(frozen=True)
class SetLeading:
    leading: float


@dataclass(frozen=True)
class SetTextFont:
    font_key: str
    size: float


@dataclass(frozen=True)
class SetRenderingMode:
    mode: TextRenderingMode


@dataclass(frozen=True)
class SetTextRise:
    rise: float


# -- Text objects and positioning ---------------------------------------------


@dataclass(frozen=True)
class BeginText:
    pass


@dataclass(frozen=True)
class EndText:
    pass


@dataclass(frozen=True)
class MoveTextPosition:
    """``Td``; ``TD`` additionally sets the leading to ``-ty``."""

    tx: float
    ty: float
    set_leading: bool = False


@dataclass(frozen=True)
class NextLine:
    """``T*``: move to the start of the next line using the current leading."""


@dataclass(frozen=True)
class SetTextMatrix:
    a: float
    b: float
    c: float
    d: float
    e: float
    f: float


# -- Text showing ------------------------------------------------------------


@dataclass(frozen=True)
class ShowText:
    text: bytes


@dataclass(frozen=True)
class ShowTextAdjusted:
    """``TJ``: strings interleaved with adjustments in thousandths of a unit."""

    elements: tuple[Union[bytes, float], ...]


@dataclass(frozen=True)
class MoveAndShowText:
    """``'``: ``T*`` followed by ``Tj``."""

    text: bytes


@dataclass(frozen=True)
class SetSpacingMoveAndShowText:
    """``"``: set word and character spacing, then ``'``."""

    word_space: float
    char_space: float
    text: bytes


@dataclass(frozen=True)
class OtherOperation:
    """Any operator irrelevant to text extraction."""

    operator: str
    operands: tuple[Any, ...] = ()


Instruction = Union[
    SetCharacterSpacing,
    SetWordSpacing,
    SetHorizontalScaling,
    SetLeading,
    SetTextFont,
    SetRenderingMode,
    SetTextRise,
    BeginText,
    EndText,
    MoveTextPosition,
    NextLine,
    SetTextMatrix,
    ShowText,
    ShowTextAdjusted,
    MoveAndShowText,
    SetSpacingMoveAndShowText,
    OtherOperation,
]


# -- Operand coercion --------------------------------------------------------


def operator_name(operator: object) -> str:
    if isinstance(operator, (bytes, bytearray)):
        return bytes(operator).decode("latin-1")
    return str(operator)


def _number(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)


def _name(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a name, got {value!r}")
    return value[1:] if value.startswith("/") else value


def _string(value: object) -> bytes:
    original = getattr(value, "get_original_bytes", None)
    if callable(original):
        return bytes(original())
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("latin-1")
    raise TypeError(f"expected a string, got {value!r}")


def _array_element(value: object) -> Union[bytes, float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return _string(value)


def _expect(operands: Sequence[Any], count: int) -> None:
    if len(operands) != count:
        raise ValueError(f"expected {count} operand(s), got {len(operands)}")


def _nullary(factory: Callable[[], Instruction]) -> Callable[[Sequence[Any]], Instruction]:
    def build(operands: Sequence[Any]) -> Instruction:
        _expect(operands, 0)
        return factory()

    return build


def _unary_number(factory: Callable[[float], Instruction]) -> Callable[[Sequence[Any]], Instruction]:
    def build(operands: Sequence[Any]) -> Instruction:
        _expect(operands, 1)
        return factory(_number(operands[0]))

    return build


def _build_font(operands: Sequence[Any]) -> Instruction:
    _expect(operands, 2)
    return SetTextFont(_name(operands[0]), _number(operands[1]))


def _build_render_mode(operands: Sequence[Any]) -> Instruction:
    _expect(operands, 1)
    return SetRenderingMode(TextRenderingMode(int(_number(operands[0]))))


def _build_move(set_leading: bool) -> Callable[[Sequence[Any]], Instruction]:
    def build(operands: Sequence[Any]) -> Instruction:
        _expect(operands, 2)
        return MoveTextPosition(_number(operands[0]), _number(operands[1]), set_leading)

    return build


def _build_matrix(operands: Sequence[Any]) -> Instruction:
    _expect(operands, 6)
    return SetTextMatrix(*(_number(value) for value in operands))


def _build_show(operands: Sequence[Any]) -> Instruction:
    _expect(operands, 1)
    return ShowText(_string(operands[0]))


def _build_show_adjusted(operands: Sequence[Any]) -> Instruction:
    _expect(operands, 1)
    array = operands[0]
    if isinstance(array, (str, bytes, bytearray)) or not isinstance(array, Sequence):
        raise TypeError(f"expected an array, got {array!r}")
    return ShowTextAdjusted(tuple(_array_element(item) for item in array))


def _build_move_show(operands: Sequence[Any]) -> Instruction:
    _expect(operands, 1)
    return MoveAndShowText(_string(operands[0]))


def _build_spacing_move_show(operands: Sequence[Any]) -> Instruction:
    _expect(operands, 3)
    return SetSpacingMoveAndShowText(
        _number(operands[0]), _number(operands[1]), _string(operands[2])
    )


_BUILDERS: dict[str, Callable[[Sequence[Any]], Instruction]] = {
    "Tc": _unary_number(SetCharacterSpacing),
    "Tw": _unary_number(SetWordSpacing),
    "Tz": _unary_number(SetHorizontalScaling),
    "TL": _unary_number(SetLeading),
    "Tf": _build_font,
    "Tr": _build_render_mode,
    "Ts": _unary_number(SetTextRise),
    "BT": _nullary(BeginText),
    "ET": _nullary(EndText),
    "Td": _build_move(False),
    "TD": _build_move(True),
    "T*": _nullary(NextLine),
    "Tm": _build_matrix,
    "Tj": _build_show,
    "TJ": _build_show_adjusted,
    "'": _build_move_show,
    '"': _build_spacing_move_show,
}


def parse_operation(operands: Sequence[Any], operator: object) -> Instruction:
    """Validate a raw operator and return its typed instruction."""

    name = operator_name(operator)
    builder = _BUILDERS.get(name)
    if builder is None:
        return OtherOperation(name, tuple(operands) if isinstance(operands, (list, tuple)) else (operands,))
    try:
        return builder(list(operands))
    except (TypeError, ValueError) as exc:
        raise OperatorParseError(
            f"Malformed '{name}' operator {list(operands)!r}: {exc}",
            operator=name,
            operands=operands,
        ) from exc


def parse_operations(operations: Iterable[tuple[Sequence[Any], object]]) -> list[Instruction]:
    return [parse_operation(operands, operator) for operands, operator in operations]

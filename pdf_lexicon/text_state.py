"""Text-state machine turning content stream instructions into text runs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import hypot
from typing import ClassVar, Iterable, Iterator, Optional

from .exceptions import TextStateError
from .operators import (
    BeginText,
    EndText,
    Instruction,
    MoveAndShowText,
    MoveTextPosition,
    NextLine,
    SetCharacterSpacing,
    SetHorizontalScaling,
    SetLeading,
    SetRenderingMode,
    SetSpacingMoveAndShowText,
    SetTextFont,
    SetTextMatrix,
    SetTextRise,
    SetWordSpacing,
    ShowText,
    ShowTextAdjusted,
    TextRenderingMode,
)
from .types import TextDrawEvent

__all__ = ["Matrix", "TextState", "PositionState", "TextStateMachine", "walk_text"]

LOGGER = logging.getLogger("pdf_lexicon.text_state")

Matrix = tuple[float, float, float, float, float, float]


def _matrix_multiply(lhs: Matrix, rhs: Matrix) -> Matrix:
    a1, b1, c1, d1, e1, f1 = lhs
    a2, b2, c2, d2, e2, f2 = rhs
    return (
        a1 * a2 + c1 * b2,
        b1 * a2 + d1 * b2,
        a1 * c2 + c1 * d2,
        b1 * c2 + d1 * d2,
        a1 * e2 + c1 * f2 + e1,
        b1 * e2 + d1 * f2 + f1,
    )


@dataclass
class TextState:
    """Text state parameters; they survive text object boundaries."""

    character_spacing: float = 0.0
    word_spacing: float = 0.0
    horizontal_scaling: float = 100.0
    leading: float = 0.0
    rise: float = 0.0
    font: Optional[tuple[str, float]] = None
    rendering_mode: TextRenderingMode = TextRenderingMode.FILL


@dataclass
class PositionState:
    """Text and text line matrices, alive only inside ``BT``/``ET``."""

    IDENTITY_MATRIX: ClassVar[Matrix] = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    text_matrix: Matrix = IDENTITY_MATRIX
    text_line_matrix: Matrix = IDENTITY_MATRIX

    def next_line(self, tx: float, ty: float) -> None:
        self.text_line_matrix = _matrix_multiply(
            self.text_line_matrix, (1.0, 0.0, 0.0, 1.0, tx, ty)
        )
        self.text_matrix = self.text_line_matrix

    def set_matrix(self, matrix: Matrix) -> None:
        self.text_line_matrix = matrix
        self.text_matrix = matrix

    @property
    def coordinates(self) -> tuple[float, float]:
        return self.text_matrix[4], self.text_matrix[5]

    def glyph_size(self, font_size: float) -> float:
        _a, _b, c, d, _e, _f = self.text_matrix
        return font_size * hypot(c, d)


class TextStateMachine:
    """Interpret instructions, yielding one :class:`TextDrawEvent` per drawn string.

    The position of a run is the text matrix origin when the show operator
    started; it is not advanced per glyph, and numeric ``TJ`` adjustments are
    skipped.  That is precise enough to group runs into lines.
    """

    def __init__(self) -> None:
        self.params = TextState()
        self.positions: Optional[PositionState] = None

    def run(self, instructions: Iterable[Instruction]) -> Iterator[TextDrawEvent]:
        for instruction in instructions:
            yield from self.step(instruction)

    def step(self, instruction: Instruction) -> Iterator[TextDrawEvent]:
        params = self.params
        if isinstance(instruction, SetCharacterSpacing):
            params.character_spacing = instruction.char_space
        elif isinstance(instruction, SetWordSpacing):
            params.word_spacing = instruction.word_space
        elif isinstance(instruction, SetHorizontalScaling):
            params.horizontal_scaling = instruction.scale
        elif isinstance(instruction, SetLeading):
            params.leading = instruction.leading
        elif isinstance(instruction, SetTextFont):
            params.font = (instruction.font_key, instruction.size)
        elif isinstance(instruction, SetRenderingMode):
            params.rendering_mode = instruction.mode
        elif isinstance(instruction, SetTextRise):
            params.rise = instruction.rise
        elif isinstance(instruction, BeginText):
            if self.positions is not None:
                LOGGER.debug("Nested BT; resetting text matrices")
            self.positions = PositionState()
        elif isinstance(instruction, EndText):
            self.positions = None
        elif isinstance(instruction, MoveTextPosition):
            positions = self._require_positions("Td/TD")
            if instruction.set_leading:
                params.leading = -instruction.ty
            positions.next_line(instruction.tx, instruction.ty)
        elif isinstance(instruction, NextLine):
            self._require_positions("T*").next_line(0.0, -params.leading)
        elif isinstance(instruction, SetTextMatrix):
            self._require_positions("Tm").set_matrix(
                (
                    instruction.a,
                    instruction.b,
                    instruction.c,
                    instruction.d,
                    instruction.e,
                    instruction.f,
                )
            )
        elif isinstance(instruction, ShowText):
            yield self._draw("Tj", instruction.text)
        elif isinstance(instruction, ShowTextAdjusted):
            snapshot = self._draw("TJ", b"")
            for element in instruction.elements:
                if isinstance(element, bytes):
                    yield TextDrawEvent(
                        position=snapshot.position,
                        glyph_size=snapshot.glyph_size,
                        font_key=snapshot.font_key,
                        raw_text=element,
                    )
        elif isinstance(instruction, MoveAndShowText):
            self._require_positions("'").next_line(0.0, -params.leading)
            yield self._draw("'", instruction.text)
        elif isinstance(instruction, SetSpacingMoveAndShowText):
            params.word_spacing = instruction.word_space
            params.character_spacing = instruction.char_space
            self._require_positions('"').next_line(0.0, -params.leading)
            yield self._draw('"', instruction.text)

    def _require_positions(self, operator: str) -> PositionState:
        if self.positions is None:
            raise TextStateError(f"BT not present before {operator}")
        return self.positions

    def _draw(self, operator: str, text: bytes) -> TextDrawEvent:
        positions = self._require_positions(operator)
        if self.params.font is None:
            raise TextStateError(f"Tf not present before {operator}")
        font_key, size = self.params.font
        return TextDrawEvent(
            position=positions.coordinates,
            glyph_size=positions.glyph_size(size),
            font_key=font_key,
            raw_text=text,
        )


def walk_text(instructions: Iterable[Instruction]) -> Iterator[TextDrawEvent]:
    """Lazily yield the text runs drawn by ``instructions``.

    Raises :class:`TextStateError` (ending the iteration) when a positioning
    or show operator appears outside a text object or before ``Tf``.
    """

    return TextStateMachine().run(instructions)

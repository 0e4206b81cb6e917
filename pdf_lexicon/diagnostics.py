"""Inspection helpers used while tuning a layout profile for a new document."""

from __future__ import annotations

from collections import Counter
from typing import Iterator, List, Tuple

from .backends import BackendDocument, BackendPage
from .types import Line, RawOperation

__all__ = ["OPERATOR_NAMES", "count_operators", "display_name", "dump_operations", "format_line"]

OPERATOR_NAMES = {
    "BMC": "BeginMarkedContent",
    "BDC": "BeginMarkedContent",
    "EMC": "EndMarkedContent",
    "MP": "MarkedContentPoint",
    "DP": "MarkedContentPoint",
    "h": "Close",
    "m": "MoveTo",
    "l": "LineTo",
    "c": "CurveTo",
    "v": "CurveTo",
    "y": "CurveTo",
    "re": "Rect",
    "n": "EndPath",
    "S": "Stroke",
    "s": "Stroke",
    "B": "FillAndStroke",
    "B*": "FillAndStroke",
    "b": "FillAndStroke",
    "b*": "FillAndStroke",
    "f": "Fill",
    "F": "Fill",
    "f*": "Fill",
    "sh": "Shade",
    "W": "Clip",
    "W*": "Clip",
    "q": "Save",
    "Q": "Restore",
    "cm": "Transform",
    "w": "LineWidth",
    "d": "Dash",
    "j": "LineJoin",
    "J": "LineCap",
    "M": "MiterLimit",
    "i": "Flatness",
    "gs": "GraphicsState",
    "CS": "StrokeColorSpace",
    "cs": "FillColorSpace",
    "SC": "StrokeColor",
    "SCN": "StrokeColor",
    "G": "StrokeColor",
    "RG": "StrokeColor",
    "K": "StrokeColor",
    "sc": "FillColor",
    "scn": "FillColor",
    "g": "FillColor",
    "rg": "FillColor",
    "k": "FillColor",
    "ri": "RenderingIntent",
    "BT": "BeginText",
    "ET": "EndText",
    "Tc": "CharSpacing",
    "Tw": "WordSpacing",
    "Tz": "TextScaling",
    "TL": "Leading",
    "Tf": "TextFont",
    "Tr": "TextRenderMode",
    "Ts": "TextRise",
    "Td": "MoveTextPosition",
    "TD": "MoveTextPosition",
    "Tm": "SetTextMatrix",
    "T*": "TextNewline",
    "Tj": "TextDraw",
    "'": "TextDraw",
    '"': "TextDraw",
    "TJ": "TextDrawAdjusted",
    "Do": "XObject",
    "INLINE IMAGE": "InlineImage",
}


def display_name(operator: str) -> str:
    """Readable name of a content stream operator; unknown operators keep their token."""

    return OPERATOR_NAMES.get(operator, operator)


def _format_operation(operation: RawOperation) -> str:
    operands = ", ".join(repr(operand) for operand in operation.operands)
    return f"{display_name(operation.operator)}({operands}) [{operation.operator}]"


def dump_operations(page: BackendPage) -> Iterator[str]:
    """Yield one readable line per content stream operation of ``page``."""

    for operation in page.operations():
        yield _format_operation(operation)


def format_line(line: Line, verbose: bool = False) -> str:
    if not verbose:
        return line.text
    first = line.first
    return (
        f"x={first.x:7.2f} y={first.y:7.2f} "
        f"font={first.font_key} size={first.glyph_size:5.2f} | {line.text}"
    )


def count_operators(document: BackendDocument) -> List[Tuple[str, int]]:
    """Count operator usage over every page, most frequent first."""

    counts: Counter = Counter()
    for page in document.iter_pages():
        counts.update(display_name(operation.operator) for operation in page.operations())
    return counts.most_common()

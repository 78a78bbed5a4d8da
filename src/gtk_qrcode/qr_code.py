# SPDX-License-Identifier: GPL-3.0-or-later
"""
QR code component.

Pass the number of columns and the flat, row-major list of modules, where
``True`` means the module is dark and gets a dot:

    qr_code = QrCode(2, [True, False, True, True])

The component is ``Styled``, so the usual setters change the container:

    qr_code = QrCode(2, [True, False, True, True]).bg('lightblue').p(px(8))

and ``refine_dot_style`` changes the dots:

    qr_code = qr_code.refine_dot_style(StyleRefinement(background='red'))
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from .element import Element
from .exceptions import ExceededWidth
from .style import SizeRefinement, StyleRefinement, Styled, rems

logger = logging.getLogger(__name__)

MAX_COLS = 0xFFFF

DEFAULT_STYLE = StyleRefinement(background='white')
DEFAULT_DOT_STYLE = StyleRefinement(
    background='black',
    min_size=SizeRefinement(rems(0.25), rems(0.25)),
)

_EMPTY_CELL = Element()


def check_cols(cols: int) -> int:
    if isinstance(cols, bool) or not isinstance(cols, int):
        raise TypeError(f'Column count must be an int, got {cols!r}')
    if cols < 0:
        raise ValueError(f'Column count must not be negative, got {cols}')
    if cols > MAX_COLS:
        raise ExceededWidth(cols, MAX_COLS)
    return cols


def _grid(cols: int, flags: Iterable[bool], container_style, dot_style) -> Element:
    cols = check_cols(cols)
    dot = Element(style=DEFAULT_DOT_STYLE.refine(dot_style), filled=True)
    children = tuple(dot if is_dark else _EMPTY_CELL for is_dark in flags)

    if cols == 0:
        if children:
            logger.warning('Dropping %d modules: a grid of 0 columns has no slots', len(children))
        children = ()
    elif len(children) != cols * cols:
        logger.warning(
            'Got %d modules for %d columns (expected %d), the last row will be short',
            len(children), cols, cols * cols,
        )

    logger.debug('Rendered %d modules into %d columns', len(children), cols)
    return Element(
        style=DEFAULT_STYLE.refine(container_style),
        children=children,
        grid_cols=cols,
    )


def render(
    cols: int,
    data: Iterable[bool],
    container_style: StyleRefinement | None = None,
    dot_style: StyleRefinement | None = None,
) -> Element:
    """
    Lay out one cell per module in a grid of *cols* columns.

    Dark modules become filled cells styled with *dot_style* refined over
    the default dot style, light ones become empty cells that keep their
    slot. The grid itself gets *container_style* over a white background.

    Args:
        cols: Modules per row, at most MAX_COLS
        data: Row-major "is dark" flags, usually ``cols * cols`` of them

    Returns:
        The grid Element
    """
    return _grid(cols, (bool(is_dark) for is_dark in data), container_style, dot_style)


def render_colors(
    cols: int,
    colors: Iterable[Any],
    container_style: StyleRefinement | None = None,
    dot_style: StyleRefinement | None = None,
    dark: Any = True,
) -> Element:
    """
    Like ``render``, but fills exactly the cells whose color equals *dark*.

    The default reads python-qrcode's ``modules`` as they are: ``True`` is
    dark, ``False`` and ``None`` (not yet placed) are light.
    """
    return _grid(cols, (color == dark for color in colors), container_style, dot_style)


@dataclass(frozen=True)
class QrCode(Styled):
    """
    A QR code rendered as a grid of boxes.

    ``data`` is expected to hold ``cols * cols`` modules, but that isn't
    enforced: extra modules start a short last row.
    """

    cols: int
    data: tuple[bool, ...]
    style: StyleRefinement = DEFAULT_STYLE
    dot_style: StyleRefinement = DEFAULT_DOT_STYLE

    def __post_init__(self):
        object.__setattr__(self, 'cols', check_cols(self.cols))
        object.__setattr__(self, 'data', tuple(bool(is_dark) for is_dark in self.data))

    @classmethod
    def from_colors(cls, cols: int, colors: Iterable[Any], dark: Any = True) -> 'QrCode':
        return cls(cols, [color == dark for color in colors])

    @classmethod
    def from_qrcode(cls, qr) -> 'QrCode':
        """Build from a python-qrcode ``QRCode``, see ``qr_generator.from_qrcode``."""
        from .qr_generator import from_qrcode
        return from_qrcode(qr)

    @property
    def is_square(self) -> bool:
        return len(self.data) == self.cols * self.cols

    def refine_dot_style(self, refinement: StyleRefinement) -> 'QrCode':
        """
        Refine the style of the dots.

        For example, red dots with rounded corners:

            qr_code.refine_dot_style(StyleRefinement(
                background='red',
                corner_radii=CornersRefinement.all(px(2)),
            ))
        """
        return QrCode(self.cols, self.data, self.style, self.dot_style.refine(refinement))

    def render(self) -> Element:
        return render(self.cols, self.data, self.style, self.dot_style)

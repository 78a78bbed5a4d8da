# SPDX-License-Identifier: GPL-3.0-or-later
"""Render QR code matrices as styled GTK 4 widget grids."""

import logging

from .element import Element
from .exceptions import ExceededWidth, QrCodeError
from .qr_code import (
    DEFAULT_DOT_STYLE,
    DEFAULT_STYLE,
    MAX_COLS,
    QrCode,
    render,
    render_colors,
)
from .qr_generator import QRGenerator, from_qrcode
from .style import (
    CornersRefinement,
    EdgesRefinement,
    Length,
    SizeRefinement,
    StyleRefinement,
    Styled,
    px,
    rems,
    style_to_css,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'CornersRefinement',
    'DEFAULT_DOT_STYLE',
    'DEFAULT_STYLE',
    'EdgesRefinement',
    'Element',
    'ExceededWidth',
    'Length',
    'MAX_COLS',
    'QRGenerator',
    'QrCode',
    'QrCodeError',
    'SizeRefinement',
    'StyleRefinement',
    'Styled',
    'from_qrcode',
    'px',
    'render',
    'render_colors',
    'rems',
    'style_to_css',
]

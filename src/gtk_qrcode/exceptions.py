# SPDX-License-Identifier: GPL-3.0-or-later


class QrCodeError(Exception):
    """Base class for all gtk_qrcode errors."""


class ExceededWidth(QrCodeError, ValueError):
    """The QR code has more modules per row than a column count can hold."""

    def __init__(self, width: int, limit: int):
        self.width = width
        self.limit = limit
        super().__init__(f'Exceeded width of {limit}: got {width}')

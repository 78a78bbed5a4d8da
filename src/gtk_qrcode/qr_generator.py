# SPDX-License-Identifier: GPL-3.0-or-later

import logging

import qrcode
from qrcode.constants import ERROR_CORRECT_M

from .exceptions import ExceededWidth
from .qr_code import MAX_COLS, QrCode

logger = logging.getLogger(__name__)


def from_qrcode(qr: qrcode.QRCode) -> QrCode:
    """
    Convert a python-qrcode ``QRCode`` into a QrCode component.

    The matrix is taken from ``get_matrix()``, so the code is made first if
    needed and its own ``border`` turns into rows and columns of light
    modules.

    Raises:
        ExceededWidth: the code is wider than MAX_COLS modules
    """
    matrix = qr.get_matrix()
    width = len(matrix)
    if width > MAX_COLS:
        raise ExceededWidth(width, MAX_COLS)

    return QrCode(width, [is_dark for row in matrix for is_dark in row])


class QRGenerator:
    """Encodes text into QrCode components."""

    def __init__(self, error_correction: int = ERROR_CORRECT_M, border: int = 0, version: int | None = None):
        # The quiet zone is normally drawn as container padding, hence no border
        self.error_correction = error_correction
        self.border = border
        self.version = version

    def generate(self, data: str) -> QrCode:
        """
        Generate a QR code from the given data.

        Args:
            data: The string to encode in the QR code

        Returns:
            QrCode with one module per cell

        Raises:
            qrcode.exceptions.DataOverflowError: data doesn't fit the fixed version
        """
        qr = qrcode.QRCode(
            version=self.version,
            error_correction=self.error_correction,
            border=self.border,
        )
        qr.add_data(data)
        qr.make(fit=self.version is None)

        qr_code = from_qrcode(qr)
        logger.debug('Generated version %s QR code, %d modules wide', qr.version, qr_code.cols)
        return qr_code

# SPDX-License-Identifier: GPL-3.0-or-later

import itertools
import logging

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Gdk', '4.0')

from gi.repository import Gtk, Gdk

from .element import Element
from .qr_code import QrCode
from .style import StyleSheet, pixel_size_request

logger = logging.getLogger(__name__)

_scopes = itertools.count()


def _new_scope() -> str:
    return f'gtk-qrcode-{next(_scopes)}'


def _build(element: Element, sheet: StyleSheet) -> Gtk.Widget:
    if element.is_grid:
        widget = Gtk.Grid(row_homogeneous=True, column_homogeneous=True)
        for index, child in enumerate(element.children):
            row, col = divmod(index, element.grid_cols)
            widget.attach(_build(child, sheet), col, row, 1, 1)
    else:
        widget = Gtk.Box()

    css_class = sheet.class_for(element.style)
    if css_class:
        widget.add_css_class(css_class)
    if element.filled:
        widget.add_css_class('dot')

    width, height = pixel_size_request(element.style)
    if width >= 0 or height >= 0:
        widget.set_size_request(width, height)
    return widget


def _register_provider(display: Gdk.Display, provider: Gtk.CssProvider) -> None:
    Gtk.StyleContext.add_provider_for_display(
        display, provider, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
    )


def _unregister_provider(display: Gdk.Display, provider: Gtk.CssProvider) -> None:
    Gtk.StyleContext.remove_provider_for_display(display, provider)


def _bind_provider(widget: Gtk.Widget, provider: Gtk.CssProvider) -> None:
    """Keep *provider* registered on the widget's display while it is realized."""
    widget.connect('realize', lambda w: _register_provider(w.get_display(), provider))
    widget.connect('unrealize', lambda w: _unregister_provider(w.get_display(), provider))


def build_widget(element: Element) -> Gtk.Widget:
    """
    Realize an element tree as GTK widgets.

    Grids become ``Gtk.Grid``s with homogeneous rows and columns, leaves
    become empty ``Gtk.Box``es. The styles are loaded into a fresh CSS
    provider, available as ``css_provider`` on the returned widget, which
    is registered on the display only while that widget is realized.
    """
    sheet = StyleSheet(_new_scope())
    widget = _build(element, sheet)

    provider = Gtk.CssProvider()
    provider.load_from_string(sheet.to_css())
    _bind_provider(widget, provider)
    widget.css_provider = provider
    return widget


class QrCodeWidget(Gtk.Box):
    """Shows a QrCode and re-renders it whenever a new one is set."""

    __gtype_name__ = 'QrCodeWidget'

    def __init__(self, qr_code: QrCode | None = None, **kwargs):
        super().__init__(**kwargs)

        self.scope = _new_scope()
        self.qr_code: QrCode | None = None
        self.grid: Gtk.Widget | None = None

        # One provider per widget, reloaded on every update
        self.provider = Gtk.CssProvider()
        _bind_provider(self, self.provider)

        if qr_code is not None:
            self.set_qr_code(qr_code)

    def set_qr_code(self, qr_code: QrCode) -> None:
        """Replace the displayed QR code (call from the GTK main thread)."""
        sheet = StyleSheet(self.scope)
        grid = _build(qr_code.render(), sheet)
        self.provider.load_from_string(sheet.to_css())

        if self.grid is not None:
            self.remove(self.grid)
        self.append(grid)

        self.grid = grid
        self.qr_code = qr_code
        logger.debug('Showing %d-column QR code with %d styles', qr_code.cols, len(sheet))

    def get_qr_code(self) -> QrCode | None:
        return self.qr_code

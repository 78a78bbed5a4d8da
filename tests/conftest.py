from __future__ import annotations

import pytest


@pytest.fixture
def gtk():
    gi = pytest.importorskip('gi')
    try:
        gi.require_version('Gtk', '4.0')
        gi.require_version('Gdk', '4.0')
    except ValueError:
        pytest.skip('GTK 4 introspection data is not installed')

    from gi.repository import Gdk, Gtk

    if not Gtk.init_check() or Gdk.Display.get_default() is None:
        pytest.skip('No display available for GTK')
    if not hasattr(Gtk.CssProvider, 'load_from_string'):
        pytest.skip('GTK older than 4.12')
    return Gtk

# SPDX-License-Identifier: GPL-3.0-or-later
"""
Partial style records and their refinement.

A refinement only carries the attributes that were set explicitly; every
attribute left as ``None`` defers to whatever it is refined over, and in
the end to GTK's own theme. Records are frozen, so refining always returns
a new record:

    base = StyleRefinement(background='white')
    style = base.refine(StyleRefinement(padding=EdgesRefinement.all(px(8))))
"""

import dataclasses
from dataclasses import dataclass, field

UNITS = ('px', 'rem', 'em', 'pt')


@dataclass(frozen=True)
class Length:
    """A CSS length such as ``4px`` or ``0.25rem``."""

    value: float
    unit: str = 'px'

    def __post_init__(self):
        if self.unit not in UNITS:
            raise ValueError(f'Unsupported unit {self.unit!r}, expected one of {UNITS}')

    def __str__(self) -> str:
        value = f'{self.value:.6f}'.rstrip('0').rstrip('.')
        return f'{value}{self.unit}'


def px(value: float) -> Length:
    return Length(float(value), 'px')


def rems(value: float) -> Length:
    return Length(float(value), 'rem')


def to_length(value: 'Length | float | None') -> Length | None:
    """Coerce plain numbers to pixel lengths, pass lengths and None through."""
    if value is None or isinstance(value, Length):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f'Expected a Length or a number, got {value!r}')
    return px(value)


class Refinement:
    """Field-wise, override-wins merge shared by all refinement records."""

    def refine(self, other):
        """
        Return a copy of this record with every attribute set in *other* applied.

        Attributes that *other* leaves unset keep this record's value. Nested
        records are refined the same way instead of being replaced whole.
        """
        if other is None:
            return self
        if type(other) is not type(self):
            raise TypeError(f'Cannot refine {type(self).__name__} with {type(other).__name__}')

        changes = {}
        for f in dataclasses.fields(self):
            new = getattr(other, f.name)
            if new is None:
                continue
            old = getattr(self, f.name)
            if isinstance(old, Refinement):
                new = old.refine(new)
            changes[f.name] = new
        return dataclasses.replace(self, **changes) if changes else self

    def is_empty(self) -> bool:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Refinement):
                if not value.is_empty():
                    return False
            elif value is not None:
                return False
        return True


def _coerce_lengths(record):
    for f in dataclasses.fields(record):
        object.__setattr__(record, f.name, to_length(getattr(record, f.name)))


@dataclass(frozen=True)
class EdgesRefinement(Refinement):
    top: Length | None = None
    right: Length | None = None
    bottom: Length | None = None
    left: Length | None = None

    def __post_init__(self):
        _coerce_lengths(self)

    @classmethod
    def all(cls, length) -> 'EdgesRefinement':
        return cls(length, length, length, length)


@dataclass(frozen=True)
class SizeRefinement(Refinement):
    width: Length | None = None
    height: Length | None = None

    def __post_init__(self):
        _coerce_lengths(self)


@dataclass(frozen=True)
class CornersRefinement(Refinement):
    top_left: Length | None = None
    top_right: Length | None = None
    bottom_right: Length | None = None
    bottom_left: Length | None = None

    def __post_init__(self):
        _coerce_lengths(self)

    @classmethod
    def all(cls, radius) -> 'CornersRefinement':
        return cls(radius, radius, radius, radius)


@dataclass(frozen=True)
class StyleRefinement(Refinement):
    """The stylable attributes of a box, every one of them optional."""

    background: str | None = None
    border_color: str | None = None
    opacity: float | None = None
    padding: EdgesRefinement = field(default_factory=EdgesRefinement)
    margin: EdgesRefinement = field(default_factory=EdgesRefinement)
    border_widths: EdgesRefinement = field(default_factory=EdgesRefinement)
    size: SizeRefinement = field(default_factory=SizeRefinement)
    min_size: SizeRefinement = field(default_factory=SizeRefinement)
    corner_radii: CornersRefinement = field(default_factory=CornersRefinement)

    def __post_init__(self):
        # None on a nested record means unset, same as an empty record
        for f in dataclasses.fields(self):
            if f.default_factory is not dataclasses.MISSING and getattr(self, f.name) is None:
                object.__setattr__(self, f.name, f.default_factory())
        if self.opacity is not None and not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f'Opacity must be between 0 and 1, got {self.opacity}')


class Styled:
    """
    Fluent style setters for frozen dataclasses with a ``style`` field.

    Every setter returns a new object; the receiver is left untouched.
    """

    style: StyleRefinement

    def refine_style(self, refinement: StyleRefinement):
        return dataclasses.replace(self, style=self.style.refine(refinement))

    def bg(self, color: str):
        return self.refine_style(StyleRefinement(background=color))

    def p(self, length):
        return self.refine_style(StyleRefinement(padding=EdgesRefinement.all(length)))

    def padding(self, top=None, right=None, bottom=None, left=None):
        return self.refine_style(StyleRefinement(padding=EdgesRefinement(top, right, bottom, left)))

    def m(self, length):
        return self.refine_style(StyleRefinement(margin=EdgesRefinement.all(length)))

    def rounded(self, radius):
        return self.refine_style(StyleRefinement(corner_radii=CornersRefinement.all(radius)))

    def size(self, width, height=None):
        height = width if height is None else height
        return self.refine_style(StyleRefinement(size=SizeRefinement(width, height)))

    def min_size(self, width, height=None):
        height = width if height is None else height
        return self.refine_style(StyleRefinement(min_size=SizeRefinement(width, height)))

    def border(self, width, color: str | None = None):
        return self.refine_style(StyleRefinement(
            border_widths=EdgesRefinement.all(width),
            border_color=color,
        ))

    def opacity(self, value: float):
        return self.refine_style(StyleRefinement(opacity=value))


_EDGES = ('top', 'right', 'bottom', 'left')
_CORNERS = ('top_left', 'top_right', 'bottom_right', 'bottom_left')


def style_to_css(style: StyleRefinement) -> str:
    """Serialize a refinement into GTK CSS declarations (without braces)."""
    decls = []
    if style.background is not None:
        decls.append(f'background-color: {style.background}')
    if style.opacity is not None:
        decls.append(f'opacity: {style.opacity:g}')

    for prop, edges in (('padding', style.padding), ('margin', style.margin)):
        for edge in _EDGES:
            length = getattr(edges, edge)
            if length is not None:
                decls.append(f'{prop}-{edge}: {length}')

    widths = [(edge, getattr(style.border_widths, edge)) for edge in _EDGES]
    if any(length is not None for _, length in widths):
        decls.append('border-style: solid')
        decls.extend(f'border-{edge}-width: {length}' for edge, length in widths if length is not None)
    if style.border_color is not None:
        decls.append(f'border-color: {style.border_color}')

    for corner in _CORNERS:
        radius = getattr(style.corner_radii, corner)
        if radius is not None:
            decls.append(f'border-{corner.replace("_", "-")}-radius: {radius}')

    # GTK CSS has no width/height, a fixed size is expressed as a minimum
    min_size = style.min_size.refine(style.size)
    if min_size.width is not None:
        decls.append(f'min-width: {min_size.width}')
    if min_size.height is not None:
        decls.append(f'min-height: {min_size.height}')

    return '; '.join(decls)


def pixel_size_request(style: StyleRefinement) -> tuple[int, int]:
    """The ``set_size_request`` arguments for a fixed pixel size, -1 where unset."""
    def request(length):
        if length is None or length.unit != 'px':
            return -1
        return round(length.value)

    return request(style.size.width), request(style.size.height)


class StyleSheet:
    """Assigns one CSS class per distinct style and renders the stylesheet."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        self._classes: dict[StyleRefinement, str] = {}

    def class_for(self, style: StyleRefinement) -> str | None:
        if style.is_empty():
            return None
        name = self._classes.get(style)
        if name is None:
            name = f'{self.prefix}-{len(self._classes)}'
            self._classes[style] = name
        return name

    def __len__(self) -> int:
        return len(self._classes)

    def to_css(self) -> str:
        return '\n'.join(
            f'.{name} {{ {style_to_css(style)}; }}'
            for style, name in self._classes.items()
        )

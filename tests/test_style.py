from __future__ import annotations

import pytest

from gtk_qrcode.style import (
    CornersRefinement,
    EdgesRefinement,
    Length,
    SizeRefinement,
    StyleRefinement,
    StyleSheet,
    pixel_size_request,
    px,
    rems,
    style_to_css,
)


def test_length_formatting() -> None:
    assert str(px(4)) == '4px'
    assert str(rems(0.25)) == '0.25rem'
    assert str(Length(1.5, 'em')) == '1.5em'


def test_length_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError):
        Length(1, 'vw')


def test_numbers_are_coerced_to_pixels() -> None:
    edges = EdgesRefinement(top=2, left=3.5)
    assert edges.top == px(2)
    assert edges.left == px(3.5)
    assert edges.right is None


def test_bool_is_not_a_length() -> None:
    with pytest.raises(TypeError):
        SizeRefinement(width=True)


def test_refine_overrides_only_set_fields() -> None:
    base = StyleRefinement(background='white', border_color='gray', padding=EdgesRefinement.all(px(4)))
    merged = base.refine(StyleRefinement(background='red', padding=EdgesRefinement(top=px(8))))

    assert merged.background == 'red'
    assert merged.border_color == 'gray'
    assert merged.padding == EdgesRefinement(px(8), px(4), px(4), px(4))


def test_refine_does_not_mutate_inputs() -> None:
    base = StyleRefinement(background='white')
    override = StyleRefinement(background='black')
    base.refine(override)
    assert base.background == 'white'
    assert override.background == 'black'


def test_refine_with_none_or_empty_is_identity() -> None:
    base = StyleRefinement(background='white', min_size=SizeRefinement(px(1), px(2)))
    assert base.refine(None) == base
    assert base.refine(StyleRefinement()) == base


def test_refine_rejects_other_record_types() -> None:
    with pytest.raises(TypeError):
        StyleRefinement().refine(EdgesRefinement())


def test_refinement_is_associative() -> None:
    a = StyleRefinement(background='white', opacity=0.5, corner_radii=CornersRefinement(top_left=px(1)))
    b = StyleRefinement(background='red', corner_radii=CornersRefinement(top_left=px(2), top_right=px(3)))
    c = StyleRefinement(opacity=1.0, corner_radii=CornersRefinement(top_right=px(9)))

    sequential = a.refine(b).refine(c)
    assert sequential == a.refine(b.refine(c))
    assert sequential.background == 'red'
    assert sequential.opacity == 1.0
    assert sequential.corner_radii == CornersRefinement(top_left=px(2), top_right=px(9))


def test_opacity_range() -> None:
    with pytest.raises(ValueError):
        StyleRefinement(opacity=1.5)


def test_is_empty() -> None:
    assert StyleRefinement().is_empty()
    assert not StyleRefinement(margin=EdgesRefinement(left=px(1))).is_empty()


def test_style_to_css() -> None:
    style = StyleRefinement(
        background='black',
        padding=EdgesRefinement(top=px(2)),
        border_widths=EdgesRefinement(bottom=px(1)),
        border_color='red',
        corner_radii=CornersRefinement(bottom_right=px(10)),
        min_size=SizeRefinement(rems(0.25), rems(0.25)),
    )
    assert style_to_css(style) == '; '.join([
        'background-color: black',
        'padding-top: 2px',
        'border-style: solid',
        'border-bottom-width: 1px',
        'border-color: red',
        'border-bottom-right-radius: 10px',
        'min-width: 0.25rem',
        'min-height: 0.25rem',
    ])


def test_size_takes_precedence_over_min_size_in_css() -> None:
    style = StyleRefinement(min_size=SizeRefinement(rems(0.25), rems(0.25)), size=SizeRefinement(width=rems(1)))
    css = style_to_css(style)
    assert 'min-width: 1rem' in css
    assert 'min-height: 0.25rem' in css


def test_empty_style_has_no_css() -> None:
    assert style_to_css(StyleRefinement()) == ''


def test_pixel_size_request() -> None:
    assert pixel_size_request(StyleRefinement(size=SizeRefinement(px(10), rems(1)))) == (10, -1)
    assert pixel_size_request(StyleRefinement()) == (-1, -1)


def test_stylesheet_shares_classes_between_equal_styles() -> None:
    sheet = StyleSheet('qr')
    first = sheet.class_for(StyleRefinement(background='black'))
    second = sheet.class_for(StyleRefinement(background='black'))
    third = sheet.class_for(StyleRefinement(background='white'))

    assert first == second == 'qr-0'
    assert third == 'qr-1'
    assert sheet.class_for(StyleRefinement()) is None
    assert len(sheet) == 2
    assert sheet.to_css() == '.qr-0 { background-color: black; }\n.qr-1 { background-color: white; }'


def test_large_and_precise_lengths_stay_plain_decimals() -> None:
    assert str(Length(1234567.0)) == '1234567px'
    assert str(px(0)) == '0px'
    assert str(rems(0.125)) == '0.125rem'
    assert str(Length(1.234567, 'em')) == '1.234567em'


def test_none_nested_fields_mean_unset() -> None:
    style = StyleRefinement(background='red', padding=None, size=None, corner_radii=None)

    assert style.padding == EdgesRefinement()
    assert style.size == SizeRefinement()
    assert style.corner_radii == CornersRefinement()
    assert style_to_css(style) == 'background-color: red'
    assert StyleRefinement(padding=EdgesRefinement.all(px(2))).refine(style).padding == EdgesRefinement.all(px(2))

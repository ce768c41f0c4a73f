import pytest

from roguekit.color import HSV, RGB, ColorErrorKind, HtmlColorConversionError

EPS = 1.1920928955078125e-07


def test_make_rgb_minimal():
    black = RGB()
    assert black.r < EPS
    assert black.g < EPS
    assert black.b < EPS


def test_make_hsv_minimal():
    black = HSV()
    assert black.h < EPS
    assert black.s < EPS
    assert black.v < EPS


def test_convert_red_to_hsv():
    hsv = RGB.from_f32(1.0, 0.0, 0.0).to_hsv()
    assert hsv.h < EPS
    assert abs(hsv.s - 1.0) < EPS
    assert abs(hsv.v - 1.0) < EPS


def test_convert_green_to_hsv():
    hsv = RGB.from_f32(0.0, 1.0, 0.0).to_hsv()
    assert abs(hsv.h - 120.0 / 360.0) < EPS
    assert abs(hsv.s - 1.0) < EPS
    assert abs(hsv.v - 1.0) < EPS


def test_convert_blue_to_hsv():
    hsv = RGB.from_f32(0.0, 0.0, 1.0).to_hsv()
    assert abs(hsv.h - 240.0 / 360.0) < EPS
    assert abs(hsv.s - 1.0) < EPS
    assert abs(hsv.v - 1.0) < EPS


def test_convert_olive_to_hsv():
    hsv = RGB.from_u8(128, 128, 0).to_hsv()
    assert abs(hsv.h - 60.0 / 360.0) < EPS
    assert abs(hsv.s - 1.0) < EPS
    assert abs(hsv.v - 0.5019608) < EPS


def test_convert_olive_to_rgb():
    rgb = HSV.from_f32(60.0 / 360.0, 1.0, 0.5019608).to_rgb()
    assert abs(rgb.r - 128.0 / 255.0) < EPS
    assert abs(rgb.g - 128.0 / 255.0) < EPS
    assert rgb.b < EPS


def test_red_hex():
    rgb = RGB.from_hex("#FF0000")
    assert abs(rgb.r - 1.0) < EPS
    assert rgb.g < EPS
    assert rgb.b < EPS


def test_green_hex():
    rgb = RGB.from_hex("#00FF00")
    assert rgb.r < EPS
    assert abs(rgb.g - 1.0) < EPS
    assert rgb.b < EPS


def test_blue_hex():
    rgb = RGB.from_hex("#0000FF")
    assert rgb.r < EPS
    assert rgb.g < EPS
    assert abs(rgb.b - 1.0) < EPS


def test_blue_named():
    rgb = RGB.named((0, 0, 255))
    assert rgb.r < EPS
    assert rgb.g < EPS
    assert abs(rgb.b - 1.0) < EPS


def test_named_by_palette_name():
    assert RGB.named("blue") == RGB(0.0, 0.0, 1.0)


def test_named_unknown_raises():
    with pytest.raises(KeyError):
        RGB.named("no_such_colour")


def test_lowercase_hex():
    rgb = RGB.from_hex("#eeffee")
    assert rgb.r == pytest.approx(238 / 255)
    assert rgb.g == pytest.approx(1.0)
    assert rgb.b == pytest.approx(238 / 255)


@pytest.mark.parametrize(
    "code, kind",
    [
        ("", ColorErrorKind.INVALID_STRING_LENGTH),
        ("FF0000", ColorErrorKind.MISSING_HASH),
        ("#FF00", ColorErrorKind.INVALID_STRING_LENGTH),
        ("#FF00ZZ", ColorErrorKind.INVALID_CHARACTER),
        ("#G", ColorErrorKind.INVALID_CHARACTER),
        ("#FF000000", ColorErrorKind.INVALID_STRING_LENGTH),
    ],
)
def test_hex_errors(code, kind):
    with pytest.raises(HtmlColorConversionError) as info:
        RGB.from_hex(code)
    assert info.value.kind is kind


def test_hex_error_is_value_error():
    with pytest.raises(ValueError):
        RGB.from_hex("#12")


def test_from_f32_clamps():
    assert RGB.from_f32(-1.0, 2.0, 0.5) == RGB(0.0, 1.0, 0.5)


def test_from_u8_out_of_range():
    with pytest.raises(ValueError):
        RGB.from_u8(256, 0, 0)


def test_from_u8_white():
    assert RGB.from_u8(255, 255, 255) == RGB(1.0, 1.0, 1.0)


def test_greyscale_white_stays_white():
    grey = RGB(1.0, 1.0, 1.0).to_greyscale()
    assert grey.r == pytest.approx(1.0)
    assert grey.r == grey.g == grey.b


def test_greyscale_green_weight():
    grey = RGB(0.0, 1.0, 0.0).to_greyscale()
    assert grey.r == pytest.approx(0.7152)


def test_desaturate_red_is_white():
    rgb = RGB(1.0, 0.0, 0.0).desaturate()
    assert rgb.r == pytest.approx(1.0)
    assert rgb.g == pytest.approx(1.0)
    assert rgb.b == pytest.approx(1.0)


def test_lerp_midpoint():
    mid = RGB(0.0, 0.0, 0.0).lerp(RGB(1.0, 1.0, 1.0), 0.5)
    assert mid == RGB(0.5, 0.5, 0.5)


def test_lerp_endpoints():
    a = RGB(0.2, 0.4, 0.6)
    b = RGB(1.0, 0.0, 0.5)
    assert a.lerp(b, 0.0) == a
    end = a.lerp(b, 1.0)
    assert end.r == pytest.approx(1.0)
    assert end.g == pytest.approx(0.0)
    assert end.b == pytest.approx(0.5)


def test_add_scalar_and_color():
    c = RGB(0.2, 0.3, 0.4) + 0.1
    assert (c.r, c.g, c.b) == pytest.approx((0.3, 0.4, 0.5))
    d = RGB(0.1, 0.2, 0.3) + RGB(0.1, 0.1, 0.1)
    assert (d.r, d.g, d.b) == pytest.approx((0.2, 0.3, 0.4))


def test_add_does_not_clamp():
    c = RGB(0.9, 0.9, 0.9) + 0.5
    assert c.r == pytest.approx(1.4)


def test_sub_scalar_and_color():
    c = RGB(0.5, 0.5, 0.5) - 0.2
    assert (c.r, c.g, c.b) == pytest.approx((0.3, 0.3, 0.3))
    d = RGB(0.5, 0.6, 0.7) - RGB(0.5, 0.5, 0.5)
    assert (d.r, d.g, d.b) == pytest.approx((0.0, 0.1, 0.2))


def test_mul_scalar_and_color():
    c = RGB(1.0, 0.5, 0.2) * 0.3
    assert (c.r, c.g, c.b) == pytest.approx((0.3, 0.15, 0.06))
    d = RGB(1.0, 0.5, 0.2) * RGB(0.5, 0.5, 0.5)
    assert (d.r, d.g, d.b) == pytest.approx((0.5, 0.25, 0.1))


def test_add_unsupported_type():
    with pytest.raises(TypeError):
        RGB() + "x"


def test_hsv_round_trip():
    original = RGB.from_u8(10, 200, 77)
    back = original.to_hsv().to_rgb()
    assert back.r == pytest.approx(original.r, abs=1e-6)
    assert back.g == pytest.approx(original.g, abs=1e-6)
    assert back.b == pytest.approx(original.b, abs=1e-6)


def test_negative_hue_gives_black():
    assert HSV.from_f32(-0.1, 1.0, 1.0).to_rgb() == RGB(0.0, 0.0, 0.0)


def test_achromatic_hue_zero():
    hsv = RGB(0.5, 0.5, 0.5).to_hsv()
    assert hsv.h == 0.0
    assert hsv.s == 0.0
    assert hsv.v == 0.5


def test_rgb_is_immutable():
    c = RGB(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        c.r = 0.5
    assert c == RGB(0.1, 0.2, 0.3)
    assert c.r == 0.1
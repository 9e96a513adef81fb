"""
Color Space - Parsing, CIE Lab / HCL conversion, and interpolators.

Lab values use the D50 white point with Bradford-adapted sRGB matrices, so
neutral grays map to a = b = 0 exactly. HCL is the cylindrical form of Lab
(hue in degrees, chroma, luminance). Achromatic colors carry a NaN hue, and
pure black/white also carry a NaN chroma; interpolators treat NaN components
as "take the other endpoint's value".
"""

import math
import re
from typing import Any, Callable, Sequence

import numpy as np
from plotly.colors import hex_to_rgb, unlabel_rgb

# D50 reference white
XN = 0.96422
YN = 1.0
ZN = 0.82521

T0 = 4 / 29
T1 = 6 / 29
T2 = 3 * T1 * T1
T3 = T1 * T1 * T1

_LRGB_TO_XYZ = np.array([
    [0.4360747, 0.3850649, 0.1430804],
    [0.2225045, 0.7168786, 0.0606169],
    [0.0139322, 0.0971045, 0.7141733],
])

_XYZ_TO_LRGB = np.array([
    [3.1338561, -1.6168667, -0.4906146],
    [-0.9787684, 1.9161415, 0.0334540],
    [0.0719453, -0.2289914, 1.4052427],
])

_HEX_PATTERN = re.compile(r'^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')
_RGB_PATTERN = re.compile(r'^rgb\(\s*[\d.]+\s*,\s*[\d.]+\s*,\s*[\d.]+\s*\)$')


def parse_color(value: Any) -> tuple[float, float, float]:
    """
    Parse a color into an (r, g, b) tuple with channels in 0..255.

    Args:
        value: '#rgb' or '#rrggbb' hex string, 'rgb(r, g, b)' string,
               or a sequence of three numbers.

    Returns:
        Tuple of three floats.

    Raises:
        ValueError: if the value is not a recognised color.
    """
    if isinstance(value, str):
        text = value.strip()
        if _HEX_PATTERN.match(text):
            digits = text[1:]
            if len(digits) == 3:
                digits = ''.join(ch * 2 for ch in digits)
            return tuple(float(c) for c in hex_to_rgb('#' + digits))
        if _RGB_PATTERN.match(text):
            return tuple(float(c) for c in unlabel_rgb(text))
        raise ValueError(f"Unrecognised color: {value!r}")

    if isinstance(value, (list, tuple, np.ndarray)) and len(value) == 3:
        try:
            return tuple(float(c) for c in value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Unrecognised color: {value!r}") from e

    raise ValueError(f"Unrecognised color: {value!r}")


def to_hex(rgb: Sequence[float]) -> str:
    """Format an (r, g, b) triple as '#rrggbb', rounding and clamping each channel."""
    channels = []
    for c in rgb:
        c = 0 if math.isnan(c) else math.floor(c + 0.5)
        channels.append(max(0, min(255, c)))
    return '#{:02x}{:02x}{:02x}'.format(*channels)


def _rgb2lrgb(x: np.ndarray) -> np.ndarray:
    x = x / 255
    return np.where(x <= 0.04045, x / 12.92, np.power((x + 0.055) / 1.055, 2.4))


def _lrgb2rgb(x: np.ndarray) -> np.ndarray:
    # np.where evaluates both branches; keep the power well-defined for x < 0
    safe = np.where(x > 0, x, 0.0)
    return 255 * np.where(x <= 0.0031308, 12.92 * x, 1.055 * np.power(safe, 1 / 2.4) - 0.055)


def _xyz2lab(t: float) -> float:
    return t ** (1 / 3) if t > T3 else t / T2 + T0


def _lab2xyz(t: float) -> float:
    return t * t * t if t > T1 else T2 * (t - T0)


def rgb_to_lab(rgb: Sequence[float]) -> tuple[float, float, float]:
    """Convert sRGB (0..255) to CIE Lab (D50)."""
    r, g, b = (float(c) for c in rgb)
    lrgb = _rgb2lrgb(np.array([r, g, b]))
    x, y, z = _LRGB_TO_XYZ @ lrgb
    fy = _xyz2lab(y / YN)
    if r == g == b:
        fx = fz = fy
    else:
        fx = _xyz2lab(x / XN)
        fz = _xyz2lab(z / ZN)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_rgb(lab: Sequence[float]) -> tuple[float, float, float]:
    """Convert CIE Lab (D50) to unclamped sRGB (0..255). NaN a/b count as zero."""
    l, a, b = lab
    fy = (l + 16) / 116
    fx = fy if math.isnan(a) else fy + a / 500
    fz = fy if math.isnan(b) else fy - b / 200
    xyz = np.array([XN * _lab2xyz(fx), YN * _lab2xyz(fy), ZN * _lab2xyz(fz)])
    r, g, b = _lrgb2rgb(_XYZ_TO_LRGB @ xyz)
    return float(r), float(g), float(b)


def rgb_to_hcl(rgb: Sequence[float]) -> tuple[float, float, float]:
    """Convert sRGB to (hue, chroma, luminance)."""
    l, a, b = rgb_to_lab(rgb)
    if a == 0 and b == 0:
        chroma = 0.0 if 0 < l < 100 else math.nan
        return math.nan, chroma, l
    h = math.degrees(math.atan2(b, a))
    return (h + 360 if h < 0 else h), math.hypot(a, b), l


def hcl_to_rgb(hcl: Sequence[float]) -> tuple[float, float, float]:
    """Convert (hue, chroma, luminance) to unclamped sRGB."""
    h, c, l = hcl
    if math.isnan(h):
        return lab_to_rgb((l, 0.0, 0.0))
    h = math.radians(h)
    return lab_to_rgb((l, math.cos(h) * c, math.sin(h) * c))


def interpolate_number(a: Any, b: Any) -> Callable[[float], float]:
    """Linear interpolation between two numbers."""
    a, b = float(a), float(b)
    return lambda t: a * (1 - t) + b * t


def _nogamma(a: float, b: float) -> Callable[[float], float]:
    d = b - a
    if d and not math.isnan(d):
        return lambda t: a + t * d
    value = b if math.isnan(a) else a
    return lambda t: value


def _hue(a: float, b: float) -> Callable[[float], float]:
    d = b - a
    if d and not math.isnan(d):
        if d > 180 or d < -180:
            d -= 360 * round(d / 360)
        return lambda t: a + t * d
    value = b if math.isnan(a) else a
    return lambda t: value


def interpolate_hcl(start: Any, end: Any) -> Callable[[float], str]:
    """
    Interpolate between two colors in HCL space.

    Hue follows the shorter arc around the color wheel; chroma and luminance
    are linear. Values of t outside [0, 1] extrapolate and are clamped only
    when formatted.

    Args:
        start: Color at t = 0 (any form accepted by parse_color).
        end: Color at t = 1.

    Returns:
        Function mapping t to a '#rrggbb' string.
    """
    h0, c0, l0 = rgb_to_hcl(parse_color(start))
    h1, c1, l1 = rgb_to_hcl(parse_color(end))
    h = _hue(h0, h1)
    c = _nogamma(c0, c1)
    l = _nogamma(l0, l1)

    def interpolator(t: float) -> str:
        return to_hex(hcl_to_rgb((h(t), c(t), l(t))))

    return interpolator

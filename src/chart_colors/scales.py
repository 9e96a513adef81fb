"""
Color Scales - Key-to-color mappings with an inspectable domain.

Any callable that also offers domain() / set_domain() satisfies the
ColorScale protocol. Four adapters cover the common cases:

- OrdinalScale: discrete keys to a discrete range, first-seen order.
- QuantizeScale: continuous numeric keys bucketed into discrete steps.
- LinearScale: continuous numeric keys interpolated between range stops.
- ConstantScale: one value for every key.
"""

import logging
import math
from bisect import bisect_right
from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable

from .colorspace import interpolate_number

logger = logging.getLogger(__name__)

Interpolator = Callable[[Any, Any], Callable[[float], Any]]


@runtime_checkable
class ColorScale(Protocol):
    """Minimal contract the color resolver depends on."""

    def __call__(self, key: Any) -> Any: ...

    def domain(self) -> list: ...

    def set_domain(self, domain: Sequence[Any]) -> "ColorScale": ...


def _to_number(value: Any) -> float:
    """Coerce a domain bound or key to float; None and non-numeric give NaN."""
    if value is None:
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


class OrdinalScale:
    """
    Maps each distinct key to a range entry in first-seen order.

    Keys not yet in the domain are appended to it on first lookup, unless an
    explicit unknown value has been configured with set_unknown(). The range
    wraps when there are more keys than colors.
    """

    def __init__(self, range_: Sequence[Any] = (), domain: Sequence[Any] = ()):
        self._range = list(range_)
        self._domain: list = []
        self._index: dict = {}
        self._implicit = True
        self._unknown: Any = None
        self.set_domain(domain)

    def __call__(self, key: Any) -> Any:
        i = self._index.get(key)
        if i is None:
            if not self._implicit:
                return self._unknown
            self._domain.append(key)
            i = self._index[key] = len(self._domain) - 1
        if not self._range:
            return None
        return self._range[i % len(self._range)]

    def domain(self) -> list:
        return list(self._domain)

    def set_domain(self, domain: Sequence[Any]) -> "OrdinalScale":
        self._domain = []
        self._index = {}
        for key in domain:
            if key in self._index:
                continue
            self._domain.append(key)
            self._index[key] = len(self._domain) - 1
        return self

    def range(self) -> list:
        return list(self._range)

    def set_range(self, range_: Sequence[Any]) -> "OrdinalScale":
        self._range = list(range_)
        return self

    def unknown(self) -> Any:
        return self._unknown

    def set_unknown(self, value: Any) -> "OrdinalScale":
        """Return `value` for unseen keys instead of allocating a new slot."""
        self._implicit = False
        self._unknown = value
        return self

    def copy(self) -> "OrdinalScale":
        scale = OrdinalScale(self._range, self._domain)
        scale._implicit = self._implicit
        scale._unknown = self._unknown
        return scale

    def __repr__(self) -> str:
        return f"OrdinalScale(range={self._range!r}, domain={self._domain!r})"


class QuantizeScale:
    """
    Splits a numeric [x0, x1] domain into len(range) equal buckets.

    Only meaningful for ordered numeric keys: None, NaN and non-numeric keys
    resolve to the unknown value (None by default).
    """

    def __init__(self, range_: Sequence[Any] = (0, 1), domain: Sequence[Any] = (0, 1)):
        self._x0 = 0.0
        self._x1 = 1.0
        self._range = list(range_)
        self._thresholds: list[float] = []
        self._unknown: Any = None
        self.set_domain(domain)

    def _rescale(self) -> None:
        n = len(self._range) - 1
        x0, x1 = self._x0, self._x1
        self._thresholds = [((i + 1) * x1 - (i - n) * x0) / (n + 1) for i in range(max(n, 0))]

    def __call__(self, key: Any) -> Any:
        x = _to_number(key)
        if math.isnan(x) or not self._range:
            return self._unknown
        return self._range[bisect_right(self._thresholds, x)]

    def domain(self) -> list:
        return [self._x0, self._x1]

    def set_domain(self, domain: Sequence[Any]) -> "QuantizeScale":
        x0, x1 = (list(domain) + [None, None])[:2]
        self._x0, self._x1 = _to_number(x0), _to_number(x1)
        self._rescale()
        return self

    def range(self) -> list:
        return list(self._range)

    def set_range(self, range_: Sequence[Any]) -> "QuantizeScale":
        self._range = list(range_)
        self._rescale()
        return self

    def thresholds(self) -> list[float]:
        """Bucket boundaries between consecutive range entries."""
        return list(self._thresholds)

    def invert_extent(self, value: Any) -> tuple[float, float]:
        """Return the [lo, hi) key interval that maps to `value`."""
        try:
            i = self._range.index(value)
        except ValueError:
            return math.nan, math.nan
        if i < 1:
            return self._x0, (self._thresholds[0] if self._thresholds else self._x1)
        if i >= len(self._thresholds):
            return self._thresholds[-1], self._x1
        return self._thresholds[i - 1], self._thresholds[i]

    def unknown(self) -> Any:
        return self._unknown

    def set_unknown(self, value: Any) -> "QuantizeScale":
        self._unknown = value
        return self

    def copy(self) -> "QuantizeScale":
        return QuantizeScale(self._range, self.domain()).set_unknown(self._unknown)

    def __repr__(self) -> str:
        return f"QuantizeScale(range={self._range!r}, domain={self.domain()!r})"


class LinearScale:
    """
    Piecewise-linear mapping from a numeric domain onto a range.

    The interpolator factory decides how range stops are blended; numbers
    blend numerically by default, and linear_colors() plugs in HCL blending.
    Only the first min(len(domain), len(range)) stops take part. Keys outside
    the domain extrapolate unless clamping is enabled.
    """

    def __init__(
        self,
        range_: Sequence[Any] = (0, 1),
        domain: Sequence[Any] = (0, 1),
        interpolate: Interpolator = interpolate_number,
        clamp: bool = False,
    ):
        self._domain: list[float] = []
        self._range = list(range_)
        self._interpolate = interpolate
        self._clamp = clamp
        self._unknown: Any = None
        self._piecewise: Optional[Callable[[float], Any]] = None
        self.set_domain(domain)

    def _rescale(self) -> None:
        self._piecewise = None

    def _build(self) -> Callable[[float], Any]:
        domain, range_ = list(self._domain), list(self._range)
        j = min(len(domain), len(range_)) - 1
        if len(range_) > len(domain) >= 2:
            logger.debug("Linear scale uses %d of %d range stops", len(domain), len(range_))
        if j < 1:
            value = range_[0] if range_ else None
            return lambda x: value

        if domain[j] < domain[0]:
            domain = domain[:j + 1][::-1]
            range_ = range_[:j + 1][::-1]

        normalizers = [_normalize(domain[i], domain[i + 1]) for i in range(j)]
        interpolators = [self._interpolate(range_[i], range_[i + 1]) for i in range(j)]

        if j == 1:
            return lambda x: interpolators[0](normalizers[0](x))

        def polymap(x: float) -> Any:
            i = bisect_right(domain, x, 1, j) - 1
            return interpolators[i](normalizers[i](x))

        return polymap

    def __call__(self, key: Any) -> Any:
        x = _to_number(key)
        if math.isnan(x):
            return self._unknown
        if self._clamp and self._domain:
            lo, hi = min(self._domain[0], self._domain[-1]), max(self._domain[0], self._domain[-1])
            x = max(lo, min(hi, x))
        if self._piecewise is None:
            self._piecewise = self._build()
        return self._piecewise(x)

    def domain(self) -> list:
        return list(self._domain)

    def set_domain(self, domain: Sequence[Any]) -> "LinearScale":
        self._domain = [_to_number(d) for d in domain]
        self._rescale()
        return self

    def range(self) -> list:
        return list(self._range)

    def set_range(self, range_: Sequence[Any]) -> "LinearScale":
        self._range = list(range_)
        self._rescale()
        return self

    def interpolate(self) -> Interpolator:
        return self._interpolate

    def set_interpolate(self, interpolate: Interpolator) -> "LinearScale":
        self._interpolate = interpolate
        self._rescale()
        return self

    def clamp(self) -> bool:
        return self._clamp

    def set_clamp(self, clamp: bool) -> "LinearScale":
        self._clamp = bool(clamp)
        return self

    def unknown(self) -> Any:
        return self._unknown

    def set_unknown(self, value: Any) -> "LinearScale":
        self._unknown = value
        return self

    def copy(self) -> "LinearScale":
        return LinearScale(
            self._range, self._domain, self._interpolate, self._clamp
        ).set_unknown(self._unknown)

    def __repr__(self) -> str:
        return f"LinearScale(range={self._range!r}, domain={self._domain!r})"


def _normalize(a: float, b: float) -> Callable[[float], float]:
    span = b - a
    if span and not math.isnan(span):
        return lambda x: (x - a) / span
    value = math.nan if math.isnan(span) else 0.5
    return lambda x: value


class ConstantScale:
    """Returns the same value for every key. The domain is kept but never consulted."""

    def __init__(self, value: Any):
        self.value = value
        self._domain: list = []

    def __call__(self, key: Any) -> Any:
        return self.value

    def domain(self) -> list:
        return list(self._domain)

    def set_domain(self, domain: Sequence[Any]) -> "ConstantScale":
        self._domain = list(domain)
        return self

    def copy(self) -> "ConstantScale":
        return ConstantScale(self.value).set_domain(self._domain)

    def __repr__(self) -> str:
        return f"ConstantScale({self.value!r})"


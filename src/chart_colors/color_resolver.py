"""
Color Resolver - Universal coloring support composable into any chart.

A host chart holds a ColorResolver and asks it for one color per rendered
datum. Resolution goes through one of two paths:

- a color calculator, when set, returns the color directly;
- otherwise the color accessor extracts a key and the color scale maps it.

The resolver never validates keys against the scale's domain; what happens
to an out-of-domain key is up to the scale.
"""

import logging
from typing import Any, Callable, Optional, Protocol, Sequence

from .colorspace import interpolate_hcl
from .config import ColorConfig, config as default_config
from .scales import ConstantScale, LinearScale, OrdinalScale, QuantizeScale

logger = logging.getLogger(__name__)

Accessor = Callable[..., Any]


class ChartHost(Protocol):
    """What the resolver needs from the chart that owns it."""

    def data(self) -> Sequence[Any]: ...

    def key_accessor(self) -> Accessor: ...


def _extent(data: Sequence[Any], accessor: Accessor) -> list:
    """
    Return [min, max] of accessor(d, i) over data.

    None and NaN are skipped, as are values that cannot be compared with the
    first accepted value. Returns [None, None] when nothing is accepted.
    """
    lo = hi = None
    for i, datum in enumerate(data):
        value = accessor(datum, i)
        if value is None:
            continue
        try:
            if value != value:  # NaN
                continue
            if lo is None:
                lo = hi = value
            elif value < lo:
                lo = value
            elif value > hi:
                hi = value
        except (TypeError, ValueError):
            logger.debug("Skipping non-comparable color key %r at index %d", value, i)
    return [lo, hi]


class ColorResolver:
    """
    Resolves colors for a host chart's data points.

    Args:
        host: Chart providing data() and key_accessor().
        config: Source of the default colors; the shared config when omitted.
    """

    def __init__(self, host: ChartHost, config: Optional[ColorConfig] = None):
        self._host = host
        self._config = config if config is not None else default_config
        self._colors: Callable[[Any], Any] = OrdinalScale(self._config.default_colors())
        self._color_accessor: Accessor = self._key_color_accessor
        self._color_calculator: Optional[Accessor] = None

    def _key_color_accessor(self, d: Any, i: Optional[int] = None) -> Any:
        return self._host.key_accessor()(d, i)

    def get_color(self, d: Any, i: Optional[int] = None) -> Any:
        """
        Get the color for datum `d` at position `i`.

        Charts call this once per rendered element.
        """
        if self._color_calculator is not None:
            return self._color_calculator(d, i)
        return self._colors(self._color_accessor(d, i))

    def calculate_color_domain(self) -> "ColorResolver":
        """
        Set the scale's domain to the [min, max] of the color accessor over
        the host's data. Intended for scales with ordered two-point domains.
        """
        new_domain = _extent(self._host.data(), self._color_accessor)
        logger.debug("Calculated color domain: %s", new_domain)
        self._colors.set_domain(new_domain)
        return self

    # -------------------------------------------------------------------------
    # Scale
    # -------------------------------------------------------------------------

    def colors(self) -> Callable[[Any], Any]:
        """Return the current color scale."""
        return self._colors

    def set_colors(self, color_scale: Any) -> "ColorResolver":
        """
        Replace the color scale.

        Args:
            color_scale: One of
                - a scale or any callable: used as is;
                - a list or tuple of colors: wrapped in a QuantizeScale
                  (legacy form, numeric keys only);
                - any other value: every datum gets that one color.

        Returns:
            This resolver, for chaining.
        """
        if isinstance(color_scale, (list, tuple)):
            logger.warning(
                "Color sequence given to set_colors(); installing a quantize scale, "
                "which only supports numeric keys. Use ordinal_colors() for categories."
            )
            self._colors = QuantizeScale(color_scale)
        elif callable(color_scale):
            self._colors = color_scale
        else:
            self._colors = ConstantScale(color_scale)
        logger.debug("Installed color scale: %r", self._colors)
        return self

    def ordinal_colors(self, range_: Sequence[Any]) -> "ColorResolver":
        """Install an ordinal scale: one color per distinct key, in first-seen order."""
        return self.set_colors(OrdinalScale(range_))

    def linear_colors(self, range_: Sequence[Any]) -> "ColorResolver":
        """
        Install a linear scale over the color stops in `range_`, blended in
        HCL space. The domain defaults to [0, 1]; see calculate_color_domain().
        """
        return self.set_colors(LinearScale(range_, interpolate=interpolate_hcl))

    # -------------------------------------------------------------------------
    # Accessor, domain, calculator
    # -------------------------------------------------------------------------

    def color_accessor(self) -> Accessor:
        return self._color_accessor

    def set_color_accessor(self, color_accessor: Accessor) -> "ColorResolver":
        """
        Set the function mapping (datum, index) to a key on the color scale.
        The default delegates to the host's key accessor.
        """
        self._color_accessor = color_accessor
        return self

    def color_domain(self) -> list:
        return self._colors.domain()

    def set_color_domain(self, domain: Sequence[Any]) -> "ColorResolver":
        """Set the scale's domain. Must be a concrete sequence, not a function."""
        self._colors.set_domain(domain)
        return self

    @property
    def has_color_calculator(self) -> bool:
        return self._color_calculator is not None

    def color_calculator(self) -> Accessor:
        """
        Return the override calculator, or get_color when none is set, so the
        result is always a callable producing colors.
        """
        if self._color_calculator is not None:
            return self._color_calculator
        return self.get_color

    def set_color_calculator(self, color_calculator: Optional[Accessor]) -> "ColorResolver":
        """
        Override color selection with a function (datum, index) -> color,
        bypassing the accessor and scale. Pass None to remove the override.
        """
        self._color_calculator = color_calculator
        return self

"""
Weight initialization scheme enumeration.

`WeightInit` is the closed set of schemes understood by the dispatcher.
Legacy short names (``VI``, ``DISTRIBUTION``, ``SIZE``) are accepted by
`WeightInit.parse` so configuration files written against older naming
keep working.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from ._errors import UnrecognizedSchemeError


class WeightInit(Enum):
    """
    Supported weight initialization schemes.

    Members
    -------
    NORMALIZED:
        Uniform [0, 1) shifted by -0.5 and divided by fan-in.
    UNIFORM:
        Fixed-seed uniform in [-a, a] with ``a`` derived from fan-in.
    VARIANCE_SCALED:
        Uniform mapped to [-r, r) with ``r = sqrt(6) / sqrt(sum(shape) + 1)``.
    DISTRIBUTION_SAMPLED:
        Each axis-0 slice drawn from a caller-supplied distribution.
    FAN_IN_OUT_SIZE:
        Fixed-seed uniform bounded by ``4 * sqrt(6 / (fan_in + fan_out))``.
    ZERO:
        All zeros.
    """

    NORMALIZED = "normalized"
    UNIFORM = "uniform"
    VARIANCE_SCALED = "variance_scaled"
    DISTRIBUTION_SAMPLED = "distribution_sampled"
    FAN_IN_OUT_SIZE = "fan_in_out_size"
    ZERO = "zero"

    @classmethod
    def parse(cls, value: Union["WeightInit", str]) -> "WeightInit":
        """
        Resolve a member, a member name, a member value or a legacy alias.

        Parameters
        ----------
        value:
            A `WeightInit` member or a case-insensitive name such as
            ``"zero"``, ``"FAN_IN_OUT_SIZE"`` or the legacy ``"VI"``.

        Returns
        -------
        WeightInit
            The resolved member.

        Raises
        ------
        UnrecognizedSchemeError
            If `value` does not name a scheme.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls.__members__[key]
            if key in _LEGACY_ALIASES:
                return _LEGACY_ALIASES[key]
        raise UnrecognizedSchemeError(value)


_LEGACY_ALIASES = {
    "VI": WeightInit.VARIANCE_SCALED,
    "DISTRIBUTION": WeightInit.DISTRIBUTION_SAMPLED,
    "SIZE": WeightInit.FAN_IN_OUT_SIZE,
}

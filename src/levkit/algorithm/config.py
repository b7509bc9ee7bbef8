"""Configuration objects for the similarity and median algorithms.

Both configs are frozen (immutable) dataclasses validated on construction,
so an invalid value never reaches an algorithm.  There is no process-wide
configuration: every call receives its config explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from levkit.errors import InvalidArgumentError

__all__ = ["JaroWinklerConfig", "MedianConfig", "MedianMethod"]


class MedianMethod(StrEnum):
    """Which solver produces the initial median estimate.

    - GREEDY: symbol-by-symbol extension minimising the weighted distance sum.
    - QUICK:  proportional positional voting; fast, low fidelity.
    - SET:    best member of the input set.
    """

    GREEDY = auto()
    QUICK = auto()
    SET = auto()


@dataclass(frozen=True, slots=True)
class JaroWinklerConfig:
    """Immutable Jaro-Winkler parameters.

    Attributes:
        prefix_weight: Boost per common-prefix symbol (>= 0).  With the
            default 0.1 and a 4-symbol prefix the remaining gap to 1.0 is
            closed by 40%.
        max_prefix: Longest common prefix taken into account (>= 0).
    """

    prefix_weight: float = 0.1
    max_prefix: int = 4

    def __post_init__(self) -> None:
        if self.prefix_weight < 0.0:
            msg = f"prefix_weight must be >= 0.0, got {self.prefix_weight}"
            raise InvalidArgumentError(msg)
        if self.max_prefix < 0:
            msg = f"max_prefix must be >= 0, got {self.max_prefix}"
            raise InvalidArgumentError(msg)


@dataclass(frozen=True, slots=True)
class MedianConfig:
    """Immutable configuration for ``levkit.api.median``.

    Attributes:
        method: Solver used for the initial estimate.
        improve_passes: Maximum number of ``median_improve`` passes run on the
            estimate.  Iteration stops early once a pass changes nothing.
    """

    method: MedianMethod = MedianMethod.GREEDY
    improve_passes: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.method, MedianMethod):
            msg = f"method must be a MedianMethod, got {self.method!r}"
            raise InvalidArgumentError(msg)
        if self.improve_passes < 0:
            msg = f"improve_passes must be >= 0, got {self.improve_passes}"
            raise InvalidArgumentError(msg)

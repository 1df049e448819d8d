"""Defaults shared by the slice sum helpers and their tests."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

DEFAULT_DTYPE = np.float64
SLICE_AXIS = 2
DEFAULT_REQUIRE_SQUARE = True


@dataclass(frozen=True, slots=True)
class SliceSumOptions:
    """Validation options for a weighted slice sum.

    Parameters
    ----------
    require_square:
        When ``True`` (the default) every slice must be square and a cube of
        shape ``(N, P, K)`` with ``N != P`` is rejected.  When ``False`` the
        result simply takes the slice shape ``(N, P)``.
    """

    require_square: bool = DEFAULT_REQUIRE_SQUARE

    def describe(self) -> str:
        """Return a human readable description.

        >>> SliceSumOptions().describe()
        'square slices required'
        >>> SliceSumOptions(require_square=False).describe()
        'rectangular slices allowed'
        """

        if self.require_square:
            return "square slices required"
        return "rectangular slices allowed"

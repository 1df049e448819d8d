"""Weighted sums of matrix slices."""

from importlib import metadata

from .config import SliceSumOptions
from .errors import CubeSumError, InvalidArgumentError, ShapeMismatchError
from .weighted import WeightedSliceSum, round_product, round_product_elementwise

# Name exported by the existing host bindings.
roundProduct = round_product

__all__ = [
    "CubeSumError",
    "InvalidArgumentError",
    "ShapeMismatchError",
    "SliceSumOptions",
    "WeightedSliceSum",
    "roundProduct",
    "round_product",
    "round_product_elementwise",
    "__version__",
]


def __getattr__(name: str):
    if name == "__version__":
        try:
            return metadata.version("cubesum")
        except metadata.PackageNotFoundError:  # pragma: no cover - best effort
            return "0"
    raise AttributeError(name)

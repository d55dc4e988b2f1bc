"""
Example: random matrix operations and a transformed shape.

Draws a random matrix product and a random inversion the way the
visualizer's side panel shows them, then folds a small transform chain
onto one of the preset shapes.

Run with ``python -m linviz.demo``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from linviz.config.config import DISPLAY_CONFIG
from linviz.config.presets import get_shape_preset
from linviz.matrix import Matrix
from linviz.transform.pipeline import TransformChain

logger = logging.getLogger(__name__)


@dataclass
class ExampleOperations:
    """One random multiplication and one random inversion.

    ``inverse`` is the invalid sentinel when ``matrix`` happens to be singular.
    """

    lhs: Matrix
    rhs: Matrix
    product: Matrix
    matrix: Matrix
    inverse: Matrix

    def format(self, places: int = DISPLAY_CONFIG.decimal_places) -> str:
        """Render both operations as text."""
        return "\n\n".join(
            [
                "Matrix Multiplication",
                f"{self.lhs.to_string(places)}\nx\n{self.rhs.to_string(places)}\n="
                f"\n{self.product.to_string(places)}",
                "Matrix Inversion",
                f"{self.matrix.to_string(places)}^-1\n=\n{self.inverse.to_string(places)}",
            ]
        )


def random_matrix(rows: int, cols: int, rng: np.random.Generator) -> Matrix:
    """Matrix with integer entries drawn uniformly from [0, 9]."""
    return Matrix(rows, cols).map(lambda *_: int(rng.integers(0, 10)))


def example_operations(rng: np.random.Generator | None = None) -> ExampleOperations:
    """Draw a random product (sizes 2 or 3) and a random inversion.

    :param rng: Random generator, a fresh default one if omitted
    :returns: ExampleOperations holding operands and results
    """
    if rng is None:
        rng = np.random.default_rng()
    sizes = [int(size) for size in rng.integers(2, 4, size=4)]

    lhs = random_matrix(sizes[0], sizes[1], rng)
    rhs = random_matrix(sizes[1], sizes[2], rng)
    matrix = random_matrix(sizes[3], sizes[3], rng)
    return ExampleOperations(
        lhs=lhs,
        rhs=rhs,
        product=lhs.multiply(rhs),
        matrix=matrix,
        inverse=matrix.inverse(),
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    print(example_operations(np.random.default_rng(42)).format())

    chain = TransformChain().rotate(90).translate(1, 0).scale(2, 2)
    shape = get_shape_preset("triangle")
    print()
    print("Transforms:", ", ".join(chain.describe()))
    print("Before:", shape.vertices())
    print("After: ", chain(shape).vertices())


if __name__ == "__main__":
    main()

"""Resolve a grid of probability markers into definite pieces."""

import random

try:
    from .markers import resolve_marker
except ImportError:
    from engine.markers import resolve_marker


def resolve_cells(cells, rand=None):
    """
    Draw every marker independently and return a new grid of -1/0/1.
    `rand` is a zero-argument callable returning floats in [0, 1); defaults to random.random.
    Nothing is cached: two calls on the same cells are independent draws.
    """
    rand = rand or random.random
    return [[resolve_marker(marker, rand) for marker in row] for row in cells]

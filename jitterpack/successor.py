#
# We want to enumerate the integer grid around the origin in rings of
# increasing size, a ring being all points with the same max(|x|,|y|).
# This is the visiting order for the 5x5 square (y grows downwards):
#
#                           24 17  9 13 21
#                           16  8  1  5 18
#                           12  4  0  2 10
#                           20  7  3  6 14
#                           23 15 11 19 22
#
# Each ring starts in the middle of the top edge and goes round clockwise,
# one point per side. After each round it moves one step further towards
# the corners, alternating left and right, so the order looks a bit random
# ("jittery") instead of sweeping a corner-aligned spiral. The corners come
# last; the top left corner steps up to the next ring.
#
# Python ints don't overflow, so every step is defined for every point.
# Bounding the search is the job of whoever drives it.

from collections import namedtuple
from math import isqrt
from typing import NamedTuple


class LatticePoint(NamedTuple):
    x: int
    y: int

    def __str__(self):
        return "%d,%d" % (self.x, self.y)


ORIGIN = LatticePoint(0, 0)


def ring(p) -> int:
    """Chebyshev distance to the origin, i.e. the index of p's ring"""
    x, y = p
    return max(abs(x), abs(y))


def manhattan(p) -> int:
    x, y = p
    return abs(x) + abs(y)


def ring_entry(k) -> LatticePoint:
    """The first point of ring k."""
    if k < 0:
        raise ValueError("Ring numbers are not negative", k)
    return LatticePoint(0, -k)


def ring_exit(k) -> LatticePoint:
    """The last point of ring k."""
    if k < 0:
        raise ValueError("Ring numbers are not negative", k)
    return LatticePoint(-k, -k)


# The three cases of `successor_jitter`.

def _descend(x, y):
    # (x,y) is the origin or a ring's top left corner
    return LatticePoint(0, y - 1)


def _jitter(x, y):
    # Left edge: continue on the top edge. Coming from the lower half we're
    # one step further out.
    if y >= 0:
        return LatticePoint(y + 1, x)
    return LatticePoint(y, x)


def _rotate(x, y):
    # quarter turn, clockwise when y grows downwards
    return LatticePoint(-y, x)


def successor_jitter(p, tile=None) -> LatticePoint:
    """
    Given a lattice point, return the next one to try.

    Starting at the origin, this enumerates all of ℤ×ℤ in non-decreasing
    order of max(|x|,|y|). Within a ring the order is the "jittery" one
    shown at the top of this module.

    The tile is ignored. It's accepted so that all successor functions can
    be called the same way.
    """
    x, y = p
    cost = max(abs(x), abs(y))

    # This covers both the origin and the end of a ring. Don't split it.
    if x <= 0 and x == y:
        return _descend(x, y)
    if x == -cost and y != cost:
        return _jitter(x, y)
    return _rotate(x, y)


def successor_manhattan(p, tile=None) -> LatticePoint:
    """
    Given a lattice point, return the next one on a diamond-shaped spiral,
    i.e. in non-decreasing order of |x|+|y|.

    Each circle starts at (d,0) and goes counter-clockwise.
    """
    x, y = p
    if x > 0 and y >= 0:  # first quadrant
        return LatticePoint(x - 1, y + 1)
    if x <= 0 and y > 0:  # second
        return LatticePoint(x - 1, y - 1)
    if x < 0 and y <= 0:  # third
        return LatticePoint(x + 1, y - 1)
    if y < 0:  # fourth
        if y == -1:
            # (d-1,-1) is the end of circle d; (d,0) has been visited
            return LatticePoint(x + 2, 0)
        return LatticePoint(x + 1, y + 1)
    return LatticePoint(1, 0)


Strategy = namedtuple("Strategy", "successor cost")

STRATEGIES = {
    "jitter": Strategy(successor_jitter, ring),
    "manhattan": Strategy(successor_manhattan, manhattan),
}


def get_strategy(name) -> Strategy:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise KeyError(name, "known: " + ", ".join(sorted(STRATEGIES))) from None


def walk(start=ORIGIN, successor=successor_jitter, tile=None):
    """
    Yield `start` and then its successors, forever.
    """
    p = LatticePoint(*start)
    while True:
        yield p
        p = successor(p, tile)


def jitter_ring(k):
    """
    Generate the points of ring k in visiting order.
    """
    p = ring_entry(k)
    yield p
    for _ in range(8 * k - 1):
        p = successor_jitter(p)
        yield p


def jitter_to(r):
    """
    Generate the jittery sequence from the origin up to (and including)
    ring r.
    """
    for k in range(r + 1):
        yield from jitter_ring(k)


# Ring k holds the indices (2k-1)² … (2k+1)²-1. Within it, step 4j+n is
# the top edge point (a,-k), turned n times, where a runs
# 0, 1,-1, 2,-2, … k-1,-(k-1), k.

def _edge_for(j):
    if j % 2:
        return (j + 1) // 2
    return -(j // 2)


def _step_for(a):
    if a > 0:
        return 2 * a - 1
    return -2 * a


def jitter_offset(n) -> LatticePoint:
    """
    Given a non-negative integer N, return the N'th point of the jittery
    sequence that starts at the origin.
    """
    if n < 0:
        raise ValueError("Indices are not negative", n)
    if n == 0:
        return ORIGIN
    k = (isqrt(n) + 1) // 2
    j, turns = divmod(n - (2 * k - 1) ** 2, 4)
    p = LatticePoint(_edge_for(j), -k)
    for _ in range(turns):
        p = _rotate(*p)
    return p


def jitter_index(p) -> int:
    """
    Given a lattice point, return its position in the jittery sequence
    that starts at the origin. This is the inverse of `jitter_offset`.
    """
    k = ring(p)
    if k == 0:
        return 0
    x, y = p
    for turns in range(4):
        if y == -k and -k < x <= k:
            return (2 * k - 1) ** 2 + 4 * _step_for(x) + turns
        x, y = y, -x  # turn back
    raise RuntimeError("not reached", p)

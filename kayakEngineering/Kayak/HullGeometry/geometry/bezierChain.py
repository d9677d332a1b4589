# -- Cubic Bezier Chain -- #

'''
Chain of cubic Bezier segments sharing their end/start anchors.

A chain is built from a flat list of 2D control points of length 4 + 3n:

    P0 C C P1 C C P2 ... Pn

Segment i uses points[3i .. 3i+3]. The end anchor of segment i is the very
same tuple as the start anchor of segment i+1, so the chain is C0-continuous
by construction.
'''

from __future__ import annotations

import math
import numbers
from typing import Iterable, Sequence, Tuple

from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError

Point2D = Tuple[float, float]
Point3D = Tuple[float, float, float]
Segment = Tuple[Point2D, Point2D, Point2D, Point2D]


def isNumber(value) -> bool:
    '''True for finite real numbers (bools excluded).'''
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def cubicBezier(a: float, b: float, c: float, d: float, t: float) -> float:
    '''
    Evaluate one coordinate of a cubic Bezier with the Bernstein basis.

    Parameters:
    -----------
    a, b, c, d : float
        Coordinate of start, control 1, control 2 and end point
    t : float
        Curve parameter in [0, 1]

    Returns:
    --------
    float : Coordinate at t
    '''
    s = 1.0 - t
    return s * s * s * a + 3.0 * s * s * t * b + 3.0 * s * t * t * c + t * t * t * d


def _toPoint(point, index: int) -> Point2D:
    try:
        x, y = point
    except (TypeError, ValueError):
        raise InvalidInputError(f'Control point {index} is not an (x, y) pair: {point!r}')
    if not (isNumber(x) and isNumber(y)):
        raise InvalidInputError(f'Control point {index} has non-numeric coordinates: {point!r}')
    return (float(x), float(y))


class BezierChain:
    '''
    Immutable chain of cubic Bezier segments.

    Attributes x1 and x2 hold the x coordinate of the first and last anchor
    and are used for domain membership tests.

    Examples:
    ---------
    >>> chain = BezierChain([(0, 0), (10, 20), (30, 20), (40, 0)])
    >>> chain.segmentCount, chain.x1, chain.x2
    (1, 0.0, 40.0)
    '''

    __slots__ = ('_points', '_segments', '_x1', '_x2')

    def __init__(self, points: Iterable[Sequence[float]]) -> None:
        '''
        Build the chain from a flat ordered list of 2D control points.

        Parameters:
        -----------
        points : Iterable[Sequence[float]]
            4 + 3n control points (x, y)

        Raises:
        -------
        InvalidInputError : wrong point count or non-numeric coordinates
        '''
        if isinstance(points, (str, bytes)):
            raise InvalidInputError('Expected a sequence of (x, y) points')
        try:
            pts = [_toPoint(p, i) for i, p in enumerate(points)]
        except TypeError:
            raise InvalidInputError('Expected a sequence of (x, y) points')

        nPoints = len(pts)
        if nPoints < 4:
            raise InvalidInputError(f'Expected 4 or more points but got {nPoints}')
        if (nPoints - 4) % 3 != 0:
            raise InvalidInputError(
                f'Expected 4 + n * 3 points, e.g. 4, 7, 10, 13 ... but got {nPoints}'
            )

        segments = []
        start = pts[0]
        for i in range(1, nPoints, 3):
            end = pts[i + 2]
            segments.append((start, pts[i], pts[i + 1], end))
            start = end

        object.__setattr__(self, '_points', tuple(pts))
        object.__setattr__(self, '_segments', tuple(segments))
        object.__setattr__(self, '_x1', segments[0][0][0])
        object.__setattr__(self, '_x2', segments[-1][3][0])

    def __setattr__(self, name, value):
        raise AttributeError('BezierChain is immutable')

    @property
    def segments(self) -> Tuple[Segment, ...]:
        '''Ordered segments, each (start, control1, control2, end).'''
        return self._segments

    @property
    def controlPoints(self) -> Tuple[Point2D, ...]:
        '''The flat control point list the chain was built from.'''
        return self._points

    @property
    def segmentCount(self) -> int:
        return len(self._segments)

    @property
    def x1(self) -> float:
        '''x of the first anchor.'''
        return self._x1

    @property
    def x2(self) -> float:
        '''x of the last anchor.'''
        return self._x2

    @property
    def startPoint(self) -> Point2D:
        return self._segments[0][0]

    @property
    def endPoint(self) -> Point2D:
        return self._segments[-1][3]

    def segmentPointAt(self, segmentIndex: int, t: float) -> Point2D:
        '''
        Evaluate segment segmentIndex at parameter t.

        Parameters:
        -----------
        segmentIndex : int
            Index into segments
        t : float
            Curve parameter in [0, 1]

        Returns:
        --------
        Point2D : (x, y) on the segment
        '''
        p0, p1, p2, p3 = self._segments[segmentIndex]
        return (
            cubicBezier(p0[0], p1[0], p2[0], p3[0], t),
            cubicBezier(p0[1], p1[1], p2[1], p3[1], t),
        )

    def __len__(self) -> int:
        return len(self._segments)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BezierChain):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return (f'BezierChain(segments={self.segmentCount}, '
                f'x1={self._x1:g}, x2={self._x2:g})')

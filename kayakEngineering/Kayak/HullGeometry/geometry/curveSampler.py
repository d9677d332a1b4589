# -- Bezier Chain Sampling -- #

'''
Turns a BezierChain into point lists.

Two complementary strategies:
  - Theta sampling: uniform steps of the curve parameter t. Works for any
    chain, including cross sections whose x runs back and forth.
  - Interval sampling: uniform steps of x, each solved for y by bisection.
    Needs x to increase monotonically along the chain (longitudinal curves).

Both rely on the point-at-x primitive for the inversion x -> y.
'''

from __future__ import annotations

from typing import List

from kayakEngineering.Kayak.HullGeometry import constants as const
from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError, OutOfDomainError
from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import (
    BezierChain,
    Point2D,
    Segment,
    cubicBezier,
    isNumber,
)


######################################################################
# -- Point at X -- #
######################################################################

def _segmentYAtX(segment: Segment, x: float, tolerance: float) -> float:
    '''
    Solve y at x inside one segment by bisection over t.

    Stops when |x - x(t)| <= tolerance or after the iteration ceiling and
    returns the estimate reached at that point.
    '''
    p0, p1, p2, p3 = segment

    # Anchors are returned exactly
    if x == p0[0]:
        return p0[1]
    if x == p3[0]:
        return p3[1]

    lower = 0.0
    upper = 1.0
    t = (lower + upper) / 2.0
    xt = cubicBezier(p0[0], p1[0], p2[0], p3[0], t)

    iteration = 0
    while abs(x - xt) > tolerance and iteration < const.maxBisectionIterations:
        iteration += 1
        if x > xt:
            lower = t
        else:
            upper = t
        t = (lower + upper) / 2.0
        xt = cubicBezier(p0[0], p1[0], p2[0], p3[0], t)

    return cubicBezier(p0[1], p1[1], p2[1], p3[1], t)


def _checkX(chain: BezierChain, x) -> float:
    if not isNumber(x):
        raise InvalidInputError(f'x must be a finite number, got {x!r}')
    x = float(x)
    if x < chain.x1 or x > chain.x2:
        raise OutOfDomainError(
            f'Point x {x:g} is out of bounds [{chain.x1:g}, {chain.x2:g}]'
        )
    return x


def pointAtX(chain: BezierChain, x: float, toleranceMm: float = const.defaultToleranceMm) -> float:
    '''
    Get y at (approximately) x on a chain whose x increases monotonically.

    The active segment is found by a linear scan over the segments' end x.
    Within it, the curve parameter is bisected until the evaluated x is
    within toleranceMm of x, or the iteration ceiling is reached.

    Parameters:
    -----------
    chain : BezierChain
        Curve to evaluate
    x : float
        Target x, must lie in [chain.x1, chain.x2]
    toleranceMm : float
        Accepted |x - x(t)| deviation

    Returns:
    --------
    float : y at x

    Raises:
    -------
    OutOfDomainError : x outside [chain.x1, chain.x2]
    InvalidInputError : x not a finite number
    '''
    x = _checkX(chain, x)
    if not isNumber(toleranceMm) or toleranceMm < 0:
        raise InvalidInputError(f'Tolerance must be a non-negative number, got {toleranceMm!r}')

    segments = chain.segments
    index = 0
    while x > segments[index][3][0]:
        index += 1
        if index >= len(segments):
            raise OutOfDomainError(f'Point x {x:g} is out of bounds')

    return _segmentYAtX(segments[index], x, toleranceMm)


######################################################################
# -- Theta Sampling -- #
######################################################################

def sampleTheta(chain: BezierChain, nPoints: int) -> List[Point2D]:
    '''
    Sample approximately nPoints points at uniform steps of t.

    The parameter increment per segment is 1 / ((nPoints - nSegments) / nSegments).
    A point is kept only when its x differs from the previously kept point, so
    degenerate or vertical stretches collapse; every segment's end anchor is
    always kept. Due to this and to floating point stepping, the number of
    points returned is close to, but not guaranteed to equal, nPoints.

    Parameters:
    -----------
    chain : BezierChain
        Curve to sample
    nPoints : int
        Desired number of points, must exceed the segment count

    Returns:
    --------
    List[Point2D] : Sampled points, first and last are the chain's anchors
    '''
    if not isNumber(nPoints) or int(nPoints) != nPoints:
        raise InvalidInputError(f'Point count must be an integer, got {nPoints!r}')
    nSegments = chain.segmentCount
    if nPoints <= nSegments:
        raise InvalidInputError(
            f'Point count {nPoints} must exceed the segment count {nSegments}'
        )

    increment = 1.0 / ((nPoints - nSegments) / nSegments)

    points: List[Point2D] = []
    lastX = None

    for index, segment in enumerate(chain.segments):
        t = 0.0
        while t < 1.0:
            point = chain.segmentPointAt(index, t)
            if lastX is None or point[0] != lastX:
                points.append(point)
                lastX = point[0]
            t += increment

        end = segment[3]
        points.append((end[0], end[1]))
        lastX = end[0]

    return points


######################################################################
# -- Interval Sampling -- #
######################################################################

def sampleInterval(chain: BezierChain, intervalMm: float) -> List[Point2D]:
    '''
    Sample points at fixed x spacing over [x1, x2].

    The first and last points are the exact chain anchors. In between, x
    advances by intervalMm from x1 and each y is solved by bisection with a
    tolerance of intervalMm / 2 + 1.

    Parameters:
    -----------
    chain : BezierChain
        Curve with monotonically increasing x
    intervalMm : float
        x spacing between samples

    Returns:
    --------
    List[Point2D] : Sampled points
    '''
    if not isNumber(intervalMm) or intervalMm <= 0:
        raise InvalidInputError(f'Interval must be a positive number, got {intervalMm!r}')

    tolerance = intervalMm / 2.0 + 1.0
    segments = chain.segments

    start = chain.startPoint
    points: List[Point2D] = [(start[0], start[1])]

    index = 0
    x = chain.x1 + intervalMm
    while x < chain.x2:
        # Wind forward to the segment containing x
        while x > segments[index][3][0] and index < len(segments) - 1:
            index += 1
        points.append((x, _segmentYAtX(segments[index], x, tolerance)))
        x += intervalMm

    end = chain.endPoint
    points.append((end[0], end[1]))
    return points

# -- Bezier Chain Tests -- #

'''
Construction, validation and evaluation of BezierChain.
'''

import pytest

from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError
from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import BezierChain, cubicBezier, isNumber

ARCH = [(0, 0), (10, 20), (30, 20), (40, 0)]
WAVE = [(0, 0), (10, 10), (20, 10), (30, 0), (40, -10), (50, -10), (60, 0)]


def testSingleSegment():
    chain = BezierChain(ARCH)
    assert chain.segmentCount == 1
    assert len(chain) == 1
    assert chain.x1 == 0.0
    assert chain.x2 == 40.0
    assert chain.startPoint == (0.0, 0.0)
    assert chain.endPoint == (40.0, 0.0)


def testSegmentsShareAnchors():
    '''The end of segment i is the very same value as the start of i+1.'''
    chain = BezierChain(WAVE)
    assert chain.segmentCount == 2
    assert chain.segments[0][3] is chain.segments[1][0]
    assert chain.segments[1] == ((30.0, 0.0), (40.0, -10.0), (50.0, -10.0), (60.0, 0.0))
    assert chain.x2 == 60.0


@pytest.mark.parametrize('count', [0, 3, 5, 6, 8])
def testRejectsBadPointCounts(count):
    points = [(i, i) for i in range(count)]
    with pytest.raises(InvalidInputError):
        BezierChain(points)


@pytest.mark.parametrize('bad', [
    [(0, 0), (1, 1), (2, 'a'), (3, 3)],
    [(0, 0), (1, 1), (2,), (3, 3)],
    [(0, 0), (1, 1), (2, float('nan')), (3, 3)],
    [(0, 0), (1, 1), (True, 2), (3, 3)],
    'abcd',
    None,
])
def testRejectsNonNumericPoints(bad):
    with pytest.raises(InvalidInputError):
        BezierChain(bad)


def testInvalidInputIsValueError():
    with pytest.raises(ValueError):
        BezierChain([(0, 0)])


def testImmutable():
    chain = BezierChain(ARCH)
    with pytest.raises(AttributeError):
        chain.x1 = 5.0


def testEqualityByControlPoints():
    assert BezierChain(ARCH) == BezierChain([(float(x), float(y)) for x, y in ARCH])
    assert BezierChain(ARCH) != BezierChain(WAVE)
    assert hash(BezierChain(ARCH)) == hash(BezierChain(ARCH))


def testSegmentPointAt():
    chain = BezierChain(ARCH)
    assert chain.segmentPointAt(0, 0.0) == (0.0, 0.0)
    assert chain.segmentPointAt(0, 1.0) == (40.0, 0.0)
    assert chain.segmentPointAt(0, 0.5) == pytest.approx((20.0, 15.0))


def testCubicBezierEndpoints():
    assert cubicBezier(1.0, 5.0, 7.0, 3.0, 0.0) == 1.0
    assert cubicBezier(1.0, 5.0, 7.0, 3.0, 1.0) == 3.0


def testIsNumber():
    assert isNumber(3)
    assert isNumber(2.5)
    assert not isNumber(True)
    assert not isNumber('3')
    assert not isNumber(float('inf'))

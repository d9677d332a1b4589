# -- Strip Stitching Tests -- #

'''
Ring matching, fan distribution, mirroring and the strip wrapper.
'''

from collections import Counter

import pytest

from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError
from kayakEngineering.Kayak.HullGeometry.geometry.crossSection import crossSectionAt
from kayakEngineering.Kayak.HullGeometry.geometry.curveSampler import sampleTheta
from kayakEngineering.Kayak.HullGeometry.geometry.meshStitcher import (
    StitchOptions,
    StripLayout,
    mirrorFacets,
    stitchRings,
    stitchStrip,
)


def _ring(n, offset=0.0):
    '''n distinct points on a slanted line.'''
    return [(10.0 * i + offset, 5.0 * i + offset) for i in range(n)]


def _edges(facets):
    counts = Counter()
    for f in facets:
        for p, q in ((f[0], f[1]), (f[1], f[2]), (f[2], f[0])):
            counts[frozenset((p, q))] += 1
    return counts


######################################################################
# -- Layout -- #
######################################################################

def testLayoutEqualRings():
    layout = StripLayout.forCounts(5, 5)
    assert layout.nCommon == 5
    assert layout.fanCount == 0
    assert layout.quadCount == 4


def testLayoutSplitsSurplus():
    layout = StripLayout.forCounts(20, 3)
    assert (layout.extraBeg1, layout.extraEnd1) == (8, 9)
    assert (layout.extraBeg2, layout.extraEnd2) == (0, 0)
    assert layout.nCommon == 3

    layout = StripLayout.forCounts(3, 20)
    assert (layout.extraBeg2, layout.extraEnd2) == (8, 9)
    assert layout.nCommon == 3


def testLayoutRejectsEmptyRing():
    with pytest.raises(InvalidInputError):
        StripLayout.forCounts(0, 3)


######################################################################
# -- Ring Stitching -- #
######################################################################

@pytest.mark.parametrize('n1, n2', [(3, 3), (10, 10), (5, 4), (4, 5), (20, 3), (3, 20), (2, 7)])
def testFacetCount(n1, n2):
    facets = stitchRings(0.0, _ring(n1), 50.0, _ring(n2, offset=1.0))
    assert len(facets) == 2 * (min(n1, n2) - 1) + abs(n1 - n2)


@pytest.mark.parametrize('n1, n2', [(6, 6), (20, 3), (3, 20), (7, 4)])
def testStripIsWatertightBetweenRings(n1, n2):
    '''Ring edges are used once; rungs are shared except the two borders.'''
    ring1 = _ring(n1)
    ring2 = _ring(n2, offset=1.0)
    facets = stitchRings(0.0, ring1, 50.0, ring2)
    edges = _edges(facets)

    a = [(0.0, y, z) for y, z in ring1]
    b = [(50.0, y, z) for y, z in ring2]
    for ring in (a, b):
        for p, q in zip(ring[:-1], ring[1:]):
            assert edges.pop(frozenset((p, q))) == 1

    # Everything left is a rung between the rings
    assert all(len({p[0] for p in edge}) == 2 for edge in edges)
    assert sorted(edges.values()).count(1) == 2
    assert edges[frozenset((a[0], b[0]))] == 1
    assert edges[frozenset((a[-1], b[-1]))] == 1
    assert all(count in (1, 2) for count in edges.values())


def testFacetsSpanBothPositions():
    facets = stitchRings(100.0, _ring(4), 150.0, _ring(4))
    for facet in facets:
        assert {p[0] for p in facet} == {100.0, 150.0}


######################################################################
# -- Mirroring -- #
######################################################################

def testMirrorReversesAndReflects():
    facets = stitchRings(0.0, _ring(4), 50.0, _ring(6, offset=1.0))
    mirrored = mirrorFacets(facets, 0.0)
    assert len(mirrored) == 2 * len(facets)
    for original, reflected, source in zip(mirrored[0::2], mirrored[1::2], facets):
        assert original == source
        assert reflected == tuple((p[0], -p[1], p[2]) for p in reversed(source))


def testShiftWithoutMirror():
    facet = ((0.0, 1.0, 2.0), (1.0, 2.0, 3.0), (2.0, 3.0, 4.0))
    assert mirrorFacets([facet], 1000.0, mirror=False) == [
        ((0.0, 1001.0, 2.0), (1.0, 1002.0, 3.0), (2.0, 1003.0, 4.0)),
    ]


######################################################################
# -- Strips From Sections -- #
######################################################################

def testStitchStripCounts(flatHull):
    chain1 = crossSectionAt(flatHull, 1000)
    chain2 = crossSectionAt(flatHull, 2000)
    n1 = len(sampleTheta(chain1, 10))
    n2 = len(sampleTheta(chain2, 10))
    expected = 2 * (min(n1, n2) - 1) + abs(n1 - n2)

    mesh = stitchStrip(1000, chain1, 2000, chain2)
    assert len(mesh) == 2 * expected
    half = stitchStrip(1000, chain1, 2000, chain2, StitchOptions(mirror=False))
    assert len(half) == expected


def testStitchStripInvertsZ(flatHull):
    chain = crossSectionAt(flatHull, 2000)
    ring = sampleTheta(chain, 10)
    plain = StitchOptions(mirror=False, invertZ=False, lateralShiftMm=0.0)
    inverted = StitchOptions(mirror=False, invertZ=True, lateralShiftMm=0.0)

    for options, sign in ((plain, 1.0), (inverted, -1.0)):
        expected = {(y, z * sign) for y, z in ring}
        for facet in stitchStrip(2000, chain, 2100, chain, options):
            for p in facet:
                assert (p[1], p[2]) in expected


def testStitchStripRejectsBadPositions(flatHull):
    chain = crossSectionAt(flatHull, 2000)
    with pytest.raises(InvalidInputError):
        stitchStrip('a', chain, 2100, chain)


@pytest.mark.parametrize('samples', [1, 0, 2.5, 'ten'])
def testStitchOptionsValidation(samples):
    with pytest.raises(InvalidInputError):
        StitchOptions(samplesPerRing=samples)

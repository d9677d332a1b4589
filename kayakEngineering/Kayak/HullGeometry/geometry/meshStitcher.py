# -- Cross-Section Strip Stitching -- #

'''
Joins two cross-section curves into a triangle strip.

The two curves are sampled as rings at longitudinal positions x1 and x2.
Their point counts usually differ (theta sampling collapses points with
repeated x), so the longer ring gets its surplus points connected by fans
converging on the first and last point of the shorter ring:

    x1 x2             x1 x2             x1 x2
    a                 a - b             a
       c              | / |                c   <- last point of ring 2
    b                 c - d             b

    begin fan         common quads      end fan

Half of the surplus goes to the begin fan (rounded down), the rest to the
end fan. All triangles are wound right-handed for outward normals and,
with mirroring on, followed by a copy reflected about the centerline with
reversed vertex order.
'''

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from kayakEngineering.Kayak.HullGeometry import constants as const
from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError
from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import BezierChain, Point2D, Point3D, isNumber
from kayakEngineering.Kayak.HullGeometry.geometry.curveSampler import sampleTheta

Facet = Tuple[Point3D, Point3D, Point3D]
Mesh = List[Facet]


@dataclass(frozen=True)
class StitchOptions:
    '''
    Options for stitching one strip.

    samplesPerRing : int
        Theta sample count for each ring
    mirror : bool
        Append a centerline-mirrored copy of every facet
    invertZ : bool
        Negate the vertical coordinate (design z points down)
    lateralShiftMm : float
        Added to y of every vertex, original and mirrored
    '''

    samplesPerRing: int = const.defaultSamplesPerRing
    mirror: bool = True
    invertZ: bool = True
    lateralShiftMm: float = const.defaultLateralShiftMm

    def __post_init__(self) -> None:
        if not isNumber(self.samplesPerRing) or int(self.samplesPerRing) != self.samplesPerRing \
                or self.samplesPerRing < 2:
            raise InvalidInputError(f'samplesPerRing must be an integer >= 2, got {self.samplesPerRing!r}')
        if not isNumber(self.lateralShiftMm):
            raise InvalidInputError(f'lateralShiftMm must be numeric, got {self.lateralShiftMm!r}')


@dataclass(frozen=True)
class StripLayout:
    '''
    How two rings of n1 and n2 points are matched.

    extraBeg1 / extraEnd1 are surplus points of ring 1 (non-zero only when
    n1 > n2), extraBeg2 / extraEnd2 those of ring 2. nCommon is the number of
    points paired one to one.
    '''

    n1: int
    n2: int
    extraBeg1: int = 0
    extraEnd1: int = 0
    extraBeg2: int = 0
    extraEnd2: int = 0
    nCommon: int = 0

    @classmethod
    def forCounts(cls, n1: int, n2: int) -> StripLayout:
        '''Split the surplus of the longer ring between begin and end fans.'''
        if n1 < 1 or n2 < 1:
            raise InvalidInputError(f'Cannot stitch rings of {n1} and {n2} points')
        diff = n1 - n2
        extraBeg = abs(diff) // 2
        extraEnd = abs(diff) - extraBeg
        if diff > 0:
            return cls(n1, n2, extraBeg1=extraBeg, extraEnd1=extraEnd, nCommon=n1 - abs(diff))
        if diff < 0:
            return cls(n1, n2, extraBeg2=extraBeg, extraEnd2=extraEnd, nCommon=n2 - abs(diff))
        return cls(n1, n2, nCommon=n1)

    @property
    def fanCount(self) -> int:
        return self.extraBeg1 + self.extraEnd1 + self.extraBeg2 + self.extraEnd2

    @property
    def quadCount(self) -> int:
        return max(self.nCommon - 1, 0)


def _ring(chain: BezierChain, nPoints: int, invertZ: bool) -> List[Point2D]:
    sign = -1.0 if invertZ else 1.0
    return [(p[0], p[1] * sign) for p in sampleTheta(chain, nPoints)]


def stitchRings(
    x1: float,
    ring1: Sequence[Point2D],
    x2: float,
    ring2: Sequence[Point2D],
) -> Mesh:
    '''
    Triangulate between two sampled rings, one side of the centerline only.

    Parameters:
    -----------
    x1, x2 : float
        Longitudinal positions of the rings
    ring1, ring2 : Sequence[Point2D]
        (lateral, vertical) points of each ring

    Returns:
    --------
    Mesh : Facets of the strip, unshifted and unmirrored
    '''
    layout = StripLayout.forCounts(len(ring1), len(ring2))
    n1, n2 = layout.n1, layout.n2
    beg1, beg2 = layout.extraBeg1, layout.extraBeg2

    def a(i: int) -> Point3D:
        return (x1, ring1[i][0], ring1[i][1])

    def b(i: int) -> Point3D:
        return (x2, ring2[i][0], ring2[i][1])

    facets: Mesh = []

    # Begin: surplus of ring 1 converging on the first point of ring 2
    for i in range(layout.extraBeg1):
        facets.append((a(i), b(0), a(i + 1)))

    # Begin: surplus of ring 2 converging on the first point of ring 1
    for i in range(layout.extraBeg2):
        facets.append((b(i), b(i + 1), a(0)))

    # Common region, two triangles per quad
    for i in range(layout.nCommon - 1):
        i1 = i + beg1
        i2 = i + beg2
        facets.append((a(i1), b(i2), a(i1 + 1)))
        facets.append((b(i2), b(i2 + 1), a(i1 + 1)))

    # End: surplus of ring 1 converging on the last point of ring 2
    for i in range(layout.nCommon + beg1 - 1, layout.nCommon + beg1 - 1 + layout.extraEnd1):
        facets.append((a(i), b(n2 - 1), a(i + 1)))

    # End: last point of ring 1 fanning out to the surplus of ring 2
    for i in range(layout.nCommon + beg2 - 1, layout.nCommon + beg2 - 1 + layout.extraEnd2):
        facets.append((a(n1 - 1), b(i), b(i + 1)))

    return facets


def mirrorFacets(facets: Sequence[Facet], lateralShiftMm: float, mirror: bool = True) -> Mesh:
    '''
    Shift facets laterally and interleave their centerline mirror images.

    Each facet is followed by its reflection (y negated, then shifted) with
    the vertex order reversed, which keeps the outward normal after the
    reflection.

    Parameters:
    -----------
    facets : Sequence[Facet]
        Port side facets
    lateralShiftMm : float
        y offset added to every vertex
    mirror : bool
        Whether to append the mirrored copies

    Returns:
    --------
    Mesh : Transformed facets
    '''
    out: Mesh = []
    for f in facets:
        out.append(tuple((p[0], p[1] + lateralShiftMm, p[2]) for p in f))
        if mirror:
            out.append(tuple((p[0], -p[1] + lateralShiftMm, p[2]) for p in reversed(f)))
    return out


def stitchStrip(
    x1: float,
    chain1: BezierChain,
    x2: float,
    chain2: BezierChain,
    options: StitchOptions = StitchOptions(),
) -> Mesh:
    '''
    Triangle strip between cross sections chain1 at x1 and chain2 at x2.

    Parameters:
    -----------
    x1, x2 : float
        Longitudinal positions of the two sections
    chain1, chain2 : BezierChain
        Half-section curves (lateral, vertical)
    options : StitchOptions
        Sampling, mirroring and transform options

    Returns:
    --------
    Mesh : Facets, each followed by its mirror image when mirroring is on
    '''
    if not (isNumber(x1) and isNumber(x2)):
        raise InvalidInputError(f'Strip positions must be numeric, got {x1!r}, {x2!r}')

    ring1 = _ring(chain1, options.samplesPerRing, options.invertZ)
    ring2 = _ring(chain2, options.samplesPerRing, options.invertZ)

    facets = stitchRings(float(x1), ring1, float(x2), ring2)
    return mirrorFacets(facets, options.lateralShiftMm, options.mirror)

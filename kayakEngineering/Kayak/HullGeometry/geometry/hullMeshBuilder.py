# -- Hull Surface Mesh Builder -- #

'''
Builds the complete triangulated hull surface from bow to stern.

The algorithm:
  1. Walk x from 0 to LOA in steps; with 'smart' stepping the step is
     50 mm, refined to 10 mm near bow, stern and both coaming ends
  2. Compute the cross section at every step boundary
  3. Stitch each consecutive pair of sections into a mirrored strip
  4. Optionally close the stern with a transom fan

The result is a facet soup in millimeters, ready for STL output.
'''

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

from kayakEngineering.Kayak.HullGeometry import constants as const
from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError
from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import isNumber
from kayakEngineering.Kayak.HullGeometry.geometry.crossSection import CrossSectionModel
from kayakEngineering.Kayak.HullGeometry.geometry.curveSampler import sampleTheta
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription
from kayakEngineering.Kayak.HullGeometry.geometry.meshStitcher import (
    Facet,
    Mesh,
    StitchOptions,
    mirrorFacets,
    stitchStrip,
)

logger = logging.getLogger(__name__)

Stepping = Union[str, int]


@dataclass(frozen=True)
class BuildOptions:
    '''
    Options for building hull geometry, shared by the mesh and the
    parametric solid output.

    stepping : 'smart' | int
        'smart' = 50 mm with refinement zones, int = uniform step in mm
    transomMm : float
        Stern width; > 0 closes the mesh stern with a transom fan
    wallThicknessMm : float
        Shell thickness of hollow solid slices
    solidBowMm, solidSternMm : float
        Lengths at the ends kept as solid slices
    bulkheadRearMm : Optional[float]
        Rear bulkhead position (None = cockpit aft + 500 mm)
    lateralShiftMm, invertZ, mirror :
        Passed through to every stitched strip
    toleranceMm : float
        Point-at-x tolerance for the longitudinal curves
    showProgress : bool
        Display a tqdm progress bar while building
    '''

    stepping: Stepping = 'smart'
    transomMm: float = 0.0
    wallThicknessMm: float = const.defaultWallThicknessMm
    solidBowMm: float = const.defaultSolidBowMm
    solidSternMm: float = const.defaultSolidSternMm
    bulkheadRearMm: Optional[float] = None
    lateralShiftMm: float = const.defaultLateralShiftMm
    invertZ: bool = True
    mirror: bool = True
    toleranceMm: float = const.defaultToleranceMm
    showProgress: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.stepping, str):
            if self.stepping != 'smart':
                raise InvalidInputError(f'Stepping must be \'smart\' or a positive integer, got {self.stepping!r}')
        elif not isNumber(self.stepping) or int(self.stepping) != self.stepping or self.stepping <= 0:
            raise InvalidInputError(f'Stepping must be \'smart\' or a positive integer, got {self.stepping!r}')
        for name in ('transomMm', 'wallThicknessMm', 'solidBowMm', 'solidSternMm', 'toleranceMm'):
            value = getattr(self, name)
            if not isNumber(value) or value < 0:
                raise InvalidInputError(f'{name} must be a non-negative number, got {value!r}')
        if self.bulkheadRearMm is not None and not isNumber(self.bulkheadRearMm):
            raise InvalidInputError(f'bulkheadRearMm must be numeric, got {self.bulkheadRearMm!r}')

    @property
    def isSmart(self) -> bool:
        return self.stepping == 'smart'

    @property
    def baseStepMm(self) -> int:
        '''Longitudinal step outside refinement zones [mm].'''
        return const.smartStepMm if self.isSmart else int(self.stepping)

    def bulkheadRear(self, hull: HullDescription) -> float:
        '''Rear bulkhead position for this hull [mm].'''
        if self.bulkheadRearMm is not None:
            return self.bulkheadRearMm
        return hull.cockpitXAft + const.bulkheadRearOffsetMm

    def withOverrides(self, **kwargs) -> BuildOptions:
        '''Copy with the given fields replaced.'''
        return replace(self, **kwargs)


class HullMeshBuilder:
    '''
    Generates the hull surface mesh by stitching cross sections from bow
    to stern.

    Examples:
    ---------
    >>> hull = HullDescription.touring()
    >>> mesh = HullMeshBuilder(hull, BuildOptions(stepping=100)).build()
    '''

    def __init__(self, hull: HullDescription, options: BuildOptions = BuildOptions()) -> None:
        '''
        Parameters:
        -----------
        hull : HullDescription
            Hull to mesh
        options : BuildOptions
            Stepping, transom and transform options
        '''
        self._hull = hull
        self._options = options
        self._sections = CrossSectionModel(hull)

    @property
    def options(self) -> BuildOptions:
        return self._options

    ######################################################################
    # -- Stepping -- #
    ######################################################################

    def _isRefined(self, x: float) -> bool:
        hull = self._hull
        foreBefore, foreAfter = const.coamingForeRefineMm
        aftBefore, aftAfter = const.coamingAftRefineMm
        return (
            x < const.bowRefineMm
            or x > hull.loa - const.sternRefineMm
            or (hull.cockpitXFore - foreBefore < x < hull.cockpitXFore + foreAfter)
            or (hull.cockpitXAft - aftBefore < x < hull.cockpitXAft + aftAfter)
        )

    def stations(self) -> Iterator[Tuple[float, float, int]]:
        '''
        Yield consecutive strip boundaries with their ring density.

        Yields:
        -------
        Tuple[float, float, int] : (x1, x2, points per ring)
        '''
        loa = self._hull.loa
        baseStep = self._options.baseStepMm
        basePoints = int(loa / baseStep)

        x1 = 0
        while x1 < loa:
            step = baseStep
            points = basePoints
            if self._options.isSmart and self._isRefined(x1):
                step = const.fineStepMm
                points = const.finePointsPerRing

            x2 = x1 + step if x1 < loa - baseStep else loa
            yield x1, x2, points
            x1 = x2

    ######################################################################
    # -- Mesh Assembly -- #
    ######################################################################

    def _stitchOptions(self, samplesPerRing: int) -> StitchOptions:
        opts = self._options
        return StitchOptions(
            samplesPerRing=samplesPerRing,
            mirror=opts.mirror,
            invertZ=opts.invertZ,
            lateralShiftMm=opts.lateralShiftMm,
        )

    def build(self) -> Mesh:
        '''
        Generate the complete hull surface mesh.

        Returns:
        --------
        Mesh : Facets in millimeters
        '''
        opts = self._options
        strips = list(self.stations())
        iterator = strips
        if opts.showProgress:
            from tqdm import tqdm
            iterator = tqdm(strips, desc='Stitching sections', unit='strip')

        mesh: Mesh = []
        previousX = None
        previousChain = None
        for x1, x2, points in iterator:
            chain1 = previousChain if previousX == x1 else \
                self._sections.crossSectionAt(x1, toleranceMm=opts.toleranceMm)
            chain2 = self._sections.crossSectionAt(x2, toleranceMm=opts.toleranceMm)
            mesh.extend(stitchStrip(x1, chain1, x2, chain2, self._stitchOptions(points)))
            previousX, previousChain = x2, chain2

        if opts.transomMm > 0:
            mesh.extend(self.buildTransom())

        logger.info('Hull mesh: %d strips, %d facets', len(strips), len(mesh))
        return mesh

    def buildTransom(self) -> Mesh:
        '''
        Fan closing the stern: the sampled stern section joined to an apex
        on the centerline at stern height.

        Returns:
        --------
        Mesh : Transom facets (mirrored like the strips)
        '''
        hull = self._hull
        opts = self._options
        sign = -1.0 if opts.invertZ else 1.0
        loa = float(hull.loa)

        chain = self._sections.crossSectionAt(hull.loa, toleranceMm=opts.toleranceMm)
        ring = [(loa, p[0], p[1] * sign) for p in sampleTheta(chain, const.transomRingPoints)]
        apex = (loa, 0.0, float(hull.sternHeight) * sign)

        fan: List[Facet] = []
        for p1, p2 in zip(ring[:-1], ring[1:]):
            fan.append((p1, apex, p2))

        return mirrorFacets(fan, opts.lateralShiftMm, opts.mirror)


def buildHullMesh(hull: HullDescription, options: BuildOptions = BuildOptions()) -> Mesh:
    '''Functional form of HullMeshBuilder(hull, options).build().'''
    return HullMeshBuilder(hull, options).build()


######################################################################
# -- Mesh Utilities -- #
######################################################################

def meshToArray(mesh: Mesh) -> np.ndarray:
    '''
    Facet soup as an array.

    Returns:
    --------
    np.ndarray : Shape (F, 3, 3): facet, vertex, coordinate
    '''
    if not mesh:
        return np.zeros((0, 3, 3), dtype=np.float64)
    return np.asarray(mesh, dtype=np.float64)


def meshCentroid(mesh: Mesh) -> np.ndarray:
    '''Mean of all facet vertices, shape (3,).'''
    arr = meshToArray(mesh)
    if len(arr) == 0:
        raise InvalidInputError('Cannot compute the centroid of an empty mesh')
    return arr.reshape(-1, 3).mean(axis=0)


def meshBounds(mesh: Mesh) -> np.ndarray:
    '''Axis-aligned bounds, shape (2, 3): [min, max].'''
    arr = meshToArray(mesh)
    if len(arr) == 0:
        raise InvalidInputError('Cannot compute the bounds of an empty mesh')
    flat = arr.reshape(-1, 3)
    return np.array([flat.min(axis=0), flat.max(axis=0)])

# -- Kayak Cross-Section Synthesis -- #

'''
Computes the transverse profile of the hull at any longitudinal position.

The profile is a two-segment Bezier chain on one side of the centerline:

    deck center --(deck segment)--> sheer --(hull segment)--> keel

Its anchors come from the longitudinal keel, sheer and deck curves evaluated
at x. Its control points come from the measured station templates at 10, 30,
50, 70 and 90 % of LOA, blended linearly between the two stations that
bracket x. The bow (0 %) and stern (100 %) brackets are synthesized from the
bow and stern heights.

Station offsets are stored in 10000ths of the anchor span: lateral offsets
relative to the sheer half-breadth, vertical offsets relative to the
keel-to-sheer (hull) or sheer-to-deck (deck) height.
'''

from __future__ import annotations

import math
from typing import Tuple

from kayakEngineering.Kayak.HullGeometry import constants as const
from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError, OutOfDomainError
from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import BezierChain, Point2D, isNumber
from kayakEngineering.Kayak.HullGeometry.geometry.curveSampler import pointAtX
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription


class CrossSectionModel:
    '''
    Kayak cross section at any x along the hull.

    For a longitudinal position x (mm from the bow) builds the half-section
    chain from deck centerline over the sheer down to the keel. An optional
    shrink offsets the curve inward to describe the inner wall of a shell.

    Examples:
    ---------
    >>> model = CrossSectionModel(HullDescription.touring())
    >>> chain = model.crossSectionAt(2600)
    >>> inner = model.crossSectionAt(2600, shrinkMm=18)
    '''

    def __init__(self, hull: HullDescription) -> None:
        '''
        Initialize the model from a hull description.

        Parameters:
        -----------
        hull : HullDescription
            Hull curves and station templates
        '''
        self._hull = hull

    @property
    def hull(self) -> HullDescription:
        return self._hull

    ######################################################################
    # -- Station Blending -- #
    ######################################################################

    def bracketAt(self, x: float) -> Tuple[int, int, float]:
        '''
        Find the pair of reference stations around x and the blend weight.

        Brackets are closed at the upper end: a position of exactly 30 %
        falls in (10, 30) with k = 1.

        Parameters:
        -----------
        x : float
            Longitudinal position [mm]

        Returns:
        --------
        Tuple[int, int, float] : (station 1, station 2, k) with k in [0, 1]
            the fraction of the way from station 1 to station 2
        '''
        loa = self._hull.loa
        percent = x / loa * 100.0
        brackets = const.bracketStations

        for lower, upper in zip(brackets[:-2], brackets[1:-1]):
            if percent <= upper:
                k = (x - loa * lower / 100.0) / (loa * (upper - lower) / 100.0)
                return lower, upper, k

        lower, upper = brackets[-2], brackets[-1]
        k = (x - loa * lower / 100.0) / (loa * (upper - lower) / 100.0)
        return lower, upper, k

    def _stationControl(self, position: int, name: str) -> Point2D:
        if position == 0:
            return (0.0, self._hull.bowHeight)
        if position == 100:
            return (0.0, self._hull.sternHeight)
        return self._hull.stations[position].control(name)

    def interpolatedControl(self, name: str, x: float) -> Point2D:
        '''
        Linearly blend one named station offset between the bracketing stations.

        Parameters:
        -----------
        name : str
            'deckCenter', 'deckSheer', 'hullSheer' or 'hullKeel'
        x : float
            Longitudinal position [mm]

        Returns:
        --------
        Point2D : Blended (lateral, vertical) offset in 10000ths
        '''
        ref1, ref2, k = self.bracketAt(x)
        k1 = 1.0 - k
        k2 = k
        p1 = self._stationControl(ref1, name)
        p2 = self._stationControl(ref2, name)
        return (p1[0] * k1 + p2[0] * k2, p1[1] * k1 + p2[1] * k2)

    ######################################################################
    # -- Longitudinal Anchors -- #
    ######################################################################

    def deckAt(self, x: float, toleranceMm: float = const.defaultToleranceMm) -> Tuple[float, float, bool]:
        '''
        Deck centerline height at x and the lateral offset of the deck anchor.

        Between the fore and aft cockpit anchors the deck anchor sits on the
        coaming edge. The coaming is inclined by the coaming angle, so x along
        the deck is stretched by 1 / cos(angle) to map onto the coaming's own
        length before reading its half-width.

        Parameters:
        -----------
        x : float
            Longitudinal position [mm]
        toleranceMm : float
            Point-at-x tolerance

        Returns:
        --------
        Tuple[float, float, bool] : (lateral offset, deck z, inside coaming area)
        '''
        hull = self._hull

        if x <= hull.deckFore.x2:
            return 0.0, pointAtX(hull.deckFore, x, toleranceMm), False

        if x <= hull.deckMid.x2:
            deckZ = pointAtX(hull.deckMid, x, toleranceMm)
            kCoaming = 1.0 / math.cos(math.radians(hull.coamingAngle))
            xOfCoaming = (x - hull.deckMid.x1) * kCoaming
            if xOfCoaming <= hull.coaming.x2:
                deckY = pointAtX(hull.coaming, xOfCoaming, const.defaultToleranceMm)
            else:
                deckY = 0.0
            return deckY, deckZ, True

        return 0.0, pointAtX(hull.deckAft, x, toleranceMm), False

    ######################################################################
    # -- Section Assembly -- #
    ######################################################################

    def _checkPosition(self, x) -> float:
        if not isNumber(x):
            raise InvalidInputError(f'Section position must be a number, got {x!r}')
        if x < 0 or x > self._hull.loa:
            raise OutOfDomainError(
                f'Section position x={x:g} is out of range [0, {self._hull.loa:g}]'
            )
        if float(x) != int(x):
            raise OutOfDomainError(f'Section position x={x:g} must be a whole millimeter')
        return float(x)

    def crossSectionAt(
        self,
        x: float,
        shrinkMm: float = 0.0,
        toleranceMm: float = const.defaultToleranceMm,
    ) -> BezierChain:
        '''
        Half-section chain at longitudinal position x.

        Points, in order:
          0. deck anchor (coaming edge or centerline)
          1. deck-center control
          2. deck-sheer control
          3. sheer anchor (shared by both segments)
          4. hull-sheer control
          5. hull-keel control
          6. keel anchor on the centerline

        With shrinkMm > 0 the deck points move down and the hull points move
        up by shrinkMm, and every lateral coordinate except the deck anchor's
        moves inboard by shrinkMm without crossing the centerline.

        Parameters:
        -----------
        x : float
            Longitudinal position, whole mm in [0, LOA]
        shrinkMm : float
            Inward wall offset (0 = outer skin)
        toleranceMm : float
            Point-at-x tolerance for the longitudinal curves

        Returns:
        --------
        BezierChain : 7-point, two-segment chain

        Raises:
        -------
        OutOfDomainError : x outside [0, LOA] or not a whole millimeter
        InvalidInputError : non-numeric x or negative shrink
        '''
        x = self._checkPosition(x)
        if not isNumber(shrinkMm) or shrinkMm < 0:
            raise InvalidInputError(f'Shrink must be a non-negative number, got {shrinkMm!r}')
        shrink = float(shrinkMm)
        hull = self._hull

        keelZ = pointAtX(hull.keel, x, toleranceMm)
        deckY, deckZ, isCoamingArea = self.deckAt(x, toleranceMm)
        sheerY = pointAtX(hull.sheerHorizontal, x, toleranceMm)
        sheerZ = pointAtX(hull.sheerVertical, x, toleranceMm)

        # Offsets are in 10000ths of the anchor spans
        kHullY = sheerY / const.stationScale
        kHullZ = (sheerZ - keelZ) / const.stationScale
        kDeckY = kHullY
        kDeckZ = (deckZ - sheerZ) / const.stationScale

        deckCenter = self.interpolatedControl('deckCenter', x)
        deckSheer = self.interpolatedControl('deckSheer', x)
        hullSheer = self.interpolatedControl('hullSheer', x)
        hullKeel = self.interpolatedControl('hullKeel', x)

        def inboard(y: float) -> float:
            if shrink == 0.0:
                return y
            return max(y - shrink, 0.0)

        if isCoamingArea:
            # Coincides with the coaming edge
            deckControl = (deckY, deckZ)
        else:
            centerY = deckCenter[0] * kDeckY
            deckControl = (
                centerY - shrink if centerY > shrink else 0.0,
                deckZ + deckCenter[1] * kDeckZ + shrink,
            )

        return BezierChain([
            # deck segment
            (deckY, deckZ + shrink),
            deckControl,
            (inboard(sheerY + deckSheer[0] * kDeckY), sheerZ + deckSheer[1] * kDeckZ + shrink),
            # shared sheer anchor
            (inboard(sheerY), sheerZ),
            # hull segment
            (inboard(sheerY + hullSheer[0] * kHullY), sheerZ + hullSheer[1] * kHullZ - shrink),
            (inboard(hullKeel[0] * kHullY), keelZ + hullKeel[1] * kHullZ - shrink),
            (0.0, keelZ - shrink),
        ])

    def referenceSection(self, position: int, toleranceMm: float = const.defaultToleranceMm) -> BezierChain:
        '''
        Measured station curve at exactly position % of LOA, without blending.

        Parameters:
        -----------
        position : int
            Station position: 10, 30, 50, 70 or 90

        Returns:
        --------
        BezierChain : 7-point, two-segment station chain
        '''
        if position not in const.measuredStations:
            raise InvalidInputError(
                f'Invalid station position {position!r} '
                f'(must be one of {list(const.measuredStations)})'
            )
        hull = self._hull
        station = hull.stations[position]
        x = float(int(position / 100.0 * hull.loa))

        keelZ = pointAtX(hull.keel, x, toleranceMm)
        deck = hull.deckFore
        if x > deck.x2:
            deck = hull.deckMid
        if x > deck.x2:
            deck = hull.deckAft
        deckZ = pointAtX(deck, x, toleranceMm)
        sheerY = pointAtX(hull.sheerHorizontal, x, toleranceMm)
        sheerZ = pointAtX(hull.sheerVertical, x, toleranceMm)

        kHullY = sheerY / const.stationScale
        kHullZ = (sheerZ - keelZ) / const.stationScale
        kDeckY = kHullY
        kDeckZ = (deckZ - sheerZ) / const.stationScale

        return BezierChain([
            (0.0, deckZ),
            (station.deckCenter[0] * kDeckY, deckZ + station.deckCenter[1] * kDeckZ),
            (sheerY + station.deckSheer[0] * kDeckY, sheerZ + station.deckSheer[1] * kDeckZ),
            (sheerY, sheerZ),
            (sheerY + station.hullSheer[0] * kHullY, sheerZ + station.hullSheer[1] * kHullZ),
            (station.hullKeel[0] * kHullY, keelZ + station.hullKeel[1] * kHullZ),
            (0.0, keelZ),
        ])


def crossSectionAt(
    hull: HullDescription,
    x: float,
    shrinkMm: float = 0.0,
    toleranceMm: float = const.defaultToleranceMm,
) -> BezierChain:
    '''Functional form of CrossSectionModel(hull).crossSectionAt(x, ...).'''
    return CrossSectionModel(hull).crossSectionAt(x, shrinkMm=shrinkMm, toleranceMm=toleranceMm)

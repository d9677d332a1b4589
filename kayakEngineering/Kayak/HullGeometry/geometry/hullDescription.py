# -- Hull Description -- #

'''
Immutable value objects describing a kayak hull.

The description is produced by the design file parser (or a preset) and
only read by the geometry code. It carries the five measured station
templates explicitly, so every computation gets them from its input.

Coordinate conventions (as in the design file):
  - x: longitudinal, 0 at the bow, LOA at the stern
  - y: lateral half-breadth (>= 0, starboard side mirrored at mesh time)
  - z: vertical, increasing downward (deck < sheer < keel)

All dimensions in millimeters.
'''

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Dict, Mapping

from kayakEngineering.Kayak.HullGeometry import constants as const
from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError
from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import BezierChain, Point2D, isNumber


def coamingAngleFromAnchors(xFore: float, zFore: float, xAft: float, zAft: float) -> float:
    '''
    Inclination of the cockpit coaming in degrees.

    The coaming runs from the fore to the aft cockpit anchor. With c the
    longitudinal distance and b the height difference, the horizontal leg is
    a = int(sqrt(c^2 - b^2)) and the angle is acos(a / c).

    Parameters:
    -----------
    xFore, zFore : float
        Fore cockpit anchor
    xAft, zAft : float
        Aft cockpit anchor

    Returns:
    --------
    float : Coaming angle [degrees]
    '''
    c = xAft - xFore
    b = zFore - zAft
    if c <= 0 or abs(b) > c:
        raise InvalidInputError(
            f'Cockpit anchors ({xFore:g}, {zFore:g}) -> ({xAft:g}, {zAft:g}) '
            f'do not define a coaming'
        )
    a = int(math.sqrt(c * c - b * b))
    return math.degrees(math.acos(a / c))


@dataclass(frozen=True)
class StationControls:
    '''
    Control offsets of one measured cross-section station.

    Each offset is (lateral, vertical) in 10000ths of the distance between
    the anchors of the segment it belongs to.
    '''

    deckCenter: Point2D = (0.0, 0.0)
    deckSheer: Point2D = (0.0, 0.0)
    hullSheer: Point2D = (0.0, 0.0)
    hullKeel: Point2D = (0.0, 0.0)

    def __post_init__(self) -> None:
        for name in const.stationControlNames:
            value = getattr(self, name)
            try:
                x, y = value
            except (TypeError, ValueError):
                raise InvalidInputError(f'Station control {name} is not an (x, y) pair: {value!r}')
            if not (isNumber(x) and isNumber(y)):
                raise InvalidInputError(f'Station control {name} is not numeric: {value!r}')
            object.__setattr__(self, name, (float(x), float(y)))

    def control(self, name: str) -> Point2D:
        '''Offset by name ('deckCenter', 'deckSheer', 'hullSheer', 'hullKeel').'''
        if name not in const.stationControlNames:
            raise InvalidInputError(f'Unknown station control \'{name}\'')
        return getattr(self, name)

    @classmethod
    def flat(cls) -> StationControls:
        '''All offsets zero: straight deck and hull segments.'''
        return cls()


@dataclass(frozen=True)
class HullDescription:
    '''
    Parametric kayak hull: main dimensions, cockpit, station templates and
    the longitudinal curves.

    Longitudinal chains run in x from bow to stern; their y is the lateral
    offset (sheerHorizontal) or the height (all others). The coaming chain is
    the half outline of the cockpit opening over its own length.
    '''

    #--------------------------------------------------------------------#
    # -- Main Dimensions -- #
    #--------------------------------------------------------------------#
    loa: float
    bowHeight: float
    sternHeight: float

    # Datum waterline offset
    dwl: float

    #--------------------------------------------------------------------#
    # -- Cockpit -- #
    #--------------------------------------------------------------------#
    cockpitXFore: float
    cockpitZFore: float
    cockpitXAft: float
    cockpitZAft: float
    coamingAngle: float

    #--------------------------------------------------------------------#
    # -- Station Templates (10/30/50/70/90 % of LOA) -- #
    #--------------------------------------------------------------------#
    stations: Mapping[int, StationControls]

    #--------------------------------------------------------------------#
    # -- Longitudinal Curves -- #
    #--------------------------------------------------------------------#
    keel: BezierChain
    sheerHorizontal: BezierChain
    sheerVertical: BezierChain
    deckFore: BezierChain
    deckMid: BezierChain
    deckAft: BezierChain
    coaming: BezierChain = field(
        default_factory=lambda: BezierChain(const.coamingTemplate)
    )

    def __post_init__(self) -> None:
        for name in ('loa', 'bowHeight', 'sternHeight', 'dwl', 'cockpitXFore',
                     'cockpitZFore', 'cockpitXAft', 'cockpitZAft', 'coamingAngle'):
            if not isNumber(getattr(self, name)):
                raise InvalidInputError(f'Hull attribute {name} must be numeric')
        if self.loa <= 0:
            raise InvalidInputError(f'LOA must be positive, got {self.loa:g}')
        if float(self.loa) != int(self.loa):
            raise InvalidInputError(f'LOA must be a whole millimeter, got {self.loa:g}')

        if set(self.stations) != set(const.measuredStations):
            raise InvalidInputError(
                f'Expected stations {list(const.measuredStations)}, '
                f'got {sorted(self.stations)}'
            )
        for position, controls in self.stations.items():
            if not isinstance(controls, StationControls):
                raise InvalidInputError(f'Station {position} is not a StationControls')

        for name in ('keel', 'sheerHorizontal', 'sheerVertical', 'deckFore',
                     'deckMid', 'deckAft', 'coaming'):
            if not isinstance(getattr(self, name), BezierChain):
                raise InvalidInputError(f'Hull curve {name} must be a BezierChain')

        # Read-only copy of the station table
        object.__setattr__(self, 'stations', dict(sorted(self.stations.items())))

    #--------------------------------------------------------------------#
    # -- Computed Properties -- #
    #--------------------------------------------------------------------#
    @property
    def cockpitLength(self) -> float:
        '''Distance between the fore and aft coaming anchors [mm].'''
        return self.cockpitXAft - self.cockpitXFore

    @property
    def centerOfGravityX(self) -> float:
        '''Paddler center of gravity estimate [mm from bow].'''
        return self.cockpitXAft - const.cogOffsetMm

    @property
    def maxHalfBreadth(self) -> float:
        '''Largest lateral control coordinate of the sheer plan curve [mm].'''
        return max(p[1] for p in self.sheerHorizontal.controlPoints)

    #--------------------------------------------------------------------#
    # -- Factory Presets -- #
    #--------------------------------------------------------------------#
    @classmethod
    def flatTestHull(cls, loa: float = 4000.0) -> HullDescription:
        '''
        Symmetric hull with zero bow/stern heights and flat stations.

        Cross sections are straight deck and hull segments; useful as a
        baseline where every result can be checked by hand.
        '''
        return cls.touring(loa=loa, stations={p: StationControls.flat() for p in const.measuredStations},
                           bowHeight=0.0, sternHeight=0.0)

    @classmethod
    def touring(
        cls,
        loa: float = 5200.0,
        beam: float = 540.0,
        depth: float = 300.0,
        stations: Dict[int, StationControls] = None,
        bowHeight: float = 0.0,
        sternHeight: float = 0.0,
        transomMm: float = 0.0,
    ) -> HullDescription:
        '''
        Simple touring kayak preset built from a handful of dimensions.

        Parameters:
        -----------
        loa : float
            Length overall [mm]
        beam : float
            Maximum beam at the sheer [mm]
        depth : float
            Keel depth below the sheer at midships [mm]
        stations : Dict[int, StationControls]
            Station templates (default: rounded sections)
        bowHeight, sternHeight : float
            End heights used for the synthesized 0 % / 100 % stations
        transomMm : float
            Stern width; the sheer plan curve ends at half of it

        Returns:
        --------
        HullDescription : Preset hull
        '''
        half = beam / 2.0
        deckCrown = depth * 0.35
        cockpitXFore = round(loa * 0.42)
        cockpitXAft = cockpitXFore + 820
        cockpitZFore = -deckCrown * 0.9
        cockpitZAft = -deckCrown * 0.6

        if stations is None:
            stations = {
                10: StationControls((4000, 0), (0, 4000), (0, -3000), (3000, 0)),
                30: StationControls((5000, 0), (0, 5000), (0, -5000), (5000, 0)),
                50: StationControls((5500, 0), (0, 5500), (0, -5500), (6000, 0)),
                70: StationControls((5000, 0), (0, 5000), (0, -5000), (5000, 0)),
                90: StationControls((4000, 0), (0, 4000), (0, -3000), (3000, 0)),
            }

        return cls(
            loa=loa,
            bowHeight=bowHeight,
            sternHeight=sternHeight,
            dwl=depth * 0.6,
            cockpitXFore=cockpitXFore,
            cockpitZFore=cockpitZFore,
            cockpitXAft=cockpitXAft,
            cockpitZAft=cockpitZAft,
            coamingAngle=coamingAngleFromAnchors(cockpitXFore, cockpitZFore, cockpitXAft, cockpitZAft),
            stations=stations,
            keel=BezierChain([(0, 0), (loa * 0.15, depth), (loa * 0.85, depth), (loa, 0)]),
            sheerHorizontal=BezierChain([(0, 0), (loa * 0.2, half), (loa * 0.8, half),
                                         (loa, transomMm / 2.0)]),
            sheerVertical=BezierChain([(0, 0), (loa * 0.3, 0), (loa * 0.7, 0), (loa, 0)]),
            deckFore=BezierChain([(0, 0), (cockpitXFore * 0.3, -deckCrown),
                                  (cockpitXFore * 0.7, -deckCrown), (cockpitXFore, cockpitZFore)]),
            deckMid=BezierChain([(cockpitXFore, cockpitZFore), (cockpitXFore, cockpitZFore),
                                 (cockpitXAft, cockpitZAft), (cockpitXAft, cockpitZAft)]),
            deckAft=BezierChain([(cockpitXAft, cockpitZAft),
                                 (cockpitXAft + (loa - cockpitXAft) * 0.3, -deckCrown * 0.6),
                                 (cockpitXAft + (loa - cockpitXAft) * 0.7, -deckCrown * 0.3),
                                 (loa, 0)]),
        )

    #--------------------------------------------------------------------#
    # -- JSON I/O -- #
    #--------------------------------------------------------------------#
    def toDict(self) -> dict:
        '''Plain dictionary form, suitable for JSON.'''
        return {
            'dimensions': {
                'loaMm': self.loa,
                'bowHeightMm': self.bowHeight,
                'sternHeightMm': self.sternHeight,
                'dwlMm': self.dwl,
            },
            'cockpit': {
                'xForeMm': self.cockpitXFore,
                'zForeMm': self.cockpitZFore,
                'xAftMm': self.cockpitXAft,
                'zAftMm': self.cockpitZAft,
                'coamingAngleDeg': self.coamingAngle,
            },
            'stations': {
                str(position): {name: list(controls.control(name)) for name in const.stationControlNames}
                for position, controls in self.stations.items()
            },
            'curves': {
                name: [list(p) for p in getattr(self, name).controlPoints]
                for name in ('keel', 'sheerHorizontal', 'sheerVertical',
                             'deckFore', 'deckMid', 'deckAft', 'coaming')
            },
        }

    @classmethod
    def fromDict(cls, data: dict) -> HullDescription:
        '''Inverse of toDict.'''
        try:
            dims = data['dimensions']
            cockpit = data['cockpit']
            curves = data['curves']
            stations = {
                int(position): StationControls(**{name: tuple(values[name])
                                                  for name in const.stationControlNames})
                for position, values in data['stations'].items()
            }
            return cls(
                loa=dims['loaMm'],
                bowHeight=dims['bowHeightMm'],
                sternHeight=dims['sternHeightMm'],
                dwl=dims['dwlMm'],
                cockpitXFore=cockpit['xForeMm'],
                cockpitZFore=cockpit['zForeMm'],
                cockpitXAft=cockpit['xAftMm'],
                cockpitZAft=cockpit['zAftMm'],
                coamingAngle=cockpit['coamingAngleDeg'],
                stations=stations,
                **{name: BezierChain(points) for name, points in curves.items()},
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise InvalidInputError(f'Incomplete hull description: {e}') from e

    def toJson(self, filePath: str) -> None:
        '''
        Export the description to a JSON file.

        Parameters:
        -----------
        filePath : str
            Output file path
        '''
        with open(filePath, 'w') as f:
            json.dump(self.toDict(), f, indent=4)

    @classmethod
    def fromJson(cls, filePath: str) -> HullDescription:
        '''
        Load a description from a JSON file written by toJson.

        Parameters:
        -----------
        filePath : str
            Path to the JSON file

        Returns:
        --------
        HullDescription : Loaded description
        '''
        with open(filePath, 'r') as f:
            data = json.load(f)
        return cls.fromDict(data)

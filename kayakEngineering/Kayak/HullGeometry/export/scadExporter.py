# -- OpenSCAD Export -- #

'''
Writes the hull as an OpenSCAD script for foam core cutting.

The script holds one union, lifted by the datum waterline and mirrored in z
(design z points down, OpenSCAD z points up), containing:
  - helper polylines: coaming outline, sheer, deck, keel and the measured
    stations (drawn with dotSCAD's polyline3d)
  - extruded cross-section slices every stepping mm from bow to stern:

        solid     (orange)  within solidBow / solidStern of the ends
        bulkhead  (red)     at the cockpit front, cockpit aft and rear bulkhead
        hollow    (yellow)  outer skin with an inner wall wallThickness inside
        cockpit   (blue)    thin 5 mm shell inside the cockpit opening

Values are assembled as a small tree (ScadNumber / ScadVector) and turned
into text by ScadFormatter.
'''

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from kayakEngineering.Kayak.HullGeometry import constants as const
from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError
from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import Point2D, isNumber
from kayakEngineering.Kayak.HullGeometry.geometry.crossSection import CrossSectionModel
from kayakEngineering.Kayak.HullGeometry.geometry.curveProjection import (
    mapCurveX0Z,
    mapCurveXY0,
    mirrorCurveY,
    spliceCurvesXYXZ,
)
from kayakEngineering.Kayak.HullGeometry.geometry.curveSampler import sampleInterval, sampleTheta
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import BuildOptions

logger = logging.getLogger(__name__)


######################################################################
# -- Value Tree -- #
######################################################################

@dataclass(frozen=True)
class ScadNumber:
    value: float


@dataclass(frozen=True)
class ScadVector:
    items: Tuple[Union[ScadNumber, ScadVector], ...]


ScadValue = Union[ScadNumber, ScadVector]


def toScadValue(data) -> ScadValue:
    '''
    Convert numbers and nested sequences of numbers into a value tree.

    Raises:
    -------
    InvalidInputError : a leaf that is not a finite number
    '''
    if isinstance(data, (ScadNumber, ScadVector)):
        return data
    if isNumber(data):
        return ScadNumber(float(data))
    if isinstance(data, (list, tuple, range)):
        return ScadVector(tuple(toScadValue(item) for item in data))
    raise InvalidInputError(f'Cannot express {data!r} as an OpenSCAD value')


def formatNumber(value: float) -> str:
    '''Shortest exact-looking form: integers without a decimal point.'''
    if float(value).is_integer():
        return str(int(value))
    return format(value, '.15g')


class ScadFormatter:
    '''
    Renders a value tree as OpenSCAD source text.

    Dispatches on the node class name to visit<ClassName>.
    '''

    def visit(self, node: ScadValue) -> str:
        method = getattr(self, f'visit{type(node).__name__}', None)
        if method is None:
            raise TypeError(f'No formatter for {type(node).__name__}')
        return method(node)

    def visitScadNumber(self, node: ScadNumber) -> str:
        return formatNumber(node.value)

    def visitScadVector(self, node: ScadVector) -> str:
        return '[' + ','.join(self.visit(item) for item in node.items) + ']'


def toScad(data) -> str:
    '''Numbers and nested sequences as OpenSCAD text.'''
    return ScadFormatter().visit(toScadValue(data))


######################################################################
# -- Script Builder -- #
######################################################################

class ScadExporter:
    '''
    Builds the OpenSCAD script of a hull.

    Examples:
    ---------
    >>> exporter = ScadExporter(hull, BuildOptions(stepping=50))
    >>> exporter.export('output/kayak.scad')
    '''

    def __init__(self, hull: HullDescription, options: BuildOptions = BuildOptions()) -> None:
        '''
        Parameters:
        -----------
        hull : HullDescription
            Hull to export
        options : BuildOptions
            Stepping, wall thickness, solid ends, bulkhead and transom
        '''
        self._hull = hull
        self._options = options
        self._sections = CrossSectionModel(hull)
        self._step = options.baseStepMm
        self._bulkheadRear = options.bulkheadRear(hull)

    @property
    def stepMm(self) -> int:
        return self._step

    #--------------------------------------------------------------------#
    # -- Slices -- #
    #--------------------------------------------------------------------#

    def bulkheadPositions(self) -> Tuple[float, float, float]:
        '''
        Stepping-aligned bulkhead positions: cockpit front, cockpit aft, rear.
        '''
        step = self._step
        aft = self._hull.cockpitXAft
        rear = self._bulkheadRear
        return (
            aft - const.cockpitLengthMm - aft % step,
            aft - aft % step,
            rear - rear % step,
        )

    def slicePositions(self) -> List[float]:
        '''x of every slice, including the transom slice when the stern is open.'''
        loa = self._hull.loa
        positions = [float(i * self._step) for i in range(1, int(loa / self._step) + 1)]
        if self._options.transomMm > 0:
            positions.append(float(loa))
        return positions

    def sliceKind(self, x: float) -> str:
        '''
        Classify a slice position.

        Returns:
        --------
        str : 'solid', 'bulkhead', 'hollow' or 'cockpit'
        '''
        hull = self._hull
        opts = self._options
        if x <= opts.solidBowMm or x >= hull.loa - opts.solidSternMm:
            return 'solid'
        if x in self.bulkheadPositions():
            return 'bulkhead'
        if not (hull.cockpitXAft - const.cockpitLengthMm <= x <= hull.cockpitXAft):
            return 'hollow'
        return 'cockpit'

    def slicePoints(self, x: float, shrinkMm: float = 0.0) -> List[Point2D]:
        '''
        Closed outline of a full section: the half section followed by its
        mirror image in reverse order.
        '''
        half = sampleTheta(self._sections.crossSectionAt(x, shrinkMm=shrinkMm),
                           const.slicePointsPerSection)
        return half + [(-p[0], p[1]) for p in reversed(half)]

    def _extrudedSlice(
        self,
        x: float,
        color: str,
        height: float,
        outlines: Sequence[List[Point2D]],
    ) -> str:
        points: List[Point2D] = []
        paths = []
        for outline in outlines:
            paths.append(list(range(len(points), len(points) + len(outline))))
            points.extend(outline)
        convexity = 10 if len(outlines) == 1 else 20
        return ' '.join([
            f'translate([{formatNumber(x - self._step)},0,0])',
            'rotate([90,0,90])',
            f'color({color})',
            f'linear_extrude(height={formatNumber(height)},convexity=10)',
            f'polygon(points={toScad(points)}, paths={toScad(paths)}, convexity={convexity})',
            ';\n',
        ])

    def renderSlice(self, x: float) -> str:
        '''OpenSCAD statement for the slice ending at x.'''
        kind = self.sliceKind(x)
        step = self._step

        if kind == 'solid':
            return self._extrudedSlice(x, '"orange",1', step, [self.slicePoints(x)])
        if kind == 'bulkhead':
            return self._extrudedSlice(x, '"red",0.6', step, [self.slicePoints(x)])
        if kind == 'hollow':
            return self._extrudedSlice(x, '"yellow",0.7', step, [
                self.slicePoints(x),
                self.slicePoints(x, self._options.wallThicknessMm),
            ])
        return self._extrudedSlice(x, '"blue",0.6', const.cockpitExtrudeMm, [
            self.slicePoints(x),
            self.slicePoints(x, const.cockpitShellMm),
        ])

    #--------------------------------------------------------------------#
    # -- Helper Lines -- #
    #--------------------------------------------------------------------#

    def _polyline(self, points) -> str:
        return f'  polyline3d({toScad(points)}, {formatNumber(const.helperLineThicknessMm)});'

    def _coamingLines(self) -> List[str]:
        hull = self._hull
        right = mapCurveXY0(sampleTheta(hull.coaming, const.coamingOutlinePoints))
        left = mirrorCurveY(right)
        return [
            f'color("Black") translate([{formatNumber(hull.cockpitXFore)},0,{formatNumber(hull.cockpitZFore)}]) '
            f'rotate([0,{formatNumber(-hull.coamingAngle)},0]) union() {{',
            self._polyline(right),
            self._polyline(left),
            '}',
        ]

    def sheerLine(self) -> List[Tuple[float, float, float]]:
        '''
        Sheer as a 3D polyline (plan and profile spliced), closed to the
        centerline at an open stern.
        '''
        hull = self._hull
        sheer = spliceCurvesXYXZ(
            sampleInterval(hull.sheerHorizontal, const.sheerIntervalMm),
            sampleInterval(hull.sheerVertical, const.sheerIntervalMm),
        )
        last = sheer[-1]
        if last[1] > 0:
            sheer.append((last[0], 0.0, last[2]))
        return sheer

    def _sheerLines(self) -> List[str]:
        right = self.sheerLine()
        return [
            'color("lightBlue") union() {',
            self._polyline(right),
            self._polyline(mirrorCurveY(right)),
            '}',
        ]

    def _deckAndKeelLines(self) -> List[str]:
        hull = self._hull
        nPoints = int(hull.loa / self._step)
        lines = ['color("Red") union() {']
        for chain in (hull.deckFore, hull.deckAft, hull.keel):
            lines.append(self._polyline(mapCurveX0Z(sampleTheta(chain, nPoints))))
        lines.append('}')
        return lines

    def _stationLines(self) -> List[str]:
        hull = self._hull
        nPoints = int(hull.loa / self._step)
        lines = []
        for position in const.measuredStations:
            x = hull.loa * position / 100.0
            right = [(x, p[0], p[1]) for p in sampleTheta(self._sections.referenceSection(position), nPoints)]
            lines.extend([
                'color("lightGreen") union() {',
                self._polyline(right),
                self._polyline(mirrorCurveY(right)),
                '}',
            ])
        return lines

    #--------------------------------------------------------------------#
    # -- Output -- #
    #--------------------------------------------------------------------#

    def render(self) -> str:
        '''
        Complete OpenSCAD script.

        Returns:
        --------
        str : Script text
        '''
        lines = [
            'use <dotSCAD/src/polyline3d.scad>',
            '',
            '',
            f'translate([0,0,{formatNumber(self._hull.dwl)}]) mirror([0,0,1]) union() {{',
        ]
        lines += self._coamingLines()
        lines += self._sheerLines()
        lines += self._deckAndKeelLines()
        lines += self._stationLines()

        lines.append('union() {')
        for x in self.slicePositions():
            lines.append(self.renderSlice(x))
        lines.append('}')

        lines.append('};')
        return '\n'.join(lines) + '\n'

    def export(self, outputPath: Union[str, Path]) -> str:
        '''
        Write the script to a file.

        Parameters:
        -----------
        outputPath : str | Path
            Output file path (must end in .scad)

        Returns:
        --------
        str : Path to the written file
        '''
        outputPath = Path(outputPath)
        if outputPath.suffix.lower() != '.scad':
            raise InvalidInputError(f'No valid output path with .scad suffix provided: \'{outputPath}\'')
        outputPath.write_text(self.render())
        logger.info('Written SCAD to \'%s\' (%d slices)', outputPath, len(self.slicePositions()))
        return str(outputPath)

# -- OpenSCAD Export Tests -- #

'''
Value formatting, slice layout and script structure of the OpenSCAD output.
'''

import pytest

from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError
from kayakEngineering.Kayak.HullGeometry.export.scadExporter import (
    ScadExporter,
    ScadFormatter,
    ScadNumber,
    ScadVector,
    formatNumber,
    toScad,
    toScadValue,
)
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import BuildOptions

OPTIONS = BuildOptions(stepping=500)


@pytest.fixture
def exporter(flatHull):
    return ScadExporter(flatHull, OPTIONS)


######################################################################
# -- Values -- #
######################################################################

def testFormatNumber():
    assert formatNumber(3.0) == '3'
    assert formatNumber(-0.0) == '0'
    assert formatNumber(2.5) == '2.5'
    assert formatNumber(0.1) == '0.1'


def testNestedVectors():
    assert toScad([[1, 2.5], [3, -0.0]]) == '[[1,2.5],[3,0]]'
    assert toScad([]) == '[]'
    assert toScad(range(3)) == '[0,1,2]'


def testValueTree():
    assert toScadValue((1, (2,))) == ScadVector((ScadNumber(1.0), ScadVector((ScadNumber(2.0),))))


def testRejectsNonNumericLeaves():
    with pytest.raises(InvalidInputError):
        toScad([1, 'two'])
    with pytest.raises(InvalidInputError):
        toScad([float('nan')])


def testFormatterRejectsUnknownNodes():
    with pytest.raises(TypeError):
        ScadFormatter().visit(object())


######################################################################
# -- Slices -- #
######################################################################

def testSlicePositions(exporter):
    assert exporter.stepMm == 500
    assert exporter.slicePositions() == [500.0, 1000.0, 1500.0, 2000.0, 2500.0, 3000.0, 3500.0, 4000.0]


def testTransomAddsSternSlice(flatHull):
    positions = ScadExporter(flatHull, OPTIONS.withOverrides(transomMm=100)).slicePositions()
    assert len(positions) == 9
    assert positions[-1] == 4000.0


def testBulkheadsAlignToStepping(exporter):
    # Cockpit aft anchor 2500, rear bulkhead 500 behind it
    assert exporter.bulkheadPositions() == (1050, 2500, 3000)


def testSliceKinds(exporter):
    kinds = {x: exporter.sliceKind(x) for x in exporter.slicePositions()}
    assert kinds == {
        500.0: 'hollow',
        1000.0: 'hollow',
        1500.0: 'cockpit',
        2000.0: 'cockpit',
        2500.0: 'bulkhead',
        3000.0: 'bulkhead',
        3500.0: 'hollow',
        4000.0: 'solid',
    }


def testConfiguredRearBulkhead(flatHull):
    exporter = ScadExporter(flatHull, OPTIONS.withOverrides(bulkheadRearMm=3600))
    assert exporter.bulkheadPositions()[2] == 3500
    assert exporter.sliceKind(3000.0) == 'hollow'
    assert exporter.sliceKind(3500.0) == 'bulkhead'


def testSlicePointsAreSymmetric(exporter):
    points = exporter.slicePoints(2000.0)
    assert len(points) % 2 == 0
    for p, q in zip(points, reversed(points)):
        assert p == (-q[0], q[1])


def testRenderSolidSlice(exporter):
    text = exporter.renderSlice(4000.0)
    assert text.startswith('translate([3500,0,0]) rotate([90,0,90]) color("orange",1) '
                           'linear_extrude(height=500,convexity=10) polygon(points=[')
    assert 'paths=[[0,' in text
    assert text.endswith('convexity=10) ;\n')


def testRenderHollowSliceHasTwoPaths(exporter):
    text = exporter.renderSlice(500.0)
    assert 'color("yellow",0.7)' in text
    assert '],[' in text.split('paths=')[1]
    assert text.endswith('convexity=20) ;\n')


def testRenderCockpitSlice(exporter):
    text = exporter.renderSlice(1500.0)
    assert 'color("blue",0.6)' in text
    assert 'linear_extrude(height=45,convexity=10)' in text


def testRenderBulkheadSlice(exporter):
    assert 'color("red",0.6)' in exporter.renderSlice(2500.0)


######################################################################
# -- Script -- #
######################################################################

def testSheerLineClosedAtOpenStern():
    flat = HullDescription.flatTestHull(loa=4000)
    assert ScadExporter(flat, OPTIONS).sheerLine()[-1] == (4000.0, 0.0, 0.0)

    hull = HullDescription.touring(loa=4000, transomMm=200)
    sheer = ScadExporter(hull, OPTIONS).sheerLine()
    assert sheer[-2] == (4000.0, 100.0, 0.0)
    assert sheer[-1] == (4000.0, 0.0, 0.0)


def testRenderStructure(exporter):
    script = exporter.render()
    lines = script.splitlines()
    assert lines[:4] == [
        'use <dotSCAD/src/polyline3d.scad>',
        '',
        '',
        'translate([0,0,180]) mirror([0,0,1]) union() {',
    ]
    assert script.endswith('};\n')
    assert script.count('linear_extrude') == 8
    assert script.count('color("lightGreen")') == 5
    assert script.count('color("Black")') == 1
    assert 'rotate([0,-' in script


def testExport(exporter, tmp_path):
    path = exporter.export(tmp_path / 'hull.scad')
    assert open(path).read() == exporter.render()
    with pytest.raises(InvalidInputError):
        exporter.export(tmp_path / 'hull.stl')

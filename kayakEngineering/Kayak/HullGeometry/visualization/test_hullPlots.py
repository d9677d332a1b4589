# -- Hull Plot Tests -- #

'''
Smoke tests for the plotly figures.
'''

import plotly.graph_objects as go
import pytest

from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import BuildOptions, buildHullMesh
from kayakEngineering.Kayak.HullGeometry.visualization import theme
from kayakEngineering.Kayak.HullGeometry.visualization.hullPlots import (
    plotCrossSections,
    plotMesh,
    plotProfiles,
)


def testPlotMesh(flatHull):
    mesh = buildHullMesh(flatHull, BuildOptions(stepping=1000))
    fig = plotMesh(mesh)
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    assert len(fig.data[0].i) == len(mesh)
    assert '32 facets' in fig.layout.title.text


def testPlotMeshRejectsEmpty():
    with pytest.raises(InvalidInputError):
        plotMesh([])


def testPlotProfiles(touringHull):
    fig = plotProfiles(touringHull)
    # keel, sheer, 3 deck parts, cockpit markers, 2 plan view sides
    assert len(fig.data) == 8
    assert fig.layout.template.layout.paper_bgcolor is not None
    assert 'LOA 5200mm' in fig.layout.title.text


def testPlotCrossSectionsDefaultStations(touringHull):
    fig = plotCrossSections(touringHull)
    assert len(fig.data) == 5
    assert fig.data[0].name == 'x = 520mm'
    assert fig.data[2].name == 'x = 2600mm'
    assert fig.data[0].line.color == theme.STATION_COLORS[0]


def testPlotCrossSectionsWithInnerWall(touringHull):
    fig = plotCrossSections(touringHull, xs=[1000, 2600], shrinkMm=18)
    assert len(fig.data) == 4
    assert fig.data[1].line.dash == 'dash'

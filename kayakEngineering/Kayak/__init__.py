# -- Kayak Package -- #

'''
Kayak design toolkit.

Parametric hull geometry from Kayak Foundry designs, surface meshing,
STL / OpenSCAD export, and interactive visualization.

Wildcard import exposes key classes:
    from kayakEngineering.Kayak import *
    hull = parseYakFile('touring.yak')
    mesh = buildHullMesh(hull, BuildOptions(stepping='smart'))

Sub-modules:
    - HullGeometry: Bezier curves, cross sections, meshing, and export
'''

# Hull geometry
from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import BezierChain
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription, StationControls
from kayakEngineering.Kayak.HullGeometry.geometry.crossSection import CrossSectionModel, crossSectionAt
from kayakEngineering.Kayak.HullGeometry.geometry.meshStitcher import StitchOptions, stitchStrip
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import (
    BuildOptions,
    HullMeshBuilder,
    buildHullMesh,
)

# Input
from kayakEngineering.Kayak.HullGeometry.parsing.yakParser import parseYakFile
from kayakEngineering.Kayak.HullGeometry.config.projectConfig import ProjectConfig

# Export
from kayakEngineering.Kayak.HullGeometry.export.stlExporter import StlExporter
from kayakEngineering.Kayak.HullGeometry.export.scadExporter import ScadExporter

__all__ = [
    # Geometry
    'BezierChain',
    'HullDescription',
    'StationControls',
    'CrossSectionModel',
    'crossSectionAt',
    'StitchOptions',
    'stitchStrip',
    'BuildOptions',
    'HullMeshBuilder',
    'buildHullMesh',
    # Input
    'parseYakFile',
    'ProjectConfig',
    # Export
    'StlExporter',
    'ScadExporter',
]

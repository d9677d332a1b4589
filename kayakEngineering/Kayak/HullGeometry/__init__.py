# -- HullGeometry Package -- #

'''
Kayak hull geometry engine.

Cubic Bezier chains, cross-section synthesis from station templates,
surface meshing, and STL / OpenSCAD output for Kayak Foundry designs.
'''

__version__ = '0.1.0'

from kayakEngineering.Kayak.HullGeometry.errors import (
    HullGeometryError,
    InvalidInputError,
    OutOfDomainError,
    DesignFileError,
    ConfigError,
)
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import BuildOptions, buildHullMesh

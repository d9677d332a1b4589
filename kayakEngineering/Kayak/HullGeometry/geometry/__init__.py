# -- Geometry Subpackage -- #

'''
Pure hull geometry: Bezier chains, sampling, cross sections, and meshing.
No file I/O; every function is determined by its arguments.
'''

from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import BezierChain, Point2D, Point3D
from kayakEngineering.Kayak.HullGeometry.geometry.curveSampler import pointAtX, sampleInterval, sampleTheta
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription, StationControls
from kayakEngineering.Kayak.HullGeometry.geometry.crossSection import CrossSectionModel, crossSectionAt
from kayakEngineering.Kayak.HullGeometry.geometry.meshStitcher import Facet, Mesh, StitchOptions, stitchStrip
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import BuildOptions, HullMeshBuilder, buildHullMesh

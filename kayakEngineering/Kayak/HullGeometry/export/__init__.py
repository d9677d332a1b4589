# -- Export Subpackage -- #

'''
Writers for hull meshes (STL) and parametric solids (OpenSCAD).
'''

from kayakEngineering.Kayak.HullGeometry.export.stlExporter import StlExporter
from kayakEngineering.Kayak.HullGeometry.export.scadExporter import ScadExporter

__all__ = ['StlExporter', 'ScadExporter']

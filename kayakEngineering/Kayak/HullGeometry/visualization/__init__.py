# -- Visualization Subpackage -- #

'''
Plotly-based interactive views of hull curves, sections, and meshes.
'''

from kayakEngineering.Kayak.HullGeometry.visualization.hullPlots import plotCrossSections, plotMesh, plotProfiles

# -- Hull Geometry Constants -- #

'''
Fixed numbers of the kayak hull model: reference station layout, sampling
defaults, mesh refinement zones and the cockpit coaming template.

All lengths in millimeters.
'''

######################################################################
# -- Reference Stations -- #
######################################################################

# Measured cross-section templates, in percent of LOA
measuredStations: tuple = (10, 30, 50, 70, 90)

# Bracketing positions used for blending, in percent of LOA.
# 0 (bow) and 100 (stern) are synthesized from bow/stern height.
bracketStations: tuple = (0, 10, 30, 50, 70, 90, 100)

# Station control offsets are stored in 10000ths of the anchor span
stationScale: float = 10000.0

# Names of the four control offsets of each station
stationControlNames: tuple = ('deckCenter', 'deckSheer', 'hullSheer', 'hullKeel')

######################################################################
# -- Curve Evaluation -- #
######################################################################

# Default tolerance for point-at-x bisection [mm]
defaultToleranceMm: float = 5.0

# Iteration ceiling for point-at-x bisection
maxBisectionIterations: int = 50

######################################################################
# -- Strip Stitching -- #
######################################################################

defaultSamplesPerRing: int = 10

# Lateral shift applied to every mesh vertex [mm]
defaultLateralShiftMm: float = 1000.0

######################################################################
# -- Hull Mesh Stepping -- #
######################################################################

# Base longitudinal step for 'smart' stepping [mm]
smartStepMm: int = 50

# Refined step and ring density near bow, stern and coaming [mm]
fineStepMm: int = 10
finePointsPerRing: int = 250

# Refinement zone lengths [mm]
bowRefineMm: float = 200.0
sternRefineMm: float = 200.0

# Coaming refinement: (before, after) the cockpit anchor [mm]
coamingForeRefineMm: tuple = (50.0, 100.0)
coamingAftRefineMm: tuple = (100.0, 50.0)

# Points of the transom fan ring
transomRingPoints: int = 5

######################################################################
# -- Parametric Solid (OpenSCAD) -- #
######################################################################

defaultWallThicknessMm: float = 18.0
defaultSolidBowMm: float = 200.0
defaultSolidSternMm: float = 200.0

# Rear bulkhead default distance behind the cockpit aft anchor [mm]
bulkheadRearOffsetMm: float = 500.0

# Cockpit length measured forward from the aft coaming anchor [mm]
cockpitLengthMm: float = 350.0 + 1100.0

# Shell thickness of slices inside the cockpit [mm]
cockpitShellMm: float = 5.0

# Extrusion height of cockpit slices [mm]
cockpitExtrudeMm: float = 45.0

# Points per half-section of an extruded slice
slicePointsPerSection: int = 25

# Points of the coaming outline polyline
coamingOutlinePoints: int = 50

# x-interval for the sheer polylines [mm]
sheerIntervalMm: float = 10.0

# Thickness of helper polylines [mm]
helperLineThicknessMm: float = 8.0

######################################################################
# -- Cockpit -- #
######################################################################

# Center of gravity estimate: distance forward of the aft coaming anchor [mm]
cogOffsetMm: float = 350.0

# Nelo TR coaming outline, half-width over length (traced)
coamingTemplate: tuple = ((0.0, 0.0), (110.0, 215.0), (845.0, 320.0), (845.0, 0.0))
coamingTemplateLengthMm: float = 845.0

# -- Visualization Theme -- #

'''
Centralized dark-mode theme for all hull plots.

Change colors or template here to restyle every plot at once.
'''

# Plotly template
TEMPLATE = 'plotly_dark'

# Primary color palette (visible on dark backgrounds)
BLUE = '#42A5F5'
RED = '#EF5350'
GREEN = '#66BB6A'
ORANGE = '#FFA726'
PURPLE = '#AB47BC'
CYAN = '#26C6DA'

# Neutrals
WHITE = '#E0E0E0'
REFERENCE_LINE = '#888888'

# Hull surface
HULL_SURFACE = '#B0BEC5'

# Longitudinal curves
KEEL_COLOR = RED
SHEER_COLOR = CYAN
DECK_COLOR = ORANGE

# Cross-section colors (distinct per station)
STATION_COLORS = [RED, ORANGE, GREEN, BLUE, PURPLE, CYAN]

# -- Hull Geometry Visualizations -- #

'''
Plotly-based interactive plots for kayak hulls.

Design z points down; every plot negates it so the deck is on top.
'''

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from kayakEngineering.Kayak.HullGeometry import constants as const
from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError
from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import BezierChain
from kayakEngineering.Kayak.HullGeometry.geometry.crossSection import CrossSectionModel
from kayakEngineering.Kayak.HullGeometry.geometry.curveSampler import sampleTheta
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import meshToArray
from kayakEngineering.Kayak.HullGeometry.geometry.meshStitcher import Mesh
from kayakEngineering.Kayak.HullGeometry.visualization import theme

# Samples per longitudinal curve
_CURVE_POINTS = 200


def _curveArrays(chain: BezierChain, nPoints: int = _CURVE_POINTS):
    pts = np.array(sampleTheta(chain, max(nPoints, chain.segmentCount + 1)))
    return pts[:, 0], pts[:, 1]


def plotMesh(mesh: Mesh, title: str = 'Hull Surface Mesh') -> go.Figure:
    '''
    3D view of a hull facet soup.

    Parameters:
    -----------
    mesh : Mesh
        Facets in millimeters
    title : str
        Figure title

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    triangles = meshToArray(mesh)
    if len(triangles) == 0:
        raise InvalidInputError('Cannot plot an empty mesh')
    vertices = triangles.reshape(-1, 3)
    faces = np.arange(len(vertices)).reshape(-1, 3)

    fig = go.Figure()

    fig.add_trace(go.Mesh3d(
        x=vertices[:, 0],
        y=vertices[:, 1],
        z=vertices[:, 2],
        i=faces[:, 0],
        j=faces[:, 1],
        k=faces[:, 2],
        color=theme.HULL_SURFACE,
        flatshading=True,
        hovertemplate=(
            'X: %{x:.1f}mm<br>'
            'Y: %{y:.1f}mm<br>'
            'Z: %{z:.1f}mm<extra></extra>'
        ),
    ))

    fig.update_layout(
        title=f'{title} ({len(triangles)} facets)',
        scene=dict(
            xaxis_title='X (mm)',
            yaxis_title='Y (mm)',
            zaxis_title='Z (mm)',
            aspectmode='data',
        ),
        template=theme.TEMPLATE,
        height=600,
    )

    return fig


def plotProfiles(hull: HullDescription) -> go.Figure:
    '''
    Side view (keel, sheer, deck) above the plan view (sheer, both sides).

    Parameters:
    -----------
    hull : HullDescription
        Hull to plot

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    fig = make_subplots(
        rows=2, cols=1,
        subplot_titles=('Profile (Side View)', 'Sheer (Top View)'),
        vertical_spacing=0.12,
    )

    # 1. Side view
    x, z = _curveArrays(hull.keel)
    fig.add_trace(go.Scatter(x=x, y=-z, mode='lines', name='Keel',
                             line=dict(color=theme.KEEL_COLOR, width=2)),
                  row=1, col=1)
    x, z = _curveArrays(hull.sheerVertical)
    fig.add_trace(go.Scatter(x=x, y=-z, mode='lines', name='Sheer',
                             line=dict(color=theme.SHEER_COLOR, width=2)),
                  row=1, col=1)
    for idx, chain in enumerate((hull.deckFore, hull.deckMid, hull.deckAft)):
        x, z = _curveArrays(chain)
        fig.add_trace(go.Scatter(x=x, y=-z, mode='lines', name='Deck',
                                 line=dict(color=theme.DECK_COLOR, width=2),
                                 showlegend=(idx == 0)),
                      row=1, col=1)

    # Cockpit anchors
    fig.add_trace(go.Scatter(
        x=[hull.cockpitXFore, hull.cockpitXAft],
        y=[-hull.cockpitZFore, -hull.cockpitZAft],
        mode='markers', name='Cockpit',
        marker=dict(color=theme.WHITE, size=7),
    ), row=1, col=1)

    # 2. Plan view
    x, y = _curveArrays(hull.sheerHorizontal)
    fig.add_trace(go.Scatter(x=x, y=y, mode='lines', name='Sheer',
                             line=dict(color=theme.SHEER_COLOR, width=2),
                             showlegend=False),
                  row=2, col=1)
    fig.add_trace(go.Scatter(x=x, y=-y, mode='lines', name='Sheer',
                             line=dict(color=theme.SHEER_COLOR, width=2),
                             showlegend=False),
                  row=2, col=1)
    fig.add_hline(y=0, line=dict(color=theme.REFERENCE_LINE, dash='dot', width=0.5), row=2, col=1)

    fig.update_layout(
        title=f'Hull Lines (LOA {hull.loa:.0f}mm, cockpit {hull.cockpitLength:.0f}mm)',
        template=theme.TEMPLATE,
        height=650,
    )
    fig.update_xaxes(title_text='Length from Bow (mm)', row=2, col=1)
    fig.update_yaxes(title_text='Height (mm)', scaleanchor='x', scaleratio=1, row=1, col=1)
    fig.update_yaxes(title_text='Half-Breadth (mm)', row=2, col=1)

    return fig


def plotCrossSections(
    hull: HullDescription,
    xs: Optional[Sequence[float]] = None,
    shrinkMm: float = 0.0,
) -> go.Figure:
    '''
    Full cross sections (both sides) at several longitudinal positions.

    Parameters:
    -----------
    hull : HullDescription
        Hull to plot
    xs : Sequence[float]
        Positions in mm from the bow (default: the measured stations)
    shrinkMm : float
        Also draw the inner wall offset by this much (0 = outer skin only)

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    if xs is None:
        xs = [int(position / 100.0 * hull.loa) for position in const.measuredStations]

    model = CrossSectionModel(hull)
    colors = theme.STATION_COLORS

    fig = go.Figure()

    for idx, x in enumerate(xs):
        color = colors[idx % len(colors)]
        pts = np.array(sampleTheta(model.crossSectionAt(x), 60))
        yFull = np.concatenate([-pts[::-1, 0], pts[:, 0]])
        zFull = np.concatenate([-pts[::-1, 1], -pts[:, 1]])
        fig.add_trace(go.Scatter(
            x=yFull, y=zFull, mode='lines',
            name=f'x = {x:.0f}mm',
            line=dict(color=color, width=2),
        ))

        if shrinkMm > 0:
            inner = np.array(sampleTheta(model.crossSectionAt(x, shrinkMm=shrinkMm), 60))
            fig.add_trace(go.Scatter(
                x=np.concatenate([-inner[::-1, 0], inner[:, 0]]),
                y=np.concatenate([-inner[::-1, 1], -inner[:, 1]]),
                mode='lines', name=f'x = {x:.0f}mm inner',
                line=dict(color=color, width=1, dash='dash'),
                showlegend=False,
            ))

    fig.update_layout(
        title='Cross-Sections',
        xaxis_title='Width (mm)',
        yaxis_title='Height (mm)',
        yaxis=dict(scaleanchor='x', scaleratio=1),
        template=theme.TEMPLATE,
        height=450,
    )

    return fig

# -- Curve Projection Helpers -- #

'''
Lift sampled 2D curves into 3D and combine plan and profile views.
'''

from __future__ import annotations

from typing import List, Sequence

from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import Point2D, Point3D


def mapCurveXY0(curve: Sequence[Point2D]) -> List[Point3D]:
    '''Place a 2D curve in the horizontal plane: (x, y) -> (x, y, 0).'''
    return [(p[0], p[1], 0.0) for p in curve]


def mapCurveX0Z(curve: Sequence[Point2D]) -> List[Point3D]:
    '''Place a 2D curve in the vertical center plane: (x, y) -> (x, 0, y).'''
    return [(p[0], 0.0, p[1]) for p in curve]


def spliceCurvesXYXZ(curveXY: Sequence[Point2D], curveXZ: Sequence[Point2D]) -> List[Point3D]:
    '''
    Combine a plan view and a profile view into one 3D polyline.

    Both curves are expected to be interval samples over the same x range so
    that their points pair up one to one. If the profile runs short, its last
    z is repeated.

    Parameters:
    -----------
    curveXY : Sequence[Point2D]
        Plan view samples (x, y)
    curveXZ : Sequence[Point2D]
        Profile view samples (x, z)

    Returns:
    --------
    List[Point3D] : (x, y, z) per plan view point
    '''
    result: List[Point3D] = []
    z = 0.0
    for i, p in enumerate(curveXY):
        if i < len(curveXZ):
            z = curveXZ[i][1]
        result.append((p[0], p[1], z))
    return result


def mirrorCurveY(curve: Sequence[Point3D]) -> List[Point3D]:
    '''Reflect a 3D polyline about the center plane (negate y).'''
    return [(p[0], -p[1], p[2]) for p in curve]

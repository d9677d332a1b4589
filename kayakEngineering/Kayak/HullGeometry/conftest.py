# -- Shared Test Fixtures -- #

'''
Hull fixtures and a Kayak Foundry design file generator for the tests.
'''

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence, Tuple

import pytest

from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription

#--------------------------------------------------------------------#
# -- Sample Design (LOA 4000 mm) -- #
#--------------------------------------------------------------------#

SAMPLE_KEEL = [
    (0, 40), (300, 200), (700, 250), (1000, 270), (1300, 290), (1700, 300), (2000, 300),
    (2300, 300), (2700, 290), (3000, 270), (3300, 250), (3700, 200), (4000, 40),
]
SAMPLE_SHEERLINE = [
    (0, 0), (500, 150), (1000, 250), (1500, 270), (2000, 280),
    (2500, 280), (3000, 260), (3400, 200), (3800, 100), (4000, 0),
]
SAMPLE_SHEER = [(0, -20), (800, 0), (1500, 10), (2000, 10), (2500, 10), (3200, 0), (4000, -20)]
SAMPLE_DECK_BOW = [(0, -20), (500, -80), (1200, -120), (1700, -110)]
SAMPLE_DECK_STERN = [(2500, -90), (3000, -80), (3600, -50), (4000, -20)]

# position -> file offsets (x, y) of deckcenter, decksheer, hullsheer, hullkeel
SAMPLE_STATIONS = {
    10: ((4000, 0), (0, -4000), (0, 3000), (3000, 0)),
    30: ((5000, 0), (0, -5000), (0, 5000), (5000, 0)),
    50: ((5500, 0), (0, -5500), (0, 5500), (6000, 0)),
    70: ((5000, 0), (0, -5000), (0, 5000), (5000, 0)),
    90: ((4000, 0), (0, -4000), (0, 3000), (3000, 0)),
}


def _pointXml(name: str, point: Tuple[float, float]) -> str:
    return (f'<point name="{name}"><integer name="x">{point[0]}</integer>'
            f'<integer name="y">{point[1]}</integer></point>')


def _controlPointsXml(groupName: str, points: Sequence[Tuple[float, float]]) -> str:
    inner = ''.join(_pointXml(f'point{i}', p) for i, p in enumerate(points, start=1))
    return f'<control-points name="{groupName}">{inner}</control-points>'


def makeYakXml(omit: Iterable[str] = (), loa: int = 4000) -> str:
    '''
    XML text of a complete sample design.

    Parameters:
    -----------
    omit : Iterable[str]
        Names of Bezier elements to leave out ('hull', 'sheerline', 'sheer')
    loa : int
        Value of the loa element
    '''
    omit = set(omit)
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<KayakFoundry>',
        f'<integer name="loa">{loa}</integer>',
        '<integer name="bow-height">0</integer>',
        '<integer name="stern-height">0</integer>',
        '<integer name="dwl">150</integer>',
        '<string name="designer">test</string>',
        '<cs-control name="cs">',
    ]
    for index, (position, offsets) in enumerate(sorted(SAMPLE_STATIONS.items()), start=1):
        names = ('deckcenter', 'decksheer', 'hullsheer', 'hullkeel')
        points = ''.join(_pointXml(name, p) for name, p in zip(names, offsets))
        parts.append(f'<section-control name="section{index}">'
                     f'<integer name="position">{position}</integer>{points}</section-control>')
    parts.append('</cs-control>')

    for name, points in (('hull', SAMPLE_KEEL), ('sheerline', SAMPLE_SHEERLINE), ('sheer', SAMPLE_SHEER)):
        if name not in omit:
            parts.append(f'<Bezier name="{name}">{_controlPointsXml("points", points)}</Bezier>')

    parts.append('<DeckAssembly name="deck">'
                 f'{_controlPointsXml("bow", SAMPLE_DECK_BOW)}'
                 f'{_controlPointsXml("stern", SAMPLE_DECK_STERN)}'
                 '</DeckAssembly>')
    parts.append('</KayakFoundry>')
    return '\n'.join(parts)


#--------------------------------------------------------------------#
# -- Fixtures -- #
#--------------------------------------------------------------------#

@pytest.fixture
def flatHull() -> HullDescription:
    '''Symmetric LOA 4000 hull, bow/stern heights 0, flat stations.'''
    return HullDescription.flatTestHull(loa=4000)


@pytest.fixture
def touringHull() -> HullDescription:
    return HullDescription.touring()


@pytest.fixture
def yakFile(tmp_path: Path) -> Path:
    '''Sample design written to a .yak file.'''
    path = tmp_path / 'sample.yak'
    path.write_text(makeYakXml())
    return path

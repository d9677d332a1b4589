# -- Kayak Foundry Design Reader -- #

'''
Reads Kayak Foundry .yak design files into a HullDescription.

A .yak file is XML where every value is addressed by element tag plus a
'name' attribute:

    <integer name="loa">5200</integer>
    <Bezier name="hull">
      <control-points name="points">
        <point name="point1">
          <integer name="x">0</integer> <integer name="y">40</integer>
        </point>
        ...

Used elements:
  - integer loa / bow-height / stern-height / dwl
  - cs-control 'cs' / section-control section1..5: the station templates
    (position plus hullkeel, hullsheer, decksheer, deckcenter offsets)
  - Bezier hull (13 points), sheerline (10 points), sheer (7 points)
  - DeckAssembly 'deck' / control-points bow and stern (4 points each)

Station offsets are stored with y pointing up; they are negated here to
match the downward z of the longitudinal curves.
'''

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Union

from kayakEngineering.Kayak.HullGeometry import constants as const
from kayakEngineering.Kayak.HullGeometry.errors import DesignFileError, InvalidInputError
from kayakEngineering.Kayak.HullGeometry.geometry.bezierChain import BezierChain, Point2D
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import (
    HullDescription,
    StationControls,
    coamingAngleFromAnchors,
)

logger = logging.getLogger(__name__)

# Station offset names in the file, mapped to StationControls fields
_STATION_POINTS = {
    'deckcenter': 'deckCenter',
    'decksheer': 'deckSheer',
    'hullsheer': 'hullSheer',
    'hullkeel': 'hullKeel',
}

_SECTION_NAMES = ('section1', 'section2', 'section3', 'section4', 'section5')


#--------------------------------------------------------------------#
# -- Element Access -- #
#--------------------------------------------------------------------#

def _named(parent: ET.Element, tag: str, name: str) -> ET.Element:
    elem = parent.find(f"{tag}[@name='{name}']")
    if elem is None:
        raise DesignFileError(f'Missing <{tag} name="{name}"> under <{parent.tag}>')
    return elem


def _number(parent: ET.Element, name: str) -> float:
    elem = _named(parent, 'integer', name)
    text = (elem.text or '').strip()
    try:
        return float(int(text))
    except ValueError:
        raise DesignFileError(f'Value of <integer name="{name}"> is not an integer: {text!r}')


def _point(parent: ET.Element, name: str) -> Point2D:
    elem = _named(parent, 'point', name)
    return (_number(elem, 'x'), _number(elem, 'y'))


def _controlPoints(parent: ET.Element, groupName: str, count: int) -> List[Point2D]:
    '''Points point1..point<count> of a named control-points group.'''
    group = _named(parent, 'control-points', groupName)
    return [_point(group, f'point{i}') for i in range(1, count + 1)]


#--------------------------------------------------------------------#
# -- Design Sections -- #
#--------------------------------------------------------------------#

def _parseStations(root: ET.Element) -> Dict[int, StationControls]:
    csControl = _named(root, 'cs-control', 'cs')
    stations: Dict[int, StationControls] = {}
    for sectionName in _SECTION_NAMES:
        section = _named(csControl, 'section-control', sectionName)
        position = int(_number(section, 'position'))
        offsets = {}
        for fileName, fieldName in _STATION_POINTS.items():
            x, y = _point(section, fileName)
            offsets[fieldName] = (x, -y)
        stations[position] = StationControls(**offsets)
    return stations


def _parseBezier(root: ET.Element, name: str, count: int) -> List[Point2D]:
    return _controlPoints(_named(root, 'Bezier', name), 'points', count)


def parseYakXml(text: Union[str, bytes], transomMm: float = 0.0, source: str = '<string>') -> HullDescription:
    '''
    Build a hull description from the XML text of a .yak file.

    Parameters:
    -----------
    text : str | bytes
        XML document
    transomMm : float
        Stern width; the sheer plan curve ends at half of it
    source : str
        Name used in error messages

    Returns:
    --------
    HullDescription : Parsed hull
    '''
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise DesignFileError(f'{source}: malformed XML: {e}') from e

    try:
        loa = _number(root, 'loa')
        bowHeight = _number(root, 'bow-height')
        sternHeight = _number(root, 'stern-height')
        dwl = _number(root, 'dwl')

        stations = _parseStations(root)

        keel = _parseBezier(root, 'hull', 13)
        sheerHorizontal = _parseBezier(root, 'sheerline', 10)
        sheerVertical = _parseBezier(root, 'sheer', 7)

        deck = _named(root, 'DeckAssembly', 'deck')
        deckFore = _controlPoints(deck, 'bow', 4)
        deckAft = _controlPoints(deck, 'stern', 4)
    except DesignFileError as e:
        raise DesignFileError(f'{source}: {e}') from e

    # Open stern: the sheer ends at half the transom width
    lastX, lastY = sheerHorizontal[-1]
    sheerHorizontal[-1] = (lastX, lastY + transomMm / 2.0)

    # Cockpit anchors are the ends of the deck curves
    xFore, zFore = deckFore[-1]
    xAft, zAft = deckAft[0]

    try:
        return HullDescription(
            loa=loa,
            bowHeight=bowHeight,
            sternHeight=sternHeight,
            dwl=dwl,
            cockpitXFore=xFore,
            cockpitZFore=zFore,
            cockpitXAft=xAft,
            cockpitZAft=zAft,
            coamingAngle=coamingAngleFromAnchors(xFore, zFore, xAft, zAft),
            stations=stations,
            keel=BezierChain(keel),
            sheerHorizontal=BezierChain(sheerHorizontal),
            sheerVertical=BezierChain(sheerVertical),
            deckFore=BezierChain(deckFore),
            deckMid=BezierChain([(xFore, zFore), (xFore, zFore), (xAft, zAft), (xAft, zAft)]),
            deckAft=BezierChain(deckAft),
            coaming=BezierChain(const.coamingTemplate),
        )
    except InvalidInputError as e:
        raise DesignFileError(f'{source}: {e}') from e


def parseYakFile(path: Union[str, Path], transomMm: float = 0.0) -> HullDescription:
    '''
    Read a Kayak Foundry .yak file.

    Parameters:
    -----------
    path : str | Path
        Design file, must end in .yak
    transomMm : float
        Stern width [mm] (0 = pointed stern)

    Returns:
    --------
    HullDescription : Parsed hull

    Raises:
    -------
    DesignFileError : wrong suffix, missing file, malformed XML or missing
        elements
    '''
    path = Path(path)
    if path.suffix != '.yak':
        raise DesignFileError(f'Not a .yak file \'{path}\'')
    if not path.is_file():
        raise DesignFileError(f'No such Kayak Foundry yak file \'{path}\'')

    hull = parseYakXml(path.read_bytes(), transomMm=transomMm, source=str(path))

    lastUpdate = datetime.fromtimestamp(path.stat().st_mtime)
    logger.info('YAK File:     %s', path)
    logger.info('Last Update:  %s', lastUpdate.strftime('%Y-%m-%d %H:%M:%S'))
    logger.info('LOA:          %4d mm', hull.loa)
    logger.info('Cockpit:      %4d mm', hull.cockpitLength)
    logger.info('COG:          %4d mm', hull.centerOfGravityX)

    return hull

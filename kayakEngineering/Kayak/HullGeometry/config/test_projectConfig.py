# -- Project Config Tests -- #

'''
Parsing of project configuration files and their effect on build options.
'''

import logging

import pytest

from kayakEngineering.Kayak.HullGeometry.config.projectConfig import ProjectConfig
from kayakEngineering.Kayak.HullGeometry.errors import ConfigError
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import BuildOptions

SAMPLE = '''\
# foam core layout
solid-bow     = 250
solid-stern   : 300   # measured
bulkhead-rear = 3900

transom = 120
stern-hinge=40
'''


def testParsesAllKeys():
    config = ProjectConfig.fromText(SAMPLE)
    assert config == ProjectConfig(solidBow=250, solidStern=300, bulkheadRear=3900,
                                   transom=120, sternHinge=40)
    assert not config.isEmpty()


def testEmptyText():
    assert ProjectConfig.fromText('# nothing here\n\n').isEmpty()


def testLastValueWins():
    assert ProjectConfig.fromText('transom = 100\ntransom = 80').transom == 80


@pytest.mark.parametrize('line', ['wibble = 3', 'transom = -5', 'transom = wide', 'solid bow = 200'])
def testIllegalLinesSkipped(line, caplog):
    with caplog.at_level(logging.WARNING):
        config = ProjectConfig.fromText(f'{line}\nsolid-bow = 250', source='kayak.conf')
    assert config == ProjectConfig(solidBow=250)
    assert f"Config: kayak.conf:1: illegal expression: '{line}'" in caplog.text


def testLogsAcceptedValues(caplog):
    with caplog.at_level(logging.INFO):
        ProjectConfig.fromText('\n\ntransom = 120', source='kayak.conf')
    assert 'Config: kayak.conf:3: transom = 120' in caplog.text


def testApplyToOverridesSetValuesOnly():
    base = BuildOptions(stepping=25, solidBowMm=150.0)
    options = ProjectConfig(solidStern=300, bulkheadRear=3900, transom=120, sternHinge=40).applyTo(base)
    assert options.stepping == 25
    assert options.solidBowMm == 150.0
    assert options.solidSternMm == 300.0
    assert options.bulkheadRearMm == 3900.0
    assert options.transomMm == 120.0


def testApplyEmptyConfigKeepsOptions():
    base = BuildOptions(stepping=25)
    assert ProjectConfig().applyTo(base) == base


def testFromFile(tmp_path):
    path = tmp_path / 'kayak.conf'
    path.write_text(SAMPLE)
    assert ProjectConfig.fromFile(path).bulkheadRear == 3900


def testMissingFile(tmp_path):
    with pytest.raises(ConfigError):
        ProjectConfig.fromFile(tmp_path / 'missing.conf')

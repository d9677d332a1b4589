# -- Project Configuration File -- #

'''
Per-project build options kept next to the design file.

The file is plain text, one option per line:

    # foam core layout
    solid-bow     = 250
    solid-stern   : 300
    bulkhead-rear = 3900
    transom       = 120

Anything after '#' is a comment. Values are non-negative integers in mm.
Unknown keys and malformed lines are reported and skipped.
'''

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

from kayakEngineering.Kayak.HullGeometry.errors import ConfigError
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import BuildOptions

logger = logging.getLogger(__name__)

_LINE_PATTERN = re.compile(
    r'^(solid-bow|solid-stern|bulkhead-rear|transom|stern-hinge)\s*[:=]\s*(\d+)'
)

# File key -> field name
_KEYS = {
    'solid-bow': 'solidBow',
    'solid-stern': 'solidStern',
    'bulkhead-rear': 'bulkheadRear',
    'transom': 'transom',
    'stern-hinge': 'sternHinge',
}


@dataclass(frozen=True)
class ProjectConfig:
    '''
    Options read from a project configuration file. None = not set.

    sternHinge is carried for downstream tooling and does not affect the
    generated geometry.
    '''

    solidBow: Optional[int] = None
    solidStern: Optional[int] = None
    bulkheadRear: Optional[int] = None
    transom: Optional[int] = None
    sternHinge: Optional[int] = None

    @classmethod
    def fromFile(cls, path: Union[str, Path]) -> ProjectConfig:
        '''
        Parse a configuration file.

        Parameters:
        -----------
        path : str | Path
            Configuration file

        Returns:
        --------
        ProjectConfig : Parsed options

        Raises:
        -------
        ConfigError : the file does not exist or cannot be read
        '''
        path = Path(path)
        if not path.is_file():
            raise ConfigError(f'No such config file \'{path}\'')
        try:
            text = path.read_text()
        except OSError as e:
            raise ConfigError(f'Cannot read config file \'{path}\': {e}') from e
        return cls.fromText(text, source=str(path))

    @classmethod
    def fromText(cls, text: str, source: str = '<string>') -> ProjectConfig:
        '''Parse configuration text; source is used in log messages.'''
        values = {}
        for lineNo, line in enumerate(text.splitlines(), start=1):
            line = line.split('#', 1)[0].strip()
            if not line:
                continue
            match = _LINE_PATTERN.match(line)
            if match is None:
                logger.warning('Config: %s:%d: illegal expression: \'%s\'', source, lineNo, line)
                continue
            key, value = match.group(1), int(match.group(2))
            logger.info('Config: %s:%d: %s = %d', source, lineNo, key, value)
            values[_KEYS[key]] = value
        return cls(**values)

    def isEmpty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def applyTo(self, options: BuildOptions) -> BuildOptions:
        '''
        Build options with every configured value replacing the original.

        Parameters:
        -----------
        options : BuildOptions
            Base options (command line or defaults)

        Returns:
        --------
        BuildOptions : New options object
        '''
        overrides = {}
        if self.solidBow is not None:
            overrides['solidBowMm'] = float(self.solidBow)
        if self.solidStern is not None:
            overrides['solidSternMm'] = float(self.solidStern)
        if self.bulkheadRear is not None:
            overrides['bulkheadRearMm'] = float(self.bulkheadRear)
        if self.transom is not None:
            overrides['transomMm'] = float(self.transom)
        return options.withOverrides(**overrides)

# -- Hull Geometry Errors -- #

'''
Exception taxonomy for the hull geometry toolkit.

InvalidInputError and OutOfDomainError also derive from ValueError so callers
that only know the builtin type still catch them. A bisection that runs out
of iterations is not an error: it returns its best estimate.
'''


class HullGeometryError(Exception):
    '''Base class for all hull geometry failures.'''


class InvalidInputError(HullGeometryError, ValueError):
    '''Malformed input: control-point counts, non-numeric coordinates, bad options.'''


class OutOfDomainError(HullGeometryError, ValueError):
    '''A coordinate outside a chain's [x1, x2] or outside [0, LOA].'''


class DesignFileError(InvalidInputError):
    '''A design file that cannot be read or is missing required elements.'''


class ConfigError(InvalidInputError):
    '''A project configuration file that cannot be read.'''

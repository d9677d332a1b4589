# -- HullGeometry Runner -- #

'''
Command-line entry point for converting Kayak Foundry designs.

Reads a .yak design (plus an optional project config), builds the hull and
writes STL and/or OpenSCAD output. With --watch it keeps polling the input
files and rebuilds whenever one of them changes.

Usage:
    python -m kayakEngineering.Kayak.HullGeometry touring.yak --stl touring.stl
    python -m kayakEngineering.Kayak.HullGeometry touring.yak --scad touring.scad --stepping 25
    python -m kayakEngineering.Kayak.HullGeometry touring.yak --stl out.stl --transom 120 --binary
    python -m kayakEngineering.Kayak.HullGeometry touring.yak --stl out.stl --watch --interval 2
'''

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Dict, List, Optional

from kayakEngineering.Kayak.HullGeometry.config.projectConfig import ProjectConfig
from kayakEngineering.Kayak.HullGeometry.errors import HullGeometryError
from kayakEngineering.Kayak.HullGeometry.export.scadExporter import ScadExporter
from kayakEngineering.Kayak.HullGeometry.export.stlExporter import StlExporter
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import BuildOptions, buildHullMesh
from kayakEngineering.Kayak.HullGeometry.parsing.yakParser import parseYakFile

logger = logging.getLogger(__name__)


def parseStepping(value: str):
    '''argparse type for --stepping: 'smart' or a positive integer.'''
    if value == 'smart':
        return value
    try:
        step = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'stepping must be \'smart\' or a positive integer, got \'{value}\'')
    if step <= 0:
        raise argparse.ArgumentTypeError(f'stepping must be positive, got {step}')
    return step


def buildParser() -> argparse.ArgumentParser:
    '''Build the CLI argument parser.'''
    parser = argparse.ArgumentParser(
        description='HullGeometry -- Kayak Foundry design to STL / OpenSCAD',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'yak', type=str,
        help='Kayak Foundry design file (.yak)',
    )
    parser.add_argument(
        '--stl', type=str, default=None,
        help='Write the hull surface mesh to this STL file',
    )
    parser.add_argument(
        '--scad', type=str, default=None,
        help='Write the parametric solid to this OpenSCAD file',
    )
    parser.add_argument(
        '--stepping', type=parseStepping, default='smart',
        help='Longitudinal step in mm, or \'smart\' (default: smart)',
    )
    parser.add_argument(
        '--config', type=str, default=None,
        help='Project config file (default: <design>.conf next to the design, if present)',
    )
    parser.add_argument(
        '--transom', type=int, default=None,
        help='Transom width in mm (overrides the config file)',
    )
    parser.add_argument(
        '--binary', action='store_true',
        help='Write binary STL instead of ASCII',
    )
    parser.add_argument(
        '--watch', action='store_true',
        help='Rebuild whenever the design or config file changes',
    )
    parser.add_argument(
        '--interval', type=float, default=1.0,
        help='Polling interval for --watch in seconds (default: 1)',
    )
    parser.add_argument(
        '--plot', action='store_true',
        help='Open interactive plots of the hull',
    )
    parser.add_argument(
        '--verbose', action='store_true',
        help='Debug logging',
    )

    return parser


def resolveConfigPath(args: argparse.Namespace) -> Optional[Path]:
    '''Explicit --config, else <design stem>.conf beside the design if it exists.'''
    if args.config:
        return Path(args.config)
    candidate = Path(args.yak).with_suffix('.conf')
    return candidate if candidate.is_file() else None


def loadProject(args: argparse.Namespace):
    '''
    Read config and design and combine them with the command line.

    Returns:
    --------
    Tuple[HullDescription, BuildOptions]
    '''
    config = ProjectConfig()
    configPath = resolveConfigPath(args)
    if configPath is not None:
        config = ProjectConfig.fromFile(configPath)

    options = config.applyTo(BuildOptions(stepping=args.stepping))
    if args.transom is not None:
        options = options.withOverrides(transomMm=float(args.transom))

    hull = parseYakFile(args.yak, transomMm=options.transomMm)
    return hull, options


def runBuild(
    hull: HullDescription,
    options: BuildOptions,
    stlPath: Optional[str] = None,
    scadPath: Optional[str] = None,
    binary: bool = False,
    showPlots: bool = False,
) -> None:
    '''
    Build the requested outputs for one hull.

    Parameters:
    -----------
    hull : HullDescription
        Parsed design
    options : BuildOptions
        Build options
    stlPath, scadPath : str
        Output files (None = skip)
    binary : bool
        Binary STL
    showPlots : bool
        Open plotly figures in the browser
    '''
    print()
    print('=' * 62)
    print('  KAYAK HULL GEOMETRY')
    print('=' * 62)
    print()
    print(f'  LOA:               {hull.loa:8.0f} mm')
    print(f'  Cockpit:           {hull.cockpitLength:8.0f} mm  '
          f'({hull.cockpitXFore:.0f} - {hull.cockpitXAft:.0f})')
    print(f'  Coaming Angle:     {hull.coamingAngle:8.2f} deg')
    print(f'  COG:               {hull.centerOfGravityX:8.0f} mm')
    print(f'  Stepping:          {str(options.stepping):>8}')
    print(f'  Transom:           {options.transomMm:8.0f} mm')
    print()

    mesh = None
    if stlPath or showPlots:
        mesh = buildHullMesh(hull, options)

    if stlPath:
        StlExporter().exportMesh(mesh, stlPath, binary=binary)
        print(f'  STL:   {stlPath}  ({len(mesh)} facets)')

    if scadPath:
        exporter = ScadExporter(hull, options)
        exporter.export(scadPath)
        print(f'  SCAD:  {scadPath}  ({len(exporter.slicePositions())} slices)')

    if showPlots:
        from kayakEngineering.Kayak.HullGeometry.visualization.hullPlots import (
            plotCrossSections,
            plotMesh,
            plotProfiles,
        )
        plotProfiles(hull).show()
        plotCrossSections(hull, shrinkMm=options.wallThicknessMm).show()
        plotMesh(mesh).show()

    print()
    print('=' * 62)
    print('  Build complete.')
    print('=' * 62)


def _watchedFiles(args: argparse.Namespace) -> List[Path]:
    files = [Path(args.yak)]
    configPath = resolveConfigPath(args)
    if configPath is not None:
        files.append(configPath)
    return files


def _modificationTimes(paths: List[Path]) -> Dict[Path, Optional[float]]:
    return {p: (p.stat().st_mtime if p.exists() else None) for p in paths}


def _buildOnce(args: argparse.Namespace) -> None:
    hull, options = loadProject(args)
    runBuild(hull, options, stlPath=args.stl, scadPath=args.scad,
             binary=args.binary, showPlots=args.plot)


def watch(args: argparse.Namespace, maxCycles: Optional[int] = None) -> None:
    '''
    Poll the design and config files and rebuild on every change.

    Errors in the design are logged and watching continues.

    Parameters:
    -----------
    args : argparse.Namespace
        Parsed command line
    maxCycles : int
        Stop after this many polls (None = until interrupted)
    '''
    lastSeen: Dict[Path, Optional[float]] = {}
    cycle = 0
    while maxCycles is None or cycle < maxCycles:
        current = _modificationTimes(_watchedFiles(args))
        if current != lastSeen:
            lastSeen = current
            try:
                _buildOnce(args)
            except HullGeometryError as e:
                logger.error('Build failed: %s', e)
            logger.info('Watching %s', ', '.join(str(p) for p in current))
        cycle += 1
        if maxCycles is None or cycle < maxCycles:
            time.sleep(args.interval)


def main(argv: Optional[List[str]] = None) -> int:
    '''CLI entry point.'''
    parser = buildParser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)-8s %(name)s: %(message)s',
    )

    if not (args.stl or args.scad or args.plot):
        parser.error('nothing to do: give --stl, --scad and/or --plot')
    for flag, path, suffix in (('--stl', args.stl, '.stl'), ('--scad', args.scad, '.scad')):
        if path and Path(path).suffix.lower() != suffix:
            parser.error(f'{flag} output must end in {suffix}, got \'{path}\'')

    if args.watch:
        try:
            watch(args)
        except KeyboardInterrupt:
            print('\n  Watch stopped.')
        return 0

    try:
        _buildOnce(args)
    except HullGeometryError as e:
        logger.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    raise SystemExit(main())

# -- STL Export -- #

'''
Writes hull surface meshes as STL files.

The facet soup is handed to trimesh with three fresh vertices per facet and
processing disabled, so the file keeps the facets exactly in build order,
degenerate ones included.
'''

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
import trimesh

from kayakEngineering.Kayak.HullGeometry.errors import InvalidInputError
from kayakEngineering.Kayak.HullGeometry.geometry.hullDescription import HullDescription
from kayakEngineering.Kayak.HullGeometry.geometry.hullMeshBuilder import (
    BuildOptions,
    buildHullMesh,
    meshToArray,
)
from kayakEngineering.Kayak.HullGeometry.geometry.meshStitcher import Mesh

logger = logging.getLogger(__name__)


class StlExporter:
    '''
    Exports hull meshes as STL files.

    Examples:
    ---------
    >>> exporter = StlExporter()
    >>> exporter.exportHull(hull, 'output/kayak.stl')
    >>> exporter.exportMesh(mesh, 'output/kayak.stl', binary=True)
    '''

    @staticmethod
    def toTrimesh(mesh: Mesh) -> trimesh.Trimesh:
        '''
        Facet soup as an unprocessed trimesh.Trimesh.

        Parameters:
        -----------
        mesh : Mesh
            Facets in millimeters

        Returns:
        --------
        trimesh.Trimesh : One face per facet, no shared vertices
        '''
        triangles = meshToArray(mesh)
        if len(triangles) == 0:
            raise InvalidInputError('Cannot export an empty mesh')
        vertices = triangles.reshape(-1, 3)
        faces = np.arange(len(vertices), dtype=np.int64).reshape(-1, 3)
        return trimesh.Trimesh(vertices=vertices, faces=faces, process=False)

    def exportMesh(
        self,
        mesh: Mesh,
        outputPath: Union[str, Path],
        binary: bool = False,
    ) -> str:
        '''
        Write a facet soup to an STL file.

        Parameters:
        -----------
        mesh : Mesh
            Facets in millimeters
        outputPath : str | Path
            Output file path (must end in .stl)
        binary : bool
            If True, write binary STL. If False, write ASCII STL.

        Returns:
        --------
        str : Path to the exported STL file
        '''
        outputPath = Path(outputPath)
        if outputPath.suffix.lower() != '.stl':
            raise InvalidInputError(f'No valid output path with .stl suffix provided: \'{outputPath}\'')

        tm = self.toTrimesh(mesh)
        fileType = 'stl' if binary else 'stl_ascii'
        tm.export(str(outputPath), file_type=fileType)

        logger.info('Written STL to \'%s\' (%d facets, %s)',
                    outputPath, len(tm.faces), 'binary' if binary else 'ASCII')
        return str(outputPath)

    def exportHull(
        self,
        hull: HullDescription,
        outputPath: Union[str, Path],
        options: BuildOptions = BuildOptions(),
        binary: bool = False,
    ) -> str:
        '''
        Build the hull mesh and write it in one call.

        Parameters:
        -----------
        hull : HullDescription
            Hull to mesh
        outputPath : str | Path
            Output file path (must end in .stl)
        options : BuildOptions
            Mesh build options
        binary : bool
            If True, write binary STL

        Returns:
        --------
        str : Path to the exported STL file
        '''
        if Path(outputPath).suffix.lower() != '.stl':
            raise InvalidInputError(f'No valid output path with .stl suffix provided: \'{outputPath}\'')
        return self.exportMesh(buildHullMesh(hull, options), outputPath, binary=binary)

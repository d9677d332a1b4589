# -- Config Subpackage -- #

'''
Per-project build options read from plain text files.
'''

from kayakEngineering.Kayak.HullGeometry.config.projectConfig import ProjectConfig

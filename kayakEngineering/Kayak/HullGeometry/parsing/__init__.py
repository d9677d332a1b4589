# -- Parsing Subpackage -- #

'''
Readers for hull design files.
'''

from kayakEngineering.Kayak.HullGeometry.parsing.yakParser import parseYakFile

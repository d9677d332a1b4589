# -- Kayak Engineering Package -- #

'''
Master package for the Kayak Engineering toolkit.

Domain-specific sub-packages:
    - Kayak: Parametric kayak hull geometry, meshing, and CAD export
'''

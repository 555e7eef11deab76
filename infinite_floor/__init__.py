"""
Infinite Floor package.

This package contains the modules of the Infinite Floor dungeon crawler,
including the tile grid, the dungeon generator, the actors, the combat and
turn engine, and the console front-end.
"""

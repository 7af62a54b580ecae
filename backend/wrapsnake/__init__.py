"""
wrapsnake - single-player snake on a wrapped-around grid.
"""

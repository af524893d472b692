"""Onionmaze - Convex hull layers and maze generation for 2D point sets.

Onionmaze computes the convex hull of a random point set with the Gift Wrapping
(Jarvis March) algorithm, recording every construction step, then peels the set
into nested hull layers (an onion decomposition) and carves one passage into
each layer to produce a solvable maze.

Example:
    $ onionmaze maze -n 40 --seed 7

This prints the nested layers, the carved gaps, and the start/end positions
for a 40 point maze.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

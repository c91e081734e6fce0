"""Monte Carlo estimation of node intermediacy in directed multigraphs.

The intermediacy of a node is the probability that it lies on a directed
path from a source to a target node when every edge is kept independently
with probability p.
"""

__version__ = "0.1.0"

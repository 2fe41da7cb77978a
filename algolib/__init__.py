"""Classic algorithms: number theory, dynamic programming, graphs, disjoint sets and range queries."""

__version__ = "0.1.0"
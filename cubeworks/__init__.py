"""Math, collision primitives, a stopwatch and a UDP layer for a small 3D engine."""

__version__ = "0.1.0"
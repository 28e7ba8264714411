"""MANTRA DEX tools: pool discovery, swap routing, simulation and execution."""

__version__ = "0.1.0"

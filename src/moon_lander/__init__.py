"""Moon Lander - arcade landing game on procedurally generated terrain."""

__version__ = "1.0.0"

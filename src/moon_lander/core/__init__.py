"""Simulation core: terrain, physics, collision and effects."""

"""Bundled resources for CircuitSim."""

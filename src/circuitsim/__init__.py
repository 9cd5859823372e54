"""CircuitSim: interactive series circuit sandbox."""

__version__ = "0.1.0"

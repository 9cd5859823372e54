"""Qt views for CircuitSim."""

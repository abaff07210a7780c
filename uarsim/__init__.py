"""Closed-loop control simulation: ARX plant, PID controller, setpoint generator, config files and a CLI."""

__version__ = "0.1.0"
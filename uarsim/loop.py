"""Closed control loop: PID controller driving an ARX plant."""

from __future__ import annotations

from dataclasses import dataclass, field

from uarsim.arx import ArxModel
from uarsim.generator import SetpointGenerator
from uarsim.pid import PidController


@dataclass
class ControlLoop:
    """Feedback loop holding the plant, the controller and the setpoint generator."""

    model: ArxModel = field(default_factory=ArxModel)
    controller: PidController = field(default_factory=PidController)
    generator: SetpointGenerator = field(default_factory=SetpointGenerator)
    error: float = 0.0
    last_output: float = 0.0

    def simulate(self, setpoint: float) -> float:
        """Run one loop step towards ``setpoint`` and return the plant output."""
        self.error = setpoint - self.last_output
        output = self.model.step(self.controller.step(self.error))
        self.last_output = output
        return output

    def reset(self) -> None:
        """Clear the loop's error and remembered output."""
        self.last_output = 0.0
        self.error = 0.0
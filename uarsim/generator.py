"""Setpoint signal generator: step, sine and square waves with a constant offset."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class SignalType(Enum):
    """Shape of the generated setpoint signal."""

    STEP = "skok"
    SINE = "sinusoida"
    SQUARE = "prostokatny"


@dataclass
class SetpointGenerator:
    """Produces the setpoint value for a given simulation time.

    Before ``activation_time`` the output is the constant ``offset``.
    """

    kind: SignalType = SignalType.STEP
    amplitude: float = 0.0
    activation_time: int = 0
    period: float = 0.0
    duty_cycle: float = 0.0
    offset: float = 0.0
    current_time: float = field(default=0.0, init=False, compare=False)

    def value(self, t: float) -> float:
        """Return the setpoint at time ``t``."""
        self.current_time = t
        if t < self.activation_time:
            return self.offset

        elapsed = t - self.activation_time

        if self.kind is SignalType.STEP:
            return self.offset + self.amplitude

        if self.kind is SignalType.SINE:
            if self.period == 0:
                # The angular frequency is infinite: the value is undefined.
                return math.nan
            return self.offset + self.amplitude * math.sin(
                (2 * math.pi / self.period) * elapsed
            )

        if self.kind is SignalType.SQUARE:
            if self.period == 0:
                return self.offset
            phase = math.fmod(elapsed, self.period)
            if phase < self.period * self.duty_cycle:
                return self.offset + self.amplitude
            return self.offset

        return self.offset

    def reset(self) -> None:
        """Rewind the generator's clock to zero."""
        self.current_time = 0.0
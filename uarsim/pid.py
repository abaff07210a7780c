"""PID controller with optional anti-windup clamping."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PidController:
    """Discrete PID controller.

    ``ti`` and ``td`` of zero switch the integral and derivative parts off.
    With ``recommended_integration`` the error is divided by ``ti`` before
    it is summed; otherwise the sum is divided by ``ti``. With
    ``anti_windup`` the output is clamped to ``[lower, upper]`` and the
    integral is frozen while the output is saturated.
    """

    gain: float = 0.0
    ti: float = 0.0
    td: float = 0.0
    lower: float = -1000.0
    upper: float = 1000.0
    anti_windup: bool = False
    recommended_integration: bool = False
    proportional: float = field(default=0.0, init=False)
    integral: float = field(default=0.0, init=False)
    derivative: float = field(default=0.0, init=False)
    output: float = field(default=0.0, init=False)
    saturated: bool = field(default=False, init=False)
    _error_sum: float = field(default=0.0, init=False, repr=False)
    _previous_error: float = field(default=0.0, init=False, repr=False)

    def step(self, error: float) -> float:
        """Compute the control signal for one error sample."""
        self.proportional = self.gain * error

        if self.ti > 0:
            if not self.saturated:
                if self.recommended_integration:
                    self._error_sum += error / self.ti
                    self.integral = self._error_sum
                else:
                    self._error_sum += error
                    self.integral = self._error_sum / self.ti
        else:
            self.integral = 0.0

        if self.td > 0:
            self.derivative = self.td * (error - self._previous_error)

        self._previous_error = error
        output = self.proportional + self.integral + self.derivative

        if self.anti_windup:
            if output < self.lower:
                output = self.lower
                self.saturated = True
            elif output > self.upper:
                output = self.upper
                self.saturated = True
            else:
                self.saturated = False

        self.output = output
        return output

    def reset(self) -> None:
        """Clear the integral sum and the remembered error."""
        self._error_sum = 0.0
        self._previous_error = 0.0

    def set_limits(self, lower: float, upper: float) -> None:
        """Set the anti-windup output limits."""
        self.lower = lower
        self.upper = upper
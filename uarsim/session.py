"""Simulation session: configures the loop and advances it one tick at a time."""

from __future__ import annotations

import random
from dataclasses import dataclass

from uarsim.config import ArxSettings, Configuration, parse_coefficients
from uarsim.loop import ControlLoop

TIME_STEP = 0.1

_ARX = "ARX model"
_PID = "PID controller"
_GENERATOR = "setpoint generator"


class NotConfiguredError(RuntimeError):
    """Raised when the simulation is stepped before every part is configured."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = tuple(missing)
        super().__init__("configure before simulating: " + ", ".join(self.missing))


@dataclass(frozen=True)
class Sample:
    """Values recorded at one simulation tick."""

    time: float
    setpoint: float
    output: float
    error: float
    control: float
    proportional: float
    integral: float
    derivative: float


class Simulator:
    """Drives the control loop; the ARX disturbance also sets the noise spread."""

    def __init__(self, loop: ControlLoop | None = None, seed: int | None = None) -> None:
        self.loop = loop if loop is not None else ControlLoop()
        self.time = 0.0
        self.noise_std = 0.0
        self.interval = 0.0
        self.samples: list[Sample] = []
        self._rng = random.Random(seed)
        self._configured = {_ARX: False, _PID: False, _GENERATOR: False}

    @property
    def missing(self) -> list[str]:
        """Parts not configured yet."""
        return [name for name, done in self._configured.items() if not done]

    def configure_arx(self, settings: ArxSettings) -> None:
        """Apply ARX settings; raise ValueError on invalid coefficients."""
        a = parse_coefficients(settings.a)
        b = parse_coefficients(settings.b)
        model = self.loop.model
        model.a = a
        model.b = b
        model.delay = settings.delay
        model.disturbance = settings.disturbance
        self.noise_std = settings.disturbance
        self.interval = settings.interval
        self._configured[_ARX] = True

    def configure_pid(self, config: Configuration) -> None:
        """Apply the controller parameters from ``config``."""
        controller = self.loop.controller
        controller.gain = config.gain
        controller.ti = config.ti
        controller.td = config.td
        controller.set_limits(config.lower, config.upper)
        controller.anti_windup = config.anti_windup
        controller.recommended_integration = config.recommended_integration
        self._configured[_PID] = True

    def configure_generator(self, config: Configuration) -> None:
        """Apply the setpoint generator parameters from ``config``."""
        generator = self.loop.generator
        generator.kind = config.kind
        generator.amplitude = config.amplitude
        generator.period = config.period
        generator.duty_cycle = config.duty_cycle
        generator.activation_time = config.activation_time
        generator.offset = config.offset
        self._configured[_GENERATOR] = True

    def step(self) -> Sample:
        """Advance the simulation by one tick and record the sample."""
        missing = self.missing
        if missing:
            raise NotConfiguredError(missing)

        self.time += TIME_STEP
        setpoint = self.loop.generator.value(self.time)
        controller = self.loop.controller
        control = controller.step(self.loop.error)

        noise = self._rng.gauss(0.0, self.noise_std) if self.noise_std != 0.0 else 0.0
        output = self.loop.model.step(setpoint) + noise
        error = setpoint - output
        self.loop.error = error

        sample = Sample(
            time=self.time,
            setpoint=setpoint,
            output=output,
            error=error,
            control=control,
            proportional=controller.proportional,
            integral=controller.integral,
            derivative=controller.derivative,
        )
        self.samples.append(sample)
        return sample

    def run(self, steps: int) -> list[Sample]:
        """Advance ``steps`` ticks and return their samples."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        return [self.step() for _ in range(steps)]

    def reset(self) -> None:
        """Rewind the clock, drop recorded samples and zero the model disturbance."""
        self.time = 0.0
        self.samples.clear()
        self.loop.model.disturbance = 0.0

    def reset_integral(self) -> None:
        """Clear the controller's integral sum."""
        self.loop.controller.reset()
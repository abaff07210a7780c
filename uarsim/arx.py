"""Discrete ARX process model."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from itertools import islice


class ArxModel:
    """ARX model ``A(q) y = q^-k B(q) u + z``.

    ``a`` and ``b`` may be reassigned after construction; the history
    buffers keep their length and grow one sample per step until they
    are long enough, with missing history treated as zero.
    """

    def __init__(
        self,
        a: Iterable[float] = (0.0,),
        b: Iterable[float] = (0.0,),
        delay: int = 1,
        disturbance: float = 0.0,
    ) -> None:
        self.a = list(a)
        self.b = list(b)
        self.delay = delay
        self.disturbance = disturbance
        self._inputs: deque[float] = deque([0.0] * (len(self.b) + delay))
        self._outputs: deque[float] = deque([0.0] * len(self.a))

    def __repr__(self) -> str:
        return (
            f"ArxModel(a={self.a!r}, b={self.b!r}, delay={self.delay!r}, "
            f"disturbance={self.disturbance!r})"
        )

    def step(self, u: float) -> float:
        """Feed one input sample and return the next output sample."""
        required = self.delay + len(self.b)

        self._inputs.appendleft(u)
        if len(self._inputs) > required:
            self._inputs.pop()

        y = self.disturbance
        for coefficient, past_input in zip(self.b, islice(self._inputs, self.delay, None)):
            y += coefficient * past_input
        for coefficient, past_output in zip(self.a, self._outputs):
            y -= coefficient * past_output

        self._outputs.appendleft(y)
        while len(self._outputs) > len(self.a):
            self._outputs.pop()

        return y
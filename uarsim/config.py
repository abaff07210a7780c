"""Simulator configuration: ARX settings, PID and generator parameters, text file format."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from os import PathLike

from uarsim.generator import SignalType

DEFAULT_CONFIG_NAME = "konfiguracja.txt"


@dataclass
class ArxSettings:
    """ARX model settings as entered by the user.

    ``a`` and ``b`` hold space-separated coefficients; ``interval`` is the
    simulation tick in milliseconds.
    """

    a: str = ""
    b: str = ""
    delay: int = 1
    disturbance: float = 0.0
    interval: float = 100.0


@dataclass
class Configuration:
    """Complete set of parameters for the model, the controller and the generator."""

    arx: ArxSettings = field(default_factory=ArxSettings)
    gain: float = 0.0
    ti: float = 0.0
    td: float = 0.0
    amplitude: float = 0.0
    duty_cycle: float = 0.0
    activation_time: int = 0
    period: float = 0.0
    offset: float = 0.0
    kind: SignalType = SignalType.STEP
    lower: float = -1000.0
    upper: float = 1000.0
    anti_windup: bool = False
    recommended_integration: bool = False


def parse_coefficients(text: str) -> list[float]:
    """Parse space-separated coefficients; raise ValueError on an invalid entry."""
    coefficients = []
    for token in text.split(" "):
        try:
            coefficients.append(float(token.strip()))
        except ValueError:
            raise ValueError(f"invalid coefficient: {token!r}") from None
    return coefficients


def _format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def _coefficient_text(text: str) -> str:
    if not text:
        return "0"
    return " ".join(_format_number(c) for c in parse_coefficients(text))


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _to_int(text: str) -> int:
    value = _to_float(text)
    if not math.isfinite(value):
        return 0
    return int(value)


def _field_value(line: str) -> str:
    return line.split(":", 1)[1].strip()


_FLOAT_FIELDS = {
    "k:": "gain",
    "Ti:": "ti",
    "Td:": "td",
    "amplituda:": "amplitude",
    "wypelnienie:": "duty_cycle",
    "okres:": "period",
    "skladowa_stala:": "offset",
    "dolna: ": "lower",
    "gorna: ": "upper",
}


def save_config(config: Configuration, path: str | PathLike[str]) -> None:
    """Write ``config`` to ``path`` in the ``key: value`` text format."""
    arx = config.arx
    lines = [
        f"a: {_coefficient_text(arx.a)}",
        f"b: {_coefficient_text(arx.b)}",
        f"opoznienie: {_format_number(arx.delay)}",
        f"zaklocenie: {_format_number(arx.disturbance)}",
        f"k: {_format_number(config.gain)}",
        f"Ti: {_format_number(config.ti)}",
        f"Td: {_format_number(config.td)}",
        f"amplituda: {_format_number(config.amplitude)}",
        f"wypelnienie: {_format_number(config.duty_cycle)}",
        f"czas_aktywacji: {_format_number(config.activation_time)}",
        f"okres: {_format_number(config.period)}",
        f"skladowa_stala: {_format_number(config.offset)}",
        f"typ: {config.kind.value}",
        f"dolna: {_format_number(config.lower)}",
        f"gorna: {_format_number(config.upper)}",
    ]
    with open(path, "w", encoding="utf-8") as out:
        out.write("\n".join(lines) + "\n")


def load_config(
    path: str | PathLike[str], base: Configuration | None = None
) -> Configuration:
    """Read a configuration file, starting from ``base`` for keys it lacks.

    Numbers that cannot be parsed read as zero; unknown lines and unknown
    signal types are ignored.
    """
    start = base if base is not None else Configuration()
    config = replace(start, arx=replace(start.arx))
    arx = config.arx

    with open(path, encoding="utf-8") as source:
        for raw in source:
            line = raw.rstrip("\r\n")
            if line.startswith("a:"):
                arx.a = line[2:].strip()
            elif line.startswith("b:"):
                arx.b = line[2:].strip()
            elif line.startswith("opoznienie:"):
                arx.delay = _to_int(_field_value(line))
            elif line.startswith("zaklocenie:"):
                arx.disturbance = _to_float(_field_value(line))
            elif line.startswith("czas_aktywacji:"):
                config.activation_time = _to_int(_field_value(line))
            elif line.startswith("typ: "):
                name = _field_value(line)
                try:
                    config.kind = SignalType(name)
                except ValueError:
                    pass
            else:
                for prefix, attribute in _FLOAT_FIELDS.items():
                    if line.startswith(prefix):
                        setattr(config, attribute, _to_float(_field_value(line)))
                        break
    return config
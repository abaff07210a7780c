import pytest

from uarsim.pid import PidController


def test_proportional_only():
    pid = PidController(gain=2.0)
    assert pid.step(3.0) == pytest.approx(6.0)
    assert pid.proportional == pytest.approx(6.0)
    assert pid.integral == 0.0
    assert pid.derivative == 0.0


def test_default_limits_from_source():
    pid = PidController()
    assert (pid.lower, pid.upper) == (-1000.0, 1000.0)


def test_integral_accumulates_constant_error():
    pid = PidController(gain=0.0, ti=4.0)
    outputs = [pid.step(2.0) for _ in range(4)]
    increments = [b - a for a, b in zip(outputs, outputs[1:])]
    assert all(inc == pytest.approx(2.0 / 4.0) for inc in increments)
    assert pid.integral == pytest.approx(outputs[-1])


def test_integration_methods_agree_for_fixed_ti():
    standard = PidController(gain=1.0, ti=3.0)
    recommended = PidController(gain=1.0, ti=3.0, recommended_integration=True)
    for e in (1.0, -0.5, 2.0, 0.25, 4.0):
        assert recommended.step(e) == pytest.approx(standard.step(e))


def test_integration_methods_differ_when_ti_changes():
    standard = PidController(ti=2.0)
    recommended = PidController(ti=2.0, recommended_integration=True)
    for pid in (standard, recommended):
        pid.step(1.0)
        pid.ti = 4.0
    assert standard.step(1.0) == pytest.approx(2.0 / 4.0)
    assert recommended.step(1.0) == pytest.approx(1.0 / 2.0 + 1.0 / 4.0)


def test_derivative_uses_change_in_error():
    pid = PidController(td=0.5)
    first = pid.step(2.0)
    second = pid.step(2.0)
    third = pid.step(1.0)
    assert first == pytest.approx(0.5 * 2.0)
    assert second == 0.0
    assert third == pytest.approx(0.5 * (1.0 - 2.0))


def test_zero_ti_disables_integral():
    pid = PidController(gain=1.0, ti=0.0)
    for _ in range(5):
        assert pid.step(1.5) == pytest.approx(1.5)
    assert pid.integral == 0.0


def test_anti_windup_clamps_output():
    pid = PidController(gain=10.0, lower=-2.0, upper=3.0, anti_windup=True)
    assert pid.step(5.0) == 3.0
    assert pid.saturated
    assert pid.step(-5.0) == -2.0
    assert pid.saturated
    assert pid.step(0.1) == pytest.approx(10.0 * 0.1)
    assert not pid.saturated


def test_no_clamping_without_anti_windup():
    pid = PidController(gain=10.0, lower=-2.0, upper=3.0)
    assert pid.step(5.0) == pytest.approx(50.0)
    assert not pid.saturated


def test_anti_windup_freezes_integral():
    pid = PidController(gain=0.0, ti=1.0, lower=-1.0, upper=1.0, anti_windup=True)
    pid.step(5.0)
    frozen = pid.integral
    assert pid.saturated
    for _ in range(3):
        assert pid.step(5.0) == 1.0
        assert pid.integral == frozen


def test_set_limits():
    pid = PidController(gain=1.0, anti_windup=True)
    pid.set_limits(-0.5, 0.5)
    assert (pid.lower, pid.upper) == (-0.5, 0.5)
    assert pid.step(3.0) == 0.5


def test_reset_clears_integral_and_previous_error():
    pid = PidController(gain=1.0, ti=2.0, td=1.0)
    for e in (1.0, 2.0, 3.0):
        pid.step(e)
    pid.reset()
    fresh = PidController(gain=1.0, ti=2.0, td=1.0)
    assert pid.step(1.5) == pytest.approx(fresh.step(1.5))
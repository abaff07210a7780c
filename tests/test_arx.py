import pytest

from uarsim.arx import ArxModel


def test_default_model_outputs_zero():
    model = ArxModel()
    assert [model.step(u) for u in (1.0, 5.0, -2.0)] == [0.0, 0.0, 0.0]


def test_disturbance_only_model():
    model = ArxModel(a=[], b=[], delay=1, disturbance=2.5)
    assert model.step(10.0) == 2.5
    assert model.step(-3.0) == 2.5


@pytest.mark.parametrize("delay", [1, 2, 4])
def test_pure_delay_of_input(delay):
    model = ArxModel(a=[], b=[1.0], delay=delay)
    inputs = [0.5, 1.5, -2.0, 3.25, 7.0, 0.125]
    outputs = [model.step(u) for u in inputs]
    assert outputs[:delay] == [0.0] * delay
    assert outputs[delay:] == inputs[: len(inputs) - delay]


def test_first_response_equals_input_coefficient():
    model = ArxModel(a=[-0.4], b=[0.6], delay=1)
    assert model.step(1.0) == 0.0
    assert model.step(1.0) == pytest.approx(0.6)


def test_step_response_settles_at_static_gain():
    model = ArxModel(a=[-0.4], b=[0.6], delay=1)
    outputs = [model.step(1.0) for _ in range(200)]
    assert outputs[-1] == pytest.approx(1.0)
    assert all(x <= y + 1e-12 for x, y in zip(outputs, outputs[1:]))


def test_model_is_linear_without_disturbance():
    first = ArxModel(a=[-0.5, 0.1], b=[0.3, 0.2], delay=2)
    second = ArxModel(a=[-0.5, 0.1], b=[0.3, 0.2], delay=2)
    inputs = [1.0, -0.5, 2.0, 0.0, 3.0, 1.0, -1.0]
    for u in inputs:
        assert second.step(2 * u) == pytest.approx(2 * first.step(u))


def test_disturbance_adds_constant_for_fir_model():
    clean = ArxModel(a=[], b=[0.7, 0.2], delay=1)
    noisy = ArxModel(a=[], b=[0.7, 0.2], delay=1, disturbance=0.9)
    for u in (1.0, 2.0, -1.0, 4.0):
        assert noisy.step(u) - clean.step(u) == pytest.approx(0.9)


def test_coefficients_replaced_after_construction():
    model = ArxModel()
    model.b = [1.0]
    model.delay = 2
    model.a = []
    outputs = [model.step(u) for u in (1.0, 2.0, 3.0, 4.0)]
    assert outputs == [0.0, 0.0, 1.0, 2.0]


def test_constructor_copies_coefficients():
    a = [-0.2]
    b = [0.5]
    model = ArxModel(a=a, b=b)
    a.append(9.0)
    b.append(9.0)
    assert model.a == [-0.2]
    assert model.b == [0.5]
# uarsim

`uarsim` simulates a single-loop automatic control system built from three parts:

- a **setpoint generator** (`uarsim.generator.SetpointGenerator`) producing a
  step, sine or rectangular reference signal, chosen with
  `uarsim.generator.SignalType` (`STEP`, `SINE`, `SQUARE`), with an activation
  time, period, duty cycle and constant offset. Before the activation time the
  output is the offset alone;
- a **discrete ARX plant model** (`uarsim.arx.ArxModel`) with `a` and `b`
  coefficient lists, a transport delay and an additive disturbance;
- a **PID controller** (`uarsim.pid.PidController`) with optional anti-windup
  clamping to `[lower, upper]` and a choice between two ways of accumulating
  the integral term (`recommended_integration` divides each error by `ti`
  before summing; otherwise the sum is divided by `ti`). A `ti` or `td` of
  zero switches that term off.

The package has no runtime dependencies beyond the standard library and
supports Python 3.10 and later.

## Installation

```
pip install .
```

## Command line

```
uarsim [config] [-n STEPS] [--seed SEED] [--anti-windup]
       [--recommended-integration] [--save PATH]
```

The command reads a configuration file (default `konfiguracja.txt` in the
current directory), configures the simulator from it and prints the run to
standard output as CSV with the columns
`time,setpoint,output,error,control,proportional,integral,derivative`.

- `-n`, `--steps` — number of 0.1 s ticks to simulate (default 100);
- `--seed` — seed for the random disturbance noise;
- `--anti-windup` — clamp the controller output to its limits;
- `--recommended-integration` — divide each error by `Ti` before summing;
- `--save PATH` — also write the configuration used to `PATH`.

It exits with status 1 if the configuration file cannot be read, if an ARX
coefficient is invalid, or if `--save` cannot write its file.

## Configuration file

A plain text file of `key: value` lines:

```
a: -0.4
b: 0.6
opoznienie: 1
zaklocenie: 0
k: 0.5
Ti: 5
Td: 0.2
amplituda: 1
wypelnienie: 0.5
czas_aktywacji: 1
okres: 10
skladowa_stala: 0
typ: skok
dolna: -10
gorna: 10
```

`a` and `b` hold space-separated coefficients; `typ` is one of `skok`
(step), `sinusoida` (sine) or `prostokatny` (rectangular).
`uarsim.config.load_config(path, base)` reads such a file into a
`uarsim.config.Configuration`, starting from `base` (or the defaults) for
keys that are missing; numbers that cannot be parsed read as zero, and
unknown lines and signal types are ignored.
`uarsim.config.save_config(config, path)` writes one.
`uarsim.config.parse_coefficients(text)` turns a coefficient string into a
list of floats and raises `ValueError` on an invalid entry. ARX settings are
held in `uarsim.config.ArxSettings` (coefficients, delay, disturbance and the
tick interval in milliseconds).

## Using the library

- `SetpointGenerator.value(t)` returns the reference value at time `t`;
  `reset()` rewinds its clock.
- `ArxModel.step(u)` feeds one input sample and returns the next output.
- `PidController.step(error)` returns the control signal for one error
  sample and updates its `proportional`, `integral` and `derivative`
  members; `set_limits(lower, upper)` sets the clamping bounds and `reset()`
  clears the integral sum and the remembered error.
- `uarsim.loop.ControlLoop.simulate(setpoint)` runs one feedback step — the
  controller acts on the error and its output drives the plant — and returns
  the plant output; `reset()` clears the error and the remembered output.

`uarsim.session.Simulator` advances time in 0.1 s ticks. It must be given
`configure_arx(settings)`, `configure_pid(config)` and
`configure_generator(config)` before `step()` or `run(steps)` is called;
otherwise those raise `NotConfiguredError`, whose `missing` attribute names
the parts not yet configured. On each tick the plant is fed the setpoint,
Gaussian noise with the ARX disturbance as its standard deviation is added to
its output, and the controller is stepped with the error from the previous
tick. Each tick is returned and recorded in `samples` as a
`uarsim.session.Sample` (time, setpoint, output, error, control signal and
the P, I and D components). `reset()` rewinds the clock, drops the samples
and zeroes the model disturbance; `reset_integral()` clears only the
controller's integral sum.

`uarsim.network.NetworkManager` can listen on a TCP port
(`start_server(port)`) or connect to a peer (`connect_to_server(host, port)`),
reporting through the `on_connected`, `on_client_connected` and
`on_connection_failed` callbacks; without a failure callback, failures raise
`uarsim.network.NetworkError`. `close()` (or leaving it as a context manager)
stops the server and closes the connection.

## What the package does not do

- There is no graphical window and no plotting: results are printed as CSV
  or returned as `Sample` objects for you to chart.
- The network manager only establishes a connection between two peers; it
  sends and receives no simulation data.

## Running the tests

```
pip install .[test]
pytest
```
import pytest

from robot_sim.__main__ import build_parser, main
from robot_sim.config import SimulationConfig, parse_num_robots
from robot_sim.errors import ConfigurationError


@pytest.mark.parametrize(
    "value, expected",
    [(None, 1), ("abc", 1), ("", 1), ("0", 1), ("-2", 1), ("4", 4), (" 3 ", 3), (7, 7)],
)
def test_parse_num_robots(value, expected):
    assert parse_num_robots(value) == expected


def test_config_from_args():
    args = build_parser().parse_args(
        ["--num-robots", "5", "--piston-output", "80", "--mass", "20", "--seed", "4", "--headless"]
    )
    config = SimulationConfig.from_args(args)

    assert config.num_robots == 5
    assert config.headless
    assert config.seed == 4
    inputs = config.runtime_inputs()
    assert inputs.piston_force == pytest.approx(0.8)
    assert inputs.mass == pytest.approx(0.02)


def test_config_defaults_unparseable_robot_count():
    args = build_parser().parse_args(["--num-robots", "many"])
    assert SimulationConfig.from_args(args).num_robots == 1


@pytest.mark.parametrize(
    "kwargs",
    [{"piston_output": 150}, {"mass_grams": 0}, {"frames": -1}],
)
def test_config_rejects_out_of_range_values(kwargs):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**kwargs)


def test_main_headless_run(capsys):
    status = main(["--headless", "--frames", "30", "--seed", "1", "--num-robots", "3"])

    assert status == 0
    assert "30 Frames, 3 Robots" in capsys.readouterr().out


def test_main_reports_configuration_errors():
    assert main(["--headless", "--piston-output", "500"]) == 1

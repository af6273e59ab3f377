import pytest

from gochanlab.cli import main, parse_args


def test_defaults():
    options = parse_args([])
    assert options.name == "John Doe"
    assert options.age == 30
    assert options.is_male is False


def test_single_dash_flags():
    options = parse_args(["-name", "Ann", "-age", "41", "-isMale"])
    assert (options.name, options.age, options.is_male) == ("Ann", 41, True)


def test_double_dash_flags():
    options = parse_args(["--name=Bo", "--age=7"])
    assert (options.name, options.age) == ("Bo", 7)


def test_bad_age_exits_with_usage_error():
    with pytest.raises(SystemExit) as info:
        parse_args(["-age", "old"])
    assert info.value.code == 2


def test_unknown_flag_exits_with_usage_error():
    with pytest.raises(SystemExit) as info:
        parse_args(["-colour", "red"])
    assert info.value.code == 2


def test_main_prints_arguments_and_flags(capsys):
    assert main(["-name", "Ann", "-isMale"]) == 0
    out = capsys.readouterr().out
    assert "Argument 1: -name" in out
    assert "Argument 2: Ann" in out
    assert "Name: Ann" in out
    assert "Age: 30" in out
    assert "Is Male: true" in out
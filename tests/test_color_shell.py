import io

import pytest

from corefunctions.color_convert import Direction
from corefunctions.color_shell import ColorShell
from corefunctions.messages import DEFAULT_MESSAGES

MESSAGES = DEFAULT_MESSAGES["en"]


def run_shell(text, once=False):
    out = io.StringIO()
    shell = ColorShell(io.StringIO(text), out, MESSAGES, once=once)
    shell.run()
    return out.getvalue()


def test_rgb_to_mcf_session():
    output = run_shell("0\n255, 150, 0\n")
    assert "MCF color: 1.000, 0.588, 0.000" in output
    # menu shown again after the result, then input ends
    assert output.count(MESSAGES["title"]) == 2


def test_mcf_to_rgb_session():
    output = run_shell("1\n1.000, 0.588, 0.000\n")
    assert "RGB color: 255, 150, 0" in output


def test_whitespace_tolerant_input():
    assert run_shell("0\n255,150,0\n") == run_shell("0\n255, 150, 0\n")


@pytest.mark.parametrize("choice,error_key", [
    ("0", "rgb_format_error"),
    ("1", "mcf_format_error"),
])
def test_format_error_returns_to_menu(choice, error_key):
    output = run_shell(f"{choice}\nabc,1,2\n0\n0,0,0\n")
    assert MESSAGES[error_key] in output
    assert "MCF color: 0.000, 0.000, 0.000" in output


def test_range_error_is_reported():
    output = run_shell("0\n300,0,0\n")
    assert MESSAGES["rgb_range_error"] in output
    assert output.count(MESSAGES["title"]) == 2


def test_mcf_range_error_is_reported():
    assert MESSAGES["mcf_range_error"] in run_shell("1\n1.1, 0, 0\n")


def test_invalid_choice_skips_color_prompt():
    output = run_shell("x\n")
    assert MESSAGES["invalid_choice"] in output
    assert MESSAGES["rgb_prompt"] not in output
    assert MESSAGES["mcf_prompt"] not in output
    assert output.count(MESSAGES["title"]) == 2


def test_choice_tolerates_whitespace():
    shell = ColorShell(io.StringIO(), io.StringIO(), MESSAGES)
    assert shell.parse_choice(" 1 ") is Direction.MCF_TO_RGB
    assert shell.parse_choice("2") is None


def test_once_mode_stops_after_one_conversion():
    output = run_shell("0\n0,0,0\n1\n1,1,1\n", once=True)
    assert "MCF color: 0.000, 0.000, 0.000" in output
    assert MESSAGES["rgb_result"].format(255, 255, 255) not in output
    assert output.count(MESSAGES["title"]) == 1


def test_eof_at_color_prompt_ends_loop():
    output = run_shell("1\n")
    assert output.endswith(MESSAGES["mcf_prompt"])


def test_context_manager_closes_input():
    stream = io.StringIO("")
    with ColorShell(stream, io.StringIO(), MESSAGES) as shell:
        shell.run()
    assert stream.closed

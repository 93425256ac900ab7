from __future__ import annotations

from pathlib import Path

import pytest

from specflow.cli import main as cli_main

"""Exit code / error stream contract.

- 0: compiled (warnings allowed)
- 1: any fatal error; diagnostic on stderr with ERROR label; nothing written
"""

HEADER = "journey_id,journey_name,step,user_does,system_shows,critical,owner,notes"


def _run(temp_workdir: Path, text: str, capsys) -> tuple[int, str, str]:
    csv_path = temp_workdir / "journeys.csv"
    csv_path.write_text(text, encoding="utf-8")
    code = cli_main([str(csv_path)])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def _nothing_written(root: Path) -> bool:
    return not (root / "docs").exists() and not (root / "tests").exists()


def test_exit_code_success(temp_workdir: Path, sample_csv_text: str, capsys):
    code, out, err = _run(temp_workdir, sample_csv_text, capsys)
    assert code == 0
    assert "SUMMARY journeys=2" in out
    assert err == ""


@pytest.mark.parametrize(
    "text,error_type,line_hint",
    [
        ("", "MALFORMED_INPUT", None),
        (HEADER + "\n", "MALFORMED_INPUT", "Line 1:"),
        (HEADER.replace(",owner", "") + "\nJ-AB,N,1,a,b,yes,x\n", "MISSING_HEADER", "Line 1:"),
        (HEADER + "\nsignup-flow,Signup,1,a,b,yes,@o,\n", "INVALID_IDENTIFIER", "Line 2:"),
        (HEADER + "\nJ-AB,N,1,a,b,yes,,\n", "MISSING_OWNER", "Line 2:"),
        (HEADER + "\nJ-AB,N,1,a,b,maybe,@o,\n", "INVALID_CRITICALITY", "Line 2:"),
        (HEADER + "\nJ-AB,N,zero,a,b,yes,@o,\n", "INVALID_STEP", "Line 2:"),
        (HEADER + "\nJ-LOGIN,L,1,a,b,yes,@o,\nJ-LOGIN,L,1,c,d,yes,@o,\n", "DUPLICATE_STEP", "Line 3:"),
        (HEADER + "\nJ-CHECKOUT,C,1,a,b,yes,@o,\nJ-CHECKOUT,C,3,c,d,yes,@o,\n", "NON_SEQUENTIAL_STEPS", "Line 3:"),
    ],
)
def test_exit_code_fatal_validation(temp_workdir: Path, capsys, text, error_type, line_hint):
    code, out, err = _run(temp_workdir, text, capsys)
    assert code == 1
    assert err.startswith(f"ERROR {error_type}: ")
    if line_hint:
        assert line_hint in err
    assert "SUMMARY" not in out
    assert _nothing_written(temp_workdir)


def test_warning_does_not_change_exit_code(temp_workdir: Path, capsys):
    text = HEADER + "\nJ-SIGNUP,Signup,1,a,b,yes,@o,\nJ-SIGNUP,Signup,2,c,d,no,@o,\n"
    code, out, err = _run(temp_workdir, text, capsys)
    assert code == 0
    assert err.startswith("WARN ")
    assert "ERROR" not in err
    assert "warnings=1" in out


def test_validation_failure_keeps_previous_outputs(temp_workdir: Path, sample_csv_text: str, capsys):
    assert _run(temp_workdir, sample_csv_text, capsys)[0] == 0
    contract = temp_workdir / "docs/contracts/journey_login.yml"
    before = contract.read_text(encoding="utf-8")

    broken = sample_csv_text.replace("J-LOGIN,Login,2", "J-LOGIN,Login,5")
    assert _run(temp_workdir, broken, capsys)[0] == 1
    assert contract.read_text(encoding="utf-8") == before

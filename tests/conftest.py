# Shared pytest fixtures
from __future__ import annotations
import logging
import tempfile
from pathlib import Path
import pytest

from specflow.logging.init import LOGGER_NAME, reset_logging

HEADER = "journey_id,journey_name,step,user_does,system_shows,critical,owner,notes"


@pytest.fixture(autouse=True)
def _clean_logging():
    # each test gets handlers bound to its own (captured) stdout/stderr
    reset_logging()
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        monkeypatch.chdir(p)
        for var in ("SPECFLOW_CONTRACTS_DIR", "SPECFLOW_TESTS_DIR", "SPECFLOW_TODAY"):
            monkeypatch.delenv(var, raising=False)
        yield p


@pytest.fixture()
def sample_csv_text() -> str:
    return "\n".join([
        HEADER,
        "J-SIGNUP,Signup,1,Clicks sign up,Shows signup form,yes,@alice,Must be fast",
        'J-SIGNUP,Signup,2,"Enter name, then email",Shows confirmation,yes,@alice,',
        "J-LOGIN,Login,1,Clicks login,Shows login form,no,@bob,",
        "J-LOGIN,Login,2,Submits credentials,Shows dashboard,no,@bob,Session cookie set",
        "",
    ])


@pytest.fixture()
def write_csv(temp_workdir: Path):
    def _write(text: str, name: str = "journeys.csv") -> Path:
        path = temp_workdir / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def sample_config_yaml() -> str:
    return """contracts_dir: docs/contracts
tests_dir: tests/e2e
contract_extension: yml
test_extension: spec.ts
default_source_name: journeys.csv
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "specflow.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def make_csv():
    def _make(*lines: str) -> str:
        return "\n".join([HEADER, *lines]) + "\n"
    return _make

import logging

import pytest

from mclisp.builtin.env_builtin import init_env
from mclisp.interpreter import Interpreter
from mclisp.log import ROOT


# Settings read from MCLISP_* variables would change prompts, limits and the
# truth atom. Clear them once for the whole session so a developer's shell
# cannot leak into the tests. Tests that exercise a setting use monkeypatch.
@pytest.fixture(scope="session", autouse=True)
def _clean_mclisp_environment():
    with pytest.MonkeyPatch.context() as mp:
        for var in ("MCLISP_PROMPT", "MCLISP_TRUTH_NAME", "MCLISP_MAX_TOKEN_LENGTH", "MCLISP_LOG_LEVEL"):
            mp.delenv(var, raising=False)
        yield


@pytest.fixture
def env():
    """Return a fresh environment with the builtins registered."""
    return init_env()


@pytest.fixture
def itp():
    return Interpreter()


@pytest.fixture
def reset_logging():
    """Drop handlers the driver installs so they do not outlive captured streams."""
    yield
    logger = logging.getLogger(ROOT)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)

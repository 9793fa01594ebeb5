import io

import pytest

from symbex.builtin.env_builtin import reset_default_environment, standard_environment
from symbex.interpreter import Interpreter

# Interpreter-level tests run twice: once with the strict reader and once with
# the lenient one. Well-formed source must read and evaluate the same way in
# both modes; tests that care about malformed input pick a mode explicitly.


@pytest.fixture(params=["strict", "lenient"])
def reader_mode(request):
    return request.param


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def itp(reader_mode, out):
    """A fresh interpreter (own environment) writing println output to `out`."""
    return Interpreter(output=out, strict=reader_mode == "strict")


@pytest.fixture
def env(out):
    return standard_environment(output=out)


@pytest.fixture(autouse=True)
def _fresh_default_environment():
    # evaluate() without an env shares one process-wide table; isolate tests.
    reset_default_environment()
    yield
    reset_default_environment()

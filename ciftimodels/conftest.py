import pytest

from ciftimodels.ciftiglobals import LoggingOutputSuppressor


@pytest.fixture(autouse=True)
def quiet_logger():
    # log records still reach caplog through propagation
    with LoggingOutputSuppressor():
        yield

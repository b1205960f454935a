import pytest

from proplogic import logs

@pytest.fixture(autouse=True)
def no_default_logger():
    yield
    logs.shutdown()

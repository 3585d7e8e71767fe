# content of conftest.py

# std
import os

# third-party
import pytest
from loguru import logger

# use the packaged word tables only, regardless of any user config file
os.environ['CASEWORK_NO_USER_CONFIG'] = '1'


@pytest.fixture
def messages():
    """Capture log messages emitted by casework while the test runs."""
    from casework.logging import enabled

    captured = []
    sink = logger.add(captured.append, level='DEBUG',
                      format='{level}: {message}')
    with enabled('casework'):
        yield captured

    logger.remove(sink)

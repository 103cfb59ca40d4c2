import logging

import pytest


@pytest.fixture(autouse=True)
def reset_promsaint_logger():
    """Drop whatever handlers a test's setup_logging() left on the promsaint logger."""
    yield
    promsaint_logger = logging.getLogger("promsaint")
    for handler in promsaint_logger.handlers[:]:
        promsaint_logger.removeHandler(handler)
        handler.close()
    promsaint_logger.setLevel(logging.NOTSET)


@pytest.fixture
def promsaint_url():
    return "http://promsaint.test:8080"


@pytest.fixture
def json_endpoint(promsaint_url):
    return f"{promsaint_url}/json"

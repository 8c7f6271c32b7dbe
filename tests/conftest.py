import pytest
import structlog


@pytest.fixture(autouse=True)
def silent_structlog():
    """Keeps log lines out of captured stdout/stderr between tests."""
    structlog.configure(
        processors=[structlog.processors.KeyValueRenderer()],
        logger_factory=structlog.ReturnLoggerFactory(),
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def tagged_text():
    """A short document with a few delimited spans and a dangling opener."""
    return "Name: <alice> Email: <alice@example.com> Note: <unterminated"

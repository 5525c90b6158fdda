import pytest
import structlog


@pytest.fixture(autouse=True, scope="session")
def quiet_structlog():
    structlog.configure(
        processors=[],
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()

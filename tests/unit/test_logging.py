"""Package logging follows settings.debug and stays under the rebac namespace."""

import logging

import pytest

from rebac.core.config import Settings
from rebac.shared.telemetry import logging as rebac_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(rebac_logging.PACKAGE_LOGGER)
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


@pytest.mark.parametrize(("debug", "level"), [(True, logging.DEBUG), (False, logging.INFO)])
def test_setup_logging_level(package_logger: logging.Logger, debug: bool, level: int) -> None:
    configured = rebac_logging.setup_logging(Settings(debug=debug))
    assert configured is package_logger
    assert package_logger.level == level


def test_setup_logging_attaches_one_handler(package_logger: logging.Logger) -> None:
    rebac_logging.setup_logging(Settings(debug=False))
    rebac_logging.setup_logging(Settings(debug=True))
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_setup_logging_reads_environment(package_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    rebac_logging.setup_logging()
    assert package_logger.level == logging.DEBUG


def test_get_logger_keeps_package_module_names() -> None:
    assert rebac_logging.get_logger("rebac.infrastructure.cache").name == "rebac.infrastructure.cache"


def test_get_logger_nests_foreign_names() -> None:
    assert rebac_logging.get_logger("worker").name == "rebac.worker"


def test_package_modules_log_under_namespace() -> None:
    from rebac.application.services import access_list_query

    assert access_list_query.logger.name == "rebac.application.services.access_list_query"

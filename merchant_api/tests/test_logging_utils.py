import logging

import pytest

from merchant_api.exceptions import NotFoundError
from merchant_api.utils.logging_utils import (
    ContextLogger,
    clear_logging_context,
    get_logging_context,
    log_operation,
    set_logging_context,
)


@pytest.fixture(autouse=True)
def fresh_context():
    clear_logging_context()
    yield
    clear_logging_context()


class Widgets:
    @log_operation("delete_widget")
    def delete(self, entity_id: int) -> None:
        if entity_id == 0:
            raise NotFoundError("Widget", entity_id)

    @log_operation("explode")
    def explode(self, entity_id: int) -> None:
        raise RuntimeError("boom")


def test_context_is_merged_into_records(caplog):
    set_logging_context(username="root")
    logger = ContextLogger("merchant_api.tests")

    with caplog.at_level(logging.INFO, logger="merchant_api.tests"):
        logger.info("hello", extra={"entity_id": 3})

    record = caplog.records[-1]
    assert record.username == "root"
    assert record.entity_id == 3
    assert get_logging_context() == {"username": "root"}


def test_completed_operation_logs_entity_id(caplog):
    with caplog.at_level(logging.INFO):
        Widgets().delete(7)

    record = caplog.records[-1]
    assert record.getMessage() == "Completed delete_widget"
    assert record.operation == "delete_widget"
    assert record.entity_id == 7


def test_application_error_is_a_warning(caplog):
    with caplog.at_level(logging.INFO):
        with pytest.raises(NotFoundError):
            Widgets().delete(entity_id=0)

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.error_type == "NotFoundError"
    assert record.entity_id == 0


def test_unexpected_error_is_logged_with_traceback(caplog):
    with caplog.at_level(logging.INFO):
        with pytest.raises(RuntimeError):
            Widgets().explode(1)

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.exc_info is not None

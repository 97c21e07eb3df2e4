import logging

from genre_recommendation.infrastructure.logging.std_logger_adapter import StdLoggerAdapter

LOGGER_NAME = "genre_recommendation.tests"


class TestStdLoggerAdapter:
    def test_formats_arguments(self, caplog):
        adapter = StdLoggerAdapter(LOGGER_NAME)

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            adapter.info("scored %d movies", 3)

        assert caplog.records[0].getMessage() == "scored 3 movies"
        assert caplog.records[0].levelno == logging.INFO

    def test_records_point_at_caller(self, caplog):
        adapter = StdLoggerAdapter(LOGGER_NAME)

        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            adapter.warning("capped")

        assert caplog.records[0].funcName == "test_records_point_at_caller"

    def test_exception_includes_traceback(self, caplog):
        adapter = StdLoggerAdapter(logging.getLogger(LOGGER_NAME))

        with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                adapter.exception("failed")

        assert caplog.records[0].exc_info is not None
        assert adapter.name == LOGGER_NAME

    def test_debug_filtered_by_level(self, caplog):
        adapter = StdLoggerAdapter(LOGGER_NAME)

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            adapter.debug("hidden")

        assert caplog.records == []

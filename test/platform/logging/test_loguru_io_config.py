import logging

from loguru import logger as loguru_logger
import pytest

from src.platform.logging.loguru_io_config import StdlibToLoguruHandler, access_log_level


@pytest.fixture
def captured():
    messages = []
    sink_id = loguru_logger.add(
        lambda message: messages.append(message.record), level='DEBUG', format='{message}'
    )
    yield messages
    loguru_logger.remove(sink_id)


def _record(name: str, level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


@pytest.mark.unit
class TestAccessLogLevel:
    @pytest.mark.parametrize(
        'status,expected',
        [(201, 'SUCCESS'), (304, 'WARNING'), (409, 'ERROR'), (503, 'CRITICAL'), (101, 'INFO')],
    )
    def test_level_follows_status(self, status, expected):
        message = f'127.0.0.1 - "POST /api/tickets HTTP/1.1" - {status} - 8ms'

        assert access_log_level(message) == expected

    def test_non_access_line(self):
        assert access_log_level('Booting worker with pid 42') is None


@pytest.mark.unit
class TestStdlibToLoguruHandler:
    def test_quiet_logger_debug_is_dropped(self, captured):
        StdlibToLoguruHandler().emit(_record('reportlab.pdfbase', logging.DEBUG, 'font cache'))

        assert captured == []

    def test_quiet_logger_warning_is_kept(self, captured):
        StdlibToLoguruHandler().emit(_record('asyncio', logging.WARNING, 'slow callback'))

        assert [r['message'] for r in captured] == ['slow callback']

    def test_access_line_is_raised_to_status_level(self, captured):
        line = '127.0.0.1 - "GET /api/flights/9 HTTP/1.1" - 404 - 3ms'

        StdlibToLoguruHandler().emit(_record('granian.access', logging.INFO, line))

        assert captured[0]['level'].name == 'ERROR'

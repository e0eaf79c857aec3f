"""
Unit tests for structured logging.
"""
import io
import json
import logging

import pytest

from core.domain.case import Case
from core.domain.enums import RequestType
from core.services.list_decoder import single
from core.services.structured_logger import (
    ROOT_LOGGERS,
    StructuredFormatter,
    configure_logging,
)
from infrastructure.testrail.dispatcher import RequestDispatcher
from infrastructure.testrail.http_client import TestRailHttpError


@pytest.fixture
def restore_loggers():
    saved = {
        name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers))
        for name in ROOT_LOGGERS
    }
    yield
    for name, (level, handlers) in saved.items():
        package_logger = logging.getLogger(name)
        package_logger.setLevel(level)
        package_logger.handlers = handlers


class TestStructuredFormatter:
    """Test JSON formatting."""

    def test_format_with_extra_fields(self):
        record = logging.LogRecord(
            name='infrastructure.testrail.dispatcher', level=logging.WARNING,
            pathname=__file__, lineno=1, msg='Request %s failed', args=('get_case',),
            exc_info=None
        )
        record.status_code = 404

        data = json.loads(StructuredFormatter().format(record))

        assert data['level'] == 'WARNING'
        assert data['event'] == 'Request get_case failed'
        assert data['logger'] == 'infrastructure.testrail.dispatcher'
        assert data['status_code'] == 404
        assert 'timestamp' in data

    def test_non_serializable_extra_is_stringified(self):
        record = logging.LogRecord(
            name='core', level=logging.INFO, pathname=__file__, lineno=1,
            msg='x', args=(), exc_info=None
        )
        record.thing = object()

        data = json.loads(StructuredFormatter().format(record))

        assert isinstance(data['thing'], str)

    def test_request_fields_grouped(self):
        record = logging.LogRecord(
            name='infrastructure.testrail.dispatcher', level=logging.WARNING,
            pathname=__file__, lineno=1, msg='failed', args=(), exc_info=None
        )
        record.method = 'POST'
        record.address = '/api/v2/update_case/503'
        record.status = 400
        record.detail = None

        data = json.loads(StructuredFormatter().format(record))

        assert data['request'] == {
            'method': 'POST', 'address': '/api/v2/update_case/503', 'status': 400
        }
        assert 'method' not in data

    def test_no_request_key_without_request_fields(self):
        record = logging.LogRecord(
            name='core', level=logging.INFO, pathname=__file__, lineno=1,
            msg='x', args=(), exc_info=None
        )

        data = json.loads(StructuredFormatter().format(record))

        assert 'request' not in data
        assert set(data) == {'timestamp', 'level', 'logger', 'event'}


class TestDispatcherLogRecords:
    """Test the request context the dispatcher attaches to its records."""

    def test_failure_record_carries_request_fields(self, testrail_config, transport, caplog):
        error = TestRailHttpError(400, 'Bad Request', detail='Field :title is too long.')
        transport.fail(error)
        dispatcher = RequestDispatcher(testrail_config, transport)

        with caplog.at_level(logging.WARNING, logger='infrastructure.testrail.dispatcher'):
            dispatcher.dispatch('/api/v2/update_case/503', RequestType.POST, single(Case), {'title': 't'})

        record = caplog.records[-1]
        assert record.method == 'POST'
        assert record.address == '/api/v2/update_case/503'
        assert record.status == 400
        assert record.detail == 'Field :title is too long.'
        assert json.loads(StructuredFormatter().format(record))['request']['status'] == 400


class TestConfigureLogging:
    """Test package logger setup."""

    def test_json_output(self, restore_loggers):
        stream = io.StringIO()
        configure_logging('DEBUG', fmt='json', stream=stream)

        logging.getLogger('infrastructure.testrail').debug('Sending request')

        line = stream.getvalue().strip().splitlines()[-1]
        assert json.loads(line)['event'] == 'Sending request'

    def test_text_output_respects_level(self, restore_loggers):
        stream = io.StringIO()
        configure_logging(logging.WARNING, stream=stream)

        logging.getLogger('core.services').info('hidden')
        logging.getLogger('core.services').warning('shown')

        output = stream.getvalue()
        assert 'hidden' not in output
        assert 'WARNING core.services: shown' in output

    def test_unknown_level(self, restore_loggers):
        with pytest.raises(ValueError):
            configure_logging('LOUD')

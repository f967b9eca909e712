import logging

from geodesolve.utils.logging import LOGGER, log_level


def test_logger():
    assert LOGGER.name == 'geodesolve'
    assert LOGGER.level == logging.WARNING
    assert any(isinstance(h, logging.StreamHandler) for h in LOGGER.handlers)


def test_child_loggers_propagate(caplog):
    logging.getLogger('geodesolve.geodesic.Geodesic').warning('test')
    assert 'test' in caplog.text


def test_log_level(caplog):
    child = logging.getLogger('geodesolve.geodesic.Geodesic')
    child.debug('hidden')

    with log_level(logging.DEBUG) as logger:
        assert logger is LOGGER
        assert LOGGER.level == logging.DEBUG
        child.debug('shown')

    assert LOGGER.level == logging.WARNING
    assert 'shown' in caplog.text
    assert 'hidden' not in caplog.text

    with log_level('ERROR'):
        assert LOGGER.level == logging.ERROR
    assert LOGGER.level == logging.WARNING

# third-party
from loguru import logger

# local
from casework.logging import LoggingMixin, disabled, enabled
from casework.string import tokenize


def test_silent_by_default():
    captured = []
    sink = logger.add(captured.append, level='DEBUG')
    try:
        tokenize('ok hello~world')
    finally:
        logger.remove(sink)

    assert captured == []


def test_disabled(messages):
    with disabled('casework'):
        tokenize('ok hello~world')
    assert messages == []

    # re-enabled on exit
    tokenize('ok hello~world')
    assert len(messages) == 1


def test_enabled_restores():
    captured = []
    sink = logger.add(captured.append, level='DEBUG')
    try:
        with enabled('casework'):
            tokenize('ok hello~world')
        tokenize('ok hello~world')
    finally:
        logger.remove(sink)

    assert len(captured) == 1


class Greeter(LoggingMixin):
    def greet(self):
        self.logger.info('hello')


def test_logging_mixin_names_class():
    records = []
    sink = logger.add(lambda msg: records.append(msg.record), level='INFO')
    try:
        Greeter().greet()
    finally:
        logger.remove(sink)

    assert records[-1]['function'] == 'Greeter.greet'

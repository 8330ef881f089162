"""Logging control for kvdict.

Loggers live under the ``kvdict`` namespace, one per module and one per
class that is decorated with :func:`class_logger`; for :class:`Dictionary`
that is ``kvdict.types.Dictionary.Dictionary``.

The ``echo`` flag of a :class:`Dictionary` applies to that instance only.
An echoing instance wraps the class logger in an :class:`InstanceLogger`
that filters on its own level, so turning echo on or off never changes the
level of the shared class logger nor of any other instance::

    d = Dictionary(echo="debug")   # this instance logs at DEBUG
    Dictionary()                   # unaffected, follows "kvdict" config

"""

import logging
import sys

rootlogger = logging.getLogger("kvdict")
if rootlogger.level == logging.NOTSET:
    rootlogger.setLevel(logging.WARN)


def _add_default_handler(logger):
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
    logger.addHandler(handler)


def _qualified_name(cls):
    return "%s.%s" % (cls.__module__, cls.__name__)


def class_logger(cls):
    cls.logger = logging.getLogger(_qualified_name(cls))
    return cls


class Identified:
    logger = None

    def _should_log_debug(self):
        return self.logger.isEnabledFor(logging.DEBUG)

    def _should_log_info(self):
        return self.logger.isEnabledFor(logging.INFO)


class InstanceLogger:
    """Logger front end holding an instance's own echo level.

    Records are emitted through the class logger, so handlers and
    propagation are shared; only the enabled check is per instance.
    """

    _echo_map = {
        None: logging.NOTSET,
        False: logging.NOTSET,
        True: logging.INFO,
        "debug": logging.DEBUG,
    }

    def __init__(self, echo, name):
        self.echo = echo
        self.logger = logging.getLogger(name)

        # stdout output unless someone already configured the namespace
        if self._echo_map[echo] <= logging.INFO and not self.logger.handlers:
            _add_default_handler(self.logger)

    @property
    def name(self):
        return self.logger.name

    def debug(self, msg, *args, **kwargs):
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        self.log(logging.WARNING, msg, *args, **kwargs)

    def log(self, level, msg, *args, **kwargs):
        if self.isEnabledFor(level):
            self.logger._log(level, msg, args, **kwargs)

    def isEnabledFor(self, level):
        if self.logger.manager.disable >= level:
            return False
        return level >= self.getEffectiveLevel()

    def getEffectiveLevel(self):
        level = self._echo_map[self.echo]
        if level == logging.NOTSET:
            level = self.logger.getEffectiveLevel()
        return level


def instance_logger(instance, echoflag=None):
    """Give ``instance`` a logger honouring ``echoflag``.

    ``None`` and ``False`` leave the instance on the plain class logger.
    """
    if echoflag not in InstanceLogger._echo_map:
        raise ValueError("echo must be one of None, False, True or 'debug'")

    name = _qualified_name(instance.__class__)
    if echoflag in (False, None):
        logger = logging.getLogger(name)
    else:
        logger = InstanceLogger(echoflag, name)

    instance.logger = logger
    return logger


class echo_property:
    __doc__ = """\
    When ``True``, enable log output for this element.

    ``True`` logs at ``logging.INFO`` and the string ``"debug"`` at
    ``logging.DEBUG``; ``False`` falls back to whatever the ``kvdict``
    logging configuration says.
    """

    def __get__(self, instance, owner):
        if instance is None:
            return self
        if instance._should_log_debug():
            return "debug"
        return instance._should_log_info()

    def __set__(self, instance, value):
        instance_logger(instance, echoflag=value)

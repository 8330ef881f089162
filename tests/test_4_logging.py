# Import necessary modules
import gc
import logging

import pytest

from kvdict import Dictionary, dumps, loads

DICTIONARY_LOGGER = "kvdict.types.Dictionary.Dictionary"


def dictionary_messages(caplog):
    return [r.getMessage() for r in caplog.records if r.name == DICTIONARY_LOGGER]


def test_echo_defaults_to_off():
    d = Dictionary()

    assert d.echo is False
    assert d.logger.name == DICTIONARY_LOGGER


def test_echo_debug_logs_mutations(caplog):
    d = Dictionary(echo="debug")
    assert d.echo == "debug"

    with caplog.at_level(logging.DEBUG):
        d.put("a", 1)
        d.remove("a")
        d.remove("missing")
        d.put("b", 2)
        d.clear()

    assert dictionary_messages(caplog) == [
        "put 'a'",
        "remove 'a'",
        "put 'b'",
        "clear (1 entries)",
    ]


def test_echo_can_be_switched(caplog):
    d = Dictionary()
    d.echo = True
    assert d.echo is True

    d.echo = "debug"
    assert d.echo == "debug"

    d.echo = False
    assert d.echo is False

    with caplog.at_level(logging.DEBUG):
        d.put("a", 1)
    assert dictionary_messages(caplog) == []


def test_unknown_echo_value_is_rejected():
    with pytest.raises(ValueError):
        Dictionary(echo="verbose")


def test_echo_does_not_leak_to_later_instances(caplog):
    # Freed addresses get reused; a new instance must not inherit echo
    loud = Dictionary(echo="debug")
    del loud
    gc.collect()

    with caplog.at_level(logging.DEBUG):
        for i in range(200):
            d = Dictionary()
            assert d.echo is False
            d.put("quiet-%d" % i, i)

    assert dictionary_messages(caplog) == []


def test_echo_is_independent_between_live_instances(caplog):
    loud = Dictionary(echo="debug")
    quiet = [Dictionary(echo=False) for _ in range(50)]

    assert loud.echo == "debug"
    assert all(d.echo is False for d in quiet)

    with caplog.at_level(logging.DEBUG):
        for d in quiet:
            d.put("quiet", 1)
        loud.put("loud", 1)

    assert dictionary_messages(caplog) == ["put 'loud'"]


def test_instances_share_one_logger():
    Dictionary(echo=True)
    before = len(logging.Logger.manager.loggerDict)

    dictionaries = [Dictionary(echo=flag) for flag in (None, False, True, "debug") * 50]

    assert len(logging.Logger.manager.loggerDict) == before
    assert {d.logger.name for d in dictionaries} == {DICTIONARY_LOGGER}


def test_codec_logs_at_debug(caplog):
    d = Dictionary()
    d.put("a", 1)

    with caplog.at_level(logging.DEBUG, logger="kvdict.codec"):
        loads(dumps(d))

    messages = [r.getMessage() for r in caplog.records if r.name == "kvdict.codec"]
    assert len(messages) == 2
    assert messages[0].startswith("encoded 1 entries")
    assert messages[1].startswith("decoded 1 entries")

import logging

import pytest

from seqfind.utils import ensure_predicate, ensure_sized, get_logger


def test_ensure_predicate_returns_callable():
    assert ensure_predicate(bool) is bool


def test_ensure_predicate_rejects_values():
    with pytest.raises(TypeError, match="int"):
        ensure_predicate(3)


def test_ensure_sized():
    assert ensure_sized([1, 2, 3]) == 3
    with pytest.raises(TypeError, match="token"):
        ensure_sized(iter([1]), "token")


def test_get_logger_hierarchy():
    logger = get_logger("searcher")
    assert logger.name == "seqfind.searcher"
    assert get_logger().name == "seqfind"
    assert logger.parent is get_logger()


def test_only_package_logger_has_handler():
    component = get_logger("searcher")
    get_logger("searcher")
    assert component.handlers == []
    assert component.level == logging.NOTSET
    assert component.propagate
    assert len(get_logger().handlers) == 1


def test_package_level_reaches_components(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="seqfind"):
        get_logger("searcher").debug("component record")
    assert any(rec.name == "seqfind.searcher" for rec in caplog.records)

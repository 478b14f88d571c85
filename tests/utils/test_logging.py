import re

from geoanchor.utils.logging import LOGGER, warn_once


def test_warn_once(caplog, monkeypatch):
    monkeypatch.setattr('geoanchor.utils.logging._WARNINGS', set())

    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_warn_once_args(caplog, monkeypatch):
    warned = set()
    monkeypatch.setattr('geoanchor.utils.logging._WARNINGS', warned)

    # Deduplicated on the template, not the formatted text
    warn_once('value %s', 'one')
    warn_once('value %s', 'two')
    warn_once('value %s', 'one')
    assert len(re.findall('value one', caplog.text)) == 1
    assert 'value two' not in caplog.text
    assert warned == {'value %s'}

    warn_once('other %s', 'three')
    assert 'other three' in caplog.text


def test_logger():
    assert LOGGER.name == 'geoanchor'


import re

import gridrefs.utils.logging
from gridrefs.utils.logging import LOGGER, get_logger, warn_once


def test_warn_once(caplog, monkeypatch):
    monkeypatch.setattr(gridrefs.utils.logging, '_WARNINGS', set())

    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1

    warn_once('another test')
    assert len(re.findall('another test', caplog.text)) == 1
    assert caplog.records[-1].name == 'gridrefs'


def test_get_logger():
    assert get_logger('gridrefs.converters').name == 'gridrefs.converters'
    assert get_logger('converters') is get_logger('gridrefs.converters')
    assert get_logger('zones').parent is LOGGER

# tests/conftest.py
import os
import sys

import pytest

# Converter modules live in the repository root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from glyph_table import HISAB_TABLE, PREETI_TABLE  # noqa: E402
from legacy_converter import hisab_converter, preeti_converter  # noqa: E402


@pytest.fixture
def preeti_table():
    return PREETI_TABLE


@pytest.fixture
def hisab_table():
    return HISAB_TABLE


@pytest.fixture
def preeti():
    return preeti_converter


@pytest.fixture
def hisab():
    return hisab_converter


@pytest.fixture
def service():
    from unicode_converter import UnicodeConverterService
    return UnicodeConverterService('preeti', 'unicode', max_input_length=1000)


@pytest.fixture
def client(monkeypatch, service):
    import unicode_converter
    monkeypatch.setattr(unicode_converter, 'service', service)
    unicode_converter.app.config['TESTING'] = True
    return unicode_converter.app.test_client()

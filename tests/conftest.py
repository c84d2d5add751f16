"""
Test configuration and shared fixtures for pytest
"""
import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_records():
    """Two consistent table rows"""
    return [
        {"Name": "Zaka", "Age": 50, "Country": "Spain"},
        {"Name": "Someone", "Age": 25, "Country": "Poland"},
    ]


@pytest.fixture
def colored_records():
    """Table rows whose values carry terminal color codes"""
    return [
        {"Status": "\x1b[32mok\x1b[0m", "Task": "build"},
        {"Status": "\x1b[31mfailed\x1b[0m", "Task": "test"},
    ]


@pytest.fixture
def abnormal_strings():
    """Mix of blank, missing and messy strings"""
    return ["", None, "   hÉlLo    ", "", "wöRld", "  123_abc ", "   "]

"""Shared fixtures for the getallfiles test suite."""

import pytest

from getallfiles.testing import build_tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests excluded by run_tests.py")


@pytest.fixture
def sample_layout():
    """Layout used across tests.

    Structure:
        root
        ├── a.txt
        └── sub
            ├── b.txt
            └── c.txt
    """
    return {
        'a.txt': 'a',
        'sub': {
            'b.txt': 'b',
            'c.txt': 'c',
        },
    }


@pytest.fixture
def nested_layout():
    """Deeper layout with siblings at several levels.

    Structure:
        root
        ├── top.txt
        ├── dir1
        │   ├── file1.txt
        │   └── file2.txt
        ├── dir2
        │   ├── subdir
        │   │   └── deep.txt
        │   └── file3.txt
        └── empty
    """
    return {
        'top.txt': None,
        'dir1': {'file1.txt': None, 'file2.txt': None},
        'dir2': {'subdir': {'deep.txt': None}, 'file3.txt': None},
        'empty': {},
    }


@pytest.fixture
def disk_tree(tmp_path, monkeypatch, sample_layout):
    """Create ``root`` from sample_layout in a temp dir and chdir into it.

    Tests can then use the relative root ``'root'`` exactly as given.
    """
    build_tree(tmp_path / 'root', sample_layout)
    monkeypatch.chdir(tmp_path)
    return tmp_path

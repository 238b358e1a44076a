# File: tests/conftest.py

import os
import sys
import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())


def write_file(path, size_bytes: int):
    """Creates a file of exactly size_bytes, making parent folders as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size_bytes)
    return path


@pytest.fixture
def make_file():
    return write_file


@pytest.fixture
def sample_tree(tmp_path):
    """
    root/
      a.txt          500 B
      notes.MD      3000 B
      sub/
        b.txt       2000 B
        foo.log     4096 B
        deep/
          myfoo.TXT 1500 B
          empty.txt    0 B
    """
    root = tmp_path / "root"
    write_file(root / "a.txt", 500)
    write_file(root / "notes.MD", 3000)
    write_file(root / "sub" / "b.txt", 2000)
    write_file(root / "sub" / "foo.log", 4096)
    write_file(root / "sub" / "deep" / "myfoo.TXT", 1500)
    write_file(root / "sub" / "deep" / "empty.txt", 0)
    return root

import os.path
from tempfile import TemporaryDirectory

try:
    from typing import Callable, Iterator
except ImportError:
    pass

import pytest


@pytest.fixture()
def write_changes_file():
    # type: () -> Iterator[Callable[[str, str], str]]
    # Writes a .changes file under a throw-away directory and returns its
    # path.  The file name matters: package, version and architecture are
    # taken from it.
    with TemporaryDirectory() as tmpdir:
        def write(filename, contents):
            # type: (str, str) -> str
            path = os.path.join(tmpdir, filename)
            with open(path, 'w', encoding='UTF-8') as f:
                f.write(contents)
            return path
        yield write

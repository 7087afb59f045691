import pytest

from wavrename.types import DirectoryEntry


@pytest.fixture
def make_files(tmp_path):
    """Create files under tmp_path; str values are written as Shift_JIS."""

    def _make(files):
        for name, content in files.items():
            data = content.encode("cp932") if isinstance(content, str) else content
            (tmp_path / name).write_bytes(data)
        return tmp_path

    return _make


def entry_for(path):
    return DirectoryEntry(path=str(path), name=path.name)

"""Test configuration and fixtures for treecopy."""

import os

import pytest


def make_writable(root):
    """Give every directory under root an owner-writable mode so the tree can be removed."""
    for dirpath, dirnames, _ in os.walk(root):
        for name in dirnames:
            path = os.path.join(dirpath, name)
            if not os.path.islink(path):
                os.chmod(path, 0o755)


@pytest.fixture
def sample_tree(tmp_path):
    """Create the tree a/b/file.txt (mode 0644, content "hi") with a/link -> /etc/hostname."""
    root = tmp_path / "a"
    (root / "b").mkdir(parents=True)
    file_path = root / "b" / "file.txt"
    file_path.write_text("hi")
    os.chmod(file_path, 0o644)
    os.symlink("/etc/hostname", root / "link")
    return root


@pytest.fixture
def writable_cleanup(tmp_path):
    """Restore writable directory modes under tmp_path after the test."""
    yield tmp_path
    make_writable(tmp_path)

import os

import pytest

from livepreview.core.errors import AccessError, MissingInput, NotADirectory
from livepreview.core.paths import resolve_directory


@pytest.mark.parametrize("raw", ["", None])
def test_missing_input(raw):
    with pytest.raises(MissingInput):
        resolve_directory(raw)


def test_existing_directory_is_returned_absolute(site):
    assert resolve_directory(str(site)) == str(site)


def test_dot_segments_are_collapsed(site):
    raw = os.path.join(str(site), "docs", "..")
    assert resolve_directory(raw) == str(site)


def test_relative_path_resolves_against_working_directory(site, monkeypatch):
    monkeypatch.chdir(site.parent)
    assert resolve_directory("site") == str(site)


def test_missing_path(tmp_path):
    with pytest.raises(AccessError):
        resolve_directory(str(tmp_path / "nope"))


def test_nul_byte_is_an_access_error():
    with pytest.raises(AccessError):
        resolve_directory("/tmp/bad\x00path")


def test_regular_file_is_not_a_directory(site):
    with pytest.raises(NotADirectory):
        resolve_directory(str(site / "app.js"))


def test_does_not_create_anything(tmp_path):
    target = tmp_path / "later"
    with pytest.raises(AccessError):
        resolve_directory(str(target))
    assert not target.exists()

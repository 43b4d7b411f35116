"""Tests for the per-run license match cache."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from licenseaudit.match_cache import MatchCache
from licenseaudit.match_templates import MatchResult, make_word_set
from licenseaudit.template import Template


@pytest.fixture
def templates() -> list[Template]:
    """Fixture providing a one-template catalog."""
    return [
        Template(
            title="Tiny", nickname="", spdx_id="", words=make_word_set("alpha beta")
        )
    ]


def test_same_path_scored_once(tmp_path: Path, templates: list[Template]) -> None:
    """Verify that the comparison runs at most once per absolute path."""
    license_file = tmp_path / "LICENSE"
    license_file.write_text("alpha beta")
    matcher = MagicMock(return_value=MatchResult(score=1.0, template=templates[0]))
    cache = MatchCache(templates, matcher=matcher)

    first = cache.match_file(license_file)
    second = cache.match_file(tmp_path / "sub" / ".." / "LICENSE")
    third = cache.match_file(license_file)

    matcher.assert_called_once_with(b"alpha beta", templates)
    assert first == third
    assert second == first
    assert cache.hits == 2  # noqa: PLR2004
    assert cache.misses == 1


def test_hit_does_not_reread_file(tmp_path: Path, templates: list[Template]) -> None:
    """Verify that a cache hit does not touch the filesystem."""
    license_file = tmp_path / "LICENSE"
    license_file.write_text("alpha beta")
    cache = MatchCache(templates)
    first = cache.match_file(license_file)

    license_file.unlink()
    assert cache.match_file(license_file) == first
    assert len(cache) == 1


def test_distinct_paths_scored_separately(
    tmp_path: Path, templates: list[Template]
) -> None:
    """Verify that different files get their own results."""
    (tmp_path / "A").write_text("alpha beta")
    (tmp_path / "B").write_text("gamma")
    cache = MatchCache(templates)
    assert cache.match_file(tmp_path / "A").score == 1.0
    assert cache.match_file(tmp_path / "B").score == 0.0
    assert len(cache) == 2  # noqa: PLR2004


def test_relative_and_absolute_paths_share_entry(
    tmp_path: Path, templates: list[Template], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify that the key is the absolute path."""
    (tmp_path / "LICENSE").write_text("alpha beta")
    monkeypatch.chdir(tmp_path)
    cache = MatchCache(templates)
    cache.match_file("LICENSE")
    cache.match_file(tmp_path / "LICENSE")
    assert cache.hits == 1


def test_missing_file_propagates(tmp_path: Path, templates: list[Template]) -> None:
    """Verify that read errors are not cached or swallowed."""
    cache = MatchCache(templates)
    with pytest.raises(FileNotFoundError):
        cache.match_file(tmp_path / "LICENSE")
    assert len(cache) == 0

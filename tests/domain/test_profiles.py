"""Tests for profiles module."""

from pathlib import Path
from unittest.mock import patch

import pytest

from domain import profiles
from domain.models import ExportSettings
from domain.profiles import (
    _user_profiles_dir,
    delete_profile,
    list_profiles,
    load_profile,
    profile_path,
    save_profile,
)


@pytest.fixture
def profiles_dir(tmp_path):
    with patch.object(profiles, '_user_profiles_dir', return_value=tmp_path / 'profiles'):
        yield tmp_path / 'profiles'


class TestUserProfilesDir:
    """Tests for _user_profiles_dir function."""

    def test_returns_path(self):
        assert isinstance(_user_profiles_dir(), Path)

    def test_appdata_fallback(self, tmp_path, monkeypatch):
        """Without local configs the APPDATA directory is used."""
        monkeypatch.setenv('APPDATA', str(tmp_path))
        with patch.object(Path, 'exists', return_value=False):
            result = _user_profiles_dir()
        assert result == tmp_path / 'GZDMapper' / 'configs' / 'profiles'


class TestProfilesRoundTrip:
    """Tests for save/load/list/delete of profiles."""

    def test_save_and_load(self, profiles_dir):
        settings = ExportSettings(indent=4, include_polar=False, zones=['33V', 'A'])
        path = save_profile('europe', settings)
        assert path == profiles_dir / 'europe.toml'
        assert load_profile('europe') == settings

    def test_load_by_path(self, profiles_dir, tmp_path):
        toml_file = tmp_path / 'custom.toml'
        toml_file.write_text('indent = 0\nzones = ["31X"]\n', encoding='utf-8')
        settings = load_profile(str(toml_file))
        assert settings.indent == 0
        assert settings.zones == ['31X']

    def test_load_missing(self, profiles_dir):
        with pytest.raises(FileNotFoundError):
            load_profile('nope')

    def test_load_invalid(self, profiles_dir):
        profile_path('bad').write_text('indent = 42\n', encoding='utf-8')
        with pytest.raises(ValueError):
            load_profile('bad')

    def test_list_profiles(self, profiles_dir):
        save_profile('b', ExportSettings())
        save_profile('a', ExportSettings())
        assert list_profiles() == ['a', 'b']

    def test_delete_profile(self, profiles_dir):
        save_profile('tmp', ExportSettings())
        delete_profile('tmp')
        assert list_profiles() == []

    def test_delete_missing_is_noop(self, profiles_dir):
        delete_profile('ghost')

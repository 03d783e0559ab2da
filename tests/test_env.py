"""Tests for tint_kit.core.env — .env loading, walk-up logic and Settings."""

import logging
import os
from pathlib import Path

import pytest
from tint_kit.core.env import Settings, _find_dotenv, _parse_dotenv, load_env, load_settings


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export TINT_KIT_OUTPUT=json\n')
        assert _parse_dotenv(f) == {'TINT_KIT_OUTPUT': 'json'}

    def test_no_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\n=orphan\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_value_with_equals(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('URL=a=b\n')
        assert _parse_dotenv(f) == {'URL': 'a=b'}


class TestFindDotenv:
    def test_finds_in_cwd(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert _find_dotenv(repo / 'src') is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / 'src').mkdir(parents=True)
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        (tmp_path / '.env').write_text('X=1\n')
        assert _find_dotenv(repo / 'src') is None

    def test_env_beside_git_is_found(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(tmp_path) == dotenv


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.env').write_text('TINT_KIT_OUTPUT=json\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TINT_KIT_OUTPUT') == 'json'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        os.environ['TINT_KIT_OUTPUT'] = 'text'
        (tmp_path / '.env').write_text('TINT_KIT_OUTPUT=json\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TINT_KIT_OUTPUT') == 'text'

    def test_explicit_env_file(self, tmp_path: Path) -> None:
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TINT_KIT_LOG_LEVEL=info\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ.get('TINT_KIT_LOG_LEVEL') == 'info'

    def test_explicit_file_keeps_existing(self, tmp_path: Path) -> None:
        os.environ['TINT_KIT_OUTPUT'] = 'text'
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TINT_KIT_OUTPUT=json\nTINT_KIT_LOG_LEVEL=debug\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ['TINT_KIT_OUTPUT'] == 'text'
        assert os.environ['TINT_KIT_LOG_LEVEL'] == 'debug'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestLoadSettings:
    @pytest.fixture(autouse=True)
    def _no_dotenv(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)

    def test_defaults(self) -> None:
        assert load_settings() == Settings()

    def test_from_environment(self) -> None:
        os.environ.update(
            {'TINT_KIT_OUTPUT': 'JSON', 'TINT_KIT_PRESERVE_ALPHA': 'yes', 'TINT_KIT_LOG_LEVEL': 'debug'}
        )
        settings = load_settings()
        assert settings.output == 'json'
        assert settings.preserve_alpha is True
        assert settings.log_level == logging.DEBUG

    def test_from_dotenv(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('TINT_KIT_PRESERVE_ALPHA=1\n')
        settings = load_settings()
        assert settings.preserve_alpha is True
        assert settings.env_path == dotenv

    def test_bad_values_fall_back(self) -> None:
        os.environ.update({'TINT_KIT_OUTPUT': 'yaml', 'TINT_KIT_PRESERVE_ALPHA': 'maybe', 'TINT_KIT_LOG_LEVEL': 'LOUD'})
        assert load_settings() == Settings()

"""Tests for hsl_colour.core.env — .env loading, walk-up logic and settings."""

import os
from pathlib import Path

import pytest
from hsl_colour.core.env import (
    DEFAULT_PRECISION,
    DEFAULT_SAMPLES,
    Settings,
    _find_dotenv,
    _parse_dotenv,
    load_env,
    load_settings,
)


class TestParseDotenv:
    def test_settings_file(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('HSL_TOOL_PRECISION=4\nHSL_TOOL_STRICT=1\n')
        assert _parse_dotenv(f) == {'HSL_TOOL_PRECISION': '4', 'HSL_TOOL_STRICT': '1'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('HSL_TOOL_STRICT="yes"\nHSL_TOOL_SAMPLES=\'100\'\n')
        assert _parse_dotenv(f) == {'HSL_TOOL_STRICT': 'yes', 'HSL_TOOL_SAMPLES': '100'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# precision for text output\n\nHSL_TOOL_PRECISION=3\n\n')
        assert _parse_dotenv(f) == {'HSL_TOOL_PRECISION': '3'}

    def test_line_without_equals_skipped(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('HSL_TOOL_STRICT\nHSL_TOOL_PRECISION=1\n')
        assert _parse_dotenv(f) == {'HSL_TOOL_PRECISION': '1'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    @pytest.mark.parametrize('git_is_dir', [True, False])
    def test_stops_at_git_boundary(self, tmp_path: Path, git_is_dir: bool) -> None:
        # .env sits above the repo root and must not be found
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        if git_is_dir:
            (repo / '.git').mkdir()
        else:
            (repo / '.git').write_text('gitdir: ../somewhere\n')
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_HSL_KEY', 'placeholder')
        monkeypatch.delenv('TEST_HSL_KEY')
        (tmp_path / '.env').write_text('TEST_HSL_KEY=from-file\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_HSL_KEY') == 'from-file'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_HSL_KEY2', 'original')
        (tmp_path / '.env').write_text('TEST_HSL_KEY2=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_HSL_KEY2') == 'original'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_HSL_KEY3', 'placeholder')
        monkeypatch.delenv('TEST_HSL_KEY3')
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TEST_HSL_KEY3=custom\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ.get('TEST_HSL_KEY3') == 'custom'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestLoadSettings:
    def test_defaults(self) -> None:
        assert load_settings({}) == Settings()
        assert Settings().precision == DEFAULT_PRECISION
        assert Settings().samples == DEFAULT_SAMPLES
        assert Settings().strict is False

    def test_reads_values(self) -> None:
        settings = load_settings({'HSL_TOOL_PRECISION': '4', 'HSL_TOOL_STRICT': 'true', 'HSL_TOOL_SAMPLES': '100'})
        assert settings == Settings(precision=4, strict=True, samples=100)

    @pytest.mark.parametrize('raw', ['1', 'true', 'YES', ' on '])
    def test_strict_truthy(self, raw: str) -> None:
        assert load_settings({'HSL_TOOL_STRICT': raw}).strict is True

    @pytest.mark.parametrize('raw', ['', '0', 'false', 'off', 'nope'])
    def test_strict_falsy(self, raw: str) -> None:
        assert load_settings({'HSL_TOOL_STRICT': raw}).strict is False

    @pytest.mark.parametrize('raw', ['abc', '-1', '2.5', ''])
    def test_bad_precision_falls_back(self, raw: str) -> None:
        assert load_settings({'HSL_TOOL_PRECISION': raw}).precision == DEFAULT_PRECISION

    def test_zero_precision_allowed(self) -> None:
        assert load_settings({'HSL_TOOL_PRECISION': '0'}).precision == 0

    def test_zero_samples_falls_back(self) -> None:
        assert load_settings({'HSL_TOOL_SAMPLES': '0'}).samples == DEFAULT_SAMPLES

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('HSL_TOOL_PRECISION', '5')
        assert load_settings().precision == 5

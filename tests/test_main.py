"""
Tests for the command line entry point.
"""

import shutil
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "app"))

import main

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "bars.yaml"
    shutil.copy(FIXTURES_DIR / "sample_config.yaml", path)
    return path


class TestMain:
    def test_lists_bars(self, config_path, capsys):
        assert main.main(["--config", str(config_path), "--windows", "2"]) == 0

        out = capsys.readouterr().out
        assert "List of bars:" in out
        assert 'Bar "input" created' in out
        assert "ticker (hidden)" in out
        assert "window 2 (#channel2)" in out

    def test_set_and_delete(self, config_path, capsys):
        code = main.main(["--config", str(config_path), "--delete", "title", "--set", "status.color_bg=red"])

        out = capsys.readouterr().out
        assert code == 0
        assert 'Bar "title" deleted' in out
        assert "  title:" not in out

    def test_bad_change_fails(self, config_path, capsys):
        assert main.main(["--config", str(config_path), "--set", "status.size=abc"]) == 1
        assert 'Invalid value "abc" for option "status.size"' in capsys.readouterr().out

    def test_save(self, config_path):
        assert main.main(["--config", str(config_path), "--save"]) == 0
        content = config_path.read_text()
        assert "input:" in content
        assert "nicklist:" in content

    def test_broken_config(self, tmp_path, capsys):
        path = tmp_path / "bars.yaml"
        path.write_text("bars: [\n")
        assert main.main(["--config", str(path)]) == 1
        assert "syntax error" in capsys.readouterr().out

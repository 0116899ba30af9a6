"""Tests for the html-uglify command line."""

import pytest

from html_uglify.cli import main
from html_uglify.config import ENV_WHITELIST

PAGE = '<style>.foo { color: red }</style><div class="foo bar" id="baz"></div>'


@pytest.fixture
def page(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV_WHITELIST, raising=False)
    path = tmp_path / "index.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


class TestMain:
    def test_rewrites_in_place(self, page, capsys):
        main([str(page)])
        out = page.read_text(encoding="utf-8")
        assert 'class="a b"' in out
        assert 'id="a"' in out
        assert "[UGLIFY] ids=1 classes=2" in capsys.readouterr().out

    def test_dry_run_writes_nothing(self, page, capsys):
        main([str(page), "--dry-run"])
        assert page.read_text(encoding="utf-8") == PAGE
        assert capsys.readouterr().out.strip() == "[UGLIFY] ids=1 classes=2 (dry-run)"

    def test_backup(self, page):
        main([str(page), "--backup"])
        bak = page.with_name("index.html.uglify.bak")
        assert bak.read_text(encoding="utf-8") == PAGE

    def test_output_path(self, page, tmp_path):
        target = tmp_path / "out.html"
        main([str(page), "--output", str(target)])
        assert page.read_text(encoding="utf-8") == PAGE
        assert 'class="a b"' in target.read_text(encoding="utf-8")

    def test_whitelist_flag(self, page):
        main([str(page), "--whitelist", "#baz", "--whitelist", ".bar"])
        out = page.read_text(encoding="utf-8")
        assert 'class="a bar"' in out
        assert 'id="baz"' in out

    def test_whitelist_from_env(self, page, monkeypatch):
        monkeypatch.setenv(ENV_WHITELIST, "#baz")
        main([str(page)])
        assert 'id="baz"' in page.read_text(encoding="utf-8")


class TestErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "nope.html")])

    def test_bad_whitelist(self, page):
        with pytest.raises(SystemExit):
            main([str(page), "--whitelist", "baz"])
        assert page.read_text(encoding="utf-8") == PAGE

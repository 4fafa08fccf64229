"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from vault_publisher.cli import app
from vault_publisher.config import Settings, load_settings, save_settings

runner = CliRunner()


@pytest.fixture
def vault(tmp_path):
    root = tmp_path / "vault"
    root.mkdir()
    (root / "img.png").write_bytes(b"x" * 10)
    (root / "Hello World.md").write_text(
        "---\ntitle: Hello\ndate: 2024-01-01\ntags: [#publish]\n---\n![[img.png]]\n", encoding="utf-8"
    )
    (root / "Private.md").write_text("---\ntags: [#journal]\n---\nSecret\n", encoding="utf-8")
    (root / "START.md").write_text("[[Hello World]]\n", encoding="utf-8")
    return root


@pytest.fixture
def site(tmp_path):
    content_dir = tmp_path / "site" / "content" / "posts"
    static_dir = tmp_path / "site" / "static"
    content_dir.mkdir(parents=True)
    static_dir.mkdir(parents=True)
    return content_dir, static_dir


@pytest.fixture
def config(tmp_path, site):
    content_dir, static_dir = site
    path = tmp_path / "settings.yaml"
    save_settings(
        Settings(
            content_dir=str(content_dir),
            static_dir=str(static_dir),
            start_page_export_path=str(tmp_path / "start.html"),
            publish_endpoint="https://ingest.example.invalid/notes",
        ),
        path,
    )
    return path


def invoke(config, vault, *args):
    return runner.invoke(app, ["--config", str(config), "--vault", str(vault), *args])


class TestExportCommand:
    """Tests for the export command."""

    def test_export(self, config, vault, site):
        content_dir, static_dir = site

        result = invoke(config, vault, "export", "Hello World")

        assert result.exit_code == 0, result.output
        post = (content_dir / "hello-world.md").read_text(encoding="utf-8")
        assert '{{<figure src="/img.png" caption="">}}' in post
        assert (static_dir / "img.png").exists()

    def test_export_skipped(self, config, vault, site):
        content_dir, _ = site

        result = invoke(config, vault, "export", "Private")

        assert result.exit_code == 0
        assert "Skipped" in result.output
        assert list(content_dir.iterdir()) == []

    def test_missing_setting(self, tmp_path, vault):
        result = invoke(tmp_path / "empty.yaml", vault, "export", "Hello World")

        assert result.exit_code == 1
        assert "content_dir" in result.output

    def test_note_not_found(self, config, vault):
        result = invoke(config, vault, "export", "Nope")

        assert result.exit_code == 1
        assert "Note not found" in result.output


class TestPublishCommand:
    """Tests for the publish command."""

    def test_publish_skipped_without_tag(self, config, vault):
        result = invoke(config, vault, "publish", "Private")

        assert result.exit_code == 0
        assert "Skipped" in result.output


class TestSnapshotCommand:
    """Tests for the snapshot command."""

    def test_snapshot(self, config, vault, tmp_path):
        result = invoke(config, vault, "snapshot", "START")

        assert result.exit_code == 0, result.output
        html = (tmp_path / "start.html").read_text(encoding="utf-8")
        assert "obsidian://open?vault=vault&amp;file=Hello%20World" in html

    def test_snapshot_uses_configured_vault_name(self, config, vault, tmp_path):
        invoke(config, vault, "config", "set", "vault_name", "personal")

        invoke(config, vault, "snapshot", "START")

        html = (tmp_path / "start.html").read_text(encoding="utf-8")
        assert "vault=personal&amp;" in html

    def test_snapshot_wrong_note(self, config, vault, tmp_path):
        result = invoke(config, vault, "snapshot", "Private")

        assert result.exit_code == 0
        assert "only works on the START page" in result.output
        assert not (tmp_path / "start.html").exists()


class TestConfigCommands:
    """Tests for the config commands."""

    def test_set_persists(self, config, vault):
        result = invoke(config, vault, "config", "set", "export_requires_publish_tag", "false")

        assert result.exit_code == 0
        assert load_settings(config).export_requires_publish_tag is False

    def test_set_unknown(self, config, vault):
        result = invoke(config, vault, "config", "set", "nope", "1")

        assert result.exit_code == 1
        assert "Unknown setting" in result.output

    def test_show(self, config, vault):
        result = invoke(config, vault, "config", "show")

        assert result.exit_code == 0
        assert "start_page_name" in result.output

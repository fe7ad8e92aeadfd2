"""End-to-end tests for the obsidian-index command line."""

import pytest

from conftest import snapshot, write_files
from obsidian_index.cli import build_parser, main, split_excludes


def test_split_excludes():
    assert split_excludes(["templates,archive", "attachments"]) == [
        "templates",
        "archive",
        "attachments",
    ]
    assert split_excludes(None) == []


def test_version(capsys):
    assert main(["--version"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("obsidian-index version ")
    assert "Git commit:" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: obsidian-index" in capsys.readouterr().out


def test_init_flags_parse():
    args = build_parser().parse_args(
        ["init", "-d", "/v", "-v", "--dry-run", "--backup", "--exclude", "a,b", "--exclude", "c"]
    )
    assert args.dir == "/v"
    assert args.verbose and args.dry_run and args.backup
    assert args.exclude == ["a,b", "c"]


def test_unknown_flag_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["init", "--nope"])
    assert excinfo.value.code == 2


class TestInit:
    def test_indexes_vault(self, vault, capsys):
        write_files(vault, {"notes/file1.md": "", "notes/subfolder/file3.md": ""})

        assert main(["init", "--dir", str(vault)]) == 0

        assert (vault / "notes/subfolder/subfolder.md").exists()
        assert (vault / "notes/notes.md").exists()
        assert (vault / "index.md").exists()
        assert f"Successfully indexed vault: {vault}" in capsys.readouterr().out

    def test_defaults_to_current_directory(self, vault, monkeypatch):
        write_files(vault, {"a.md": ""})
        monkeypatch.chdir(vault)

        assert main(["init"]) == 0

        assert (vault / "index.md").read_text(encoding="utf-8") == "[[a.md]]\n"

    def test_dry_run(self, vault, capsys):
        write_files(vault, {"notes/file1.md": ""})
        before = snapshot(vault)

        assert main(["init", "-d", str(vault), "--dry-run"]) == 0

        assert snapshot(vault) == before
        out = capsys.readouterr().out
        assert "DRY RUN" in out
        assert f"Dry run completed for vault: {vault}" in out

    def test_exclude(self, vault):
        write_files(vault, {"templates/t.md": "", "attachments/x.png": "", "notes/a.md": ""})

        assert main(["init", "-d", str(vault), "--exclude", "templates,attachments"]) == 0

        assert (vault / "index.md").read_text(encoding="utf-8") == "[[notes/notes.md]]\n"

    def test_verbose_banner(self, vault, capsys):
        write_files(vault, {"a.md": ""})

        main(["init", "-d", str(vault), "-v", "--backup", "--exclude", "tmp"])

        out = capsys.readouterr().out
        assert f"Starting indexation of vault: {vault}" in out
        assert "BACKUP MODE" in out
        assert "Excluding directories: tmp" in out

    def test_missing_vault_fails(self, tmp_path, capsys):
        assert main(["init", "-d", str(tmp_path / "missing")]) == 1
        assert "vault directory does not exist" in capsys.readouterr().err

    def test_blank_exclude_fails(self, vault, capsys):
        assert main(["init", "-d", str(vault), "--exclude", "a, ,b"]) == 1
        assert "exclude directory cannot be empty" in capsys.readouterr().err

    def test_indexation_failure_exit_code(self, vault, capsys, monkeypatch):
        write_files(vault, {"a.md": ""})
        monkeypatch.setattr(
            "obsidian_index.components.writer.os.replace",
            _raise_oserror,
        )

        assert main(["init", "-d", str(vault)]) == 1
        assert "indexation failed" in capsys.readouterr().err


def _raise_oserror(*args, **kwargs):
    raise OSError(30, "Read-only file system")

"""Tests for the slayd command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from slayd.__main__ import main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


class TestInitCommand:
    def test_init_default_name(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["init"]) == 0

        assert (tmp_path / "presentation.yaml").exists()
        assert "Created presentation.yaml" in capsys.readouterr().out

    def test_new_alias(self, tmp_path: Path) -> None:
        assert main(["new", "talk.yaml"]) == 0
        assert (tmp_path / "talk.yaml").exists()

    def test_init_existing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "talk.yaml").write_text("keep", encoding="utf-8")

        assert main(["init", "talk.yaml"]) == 1
        assert "already exists" in capsys.readouterr().err


class TestBuildCommand:
    def test_build_file(self, tmp_path: Path, sample_yaml: str) -> None:
        (tmp_path / "deck.yaml").write_text(sample_yaml, encoding="utf-8")

        assert main(["build", "deck.yaml"]) == 0
        assert (tmp_path / "deck.html").exists()

    def test_build_with_output(self, tmp_path: Path, sample_yaml: str) -> None:
        (tmp_path / "deck.yaml").write_text(sample_yaml, encoding="utf-8")

        assert main(["build", "deck.yaml", "site.html"]) == 0
        assert (tmp_path / "site.html").exists()

    def test_shorthand(self, tmp_path: Path, sample_yaml: str, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "deck.yaml").write_text(sample_yaml, encoding="utf-8")

        assert main(["deck.yaml"]) == 0
        assert (tmp_path / "deck.html").exists()
        assert "3 slides" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "argv",
        [
            ["--log-level", "DEBUG", "deck.yaml"],
            ["deck.yaml", "--log-level", "DEBUG"],
            ["--log-level=DEBUG", "deck.yaml"],
            ["build", "deck.yaml", "--log-level", "DEBUG"],
            ["--log-level", "DEBUG", "build", "deck.yaml"],
        ],
    )
    def test_log_level_with_shorthand(self, tmp_path: Path, sample_yaml: str, argv: list[str]) -> None:
        (tmp_path / "deck.yaml").write_text(sample_yaml, encoding="utf-8")

        assert main(argv) == 0
        assert (tmp_path / "deck.html").exists()

    def test_missing_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["absent.yaml"]) == 1
        assert "Input file not found" in capsys.readouterr().err

    def test_invalid_document(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "bad.yaml").write_text("slides: []\n", encoding="utf-8")

        assert main(["build", "bad.yaml"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_build_all(self, tmp_path: Path, sample_yaml: str, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "one.yaml").write_text(sample_yaml, encoding="utf-8")
        (tmp_path / "two.yml").write_text(sample_yaml, encoding="utf-8")

        assert main(["build"]) == 0
        assert (tmp_path / "one.html").exists()
        assert (tmp_path / "two.html").exists()
        assert "Successfully built: 2" in capsys.readouterr().out

    def test_build_all_with_failure(self, tmp_path: Path, sample_yaml: str) -> None:
        (tmp_path / "one.yaml").write_text(sample_yaml, encoding="utf-8")
        (tmp_path / "bad.yaml").write_text("- not a mapping\n", encoding="utf-8")

        assert main(["build"]) == 1
        assert (tmp_path / "one.html").exists()

    def test_build_all_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["build"]) == 0
        assert "No YAML files found" in capsys.readouterr().out


class TestHelp:
    def test_no_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 1
        assert "usage: slayd" in capsys.readouterr().out

    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])

        assert exc_info.value.code == 0

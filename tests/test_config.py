"""Tests for config file loading."""

from __future__ import annotations

from pathlib import Path

from dirservice import DEFAULT_EXCLUDES, DirectoryServiceConfig, find_config_file, load_config


def test_find_config_dirservice_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "dirservice.toml"
    config_file.write_text('temp-prefix = "scratch-"\n')
    assert find_config_file(tmp_path) == config_file


def test_find_config_dot_file_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / "dirservice.toml").write_text('temp-prefix = "a-"\n')
    dot_config = tmp_path / ".dirservice.toml"
    dot_config.write_text('temp-prefix = "b-"\n')
    assert find_config_file(tmp_path) == dot_config


def test_find_config_pyproject_toml(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text('[tool.dirservice]\ntemp-prefix = "scratch-"\n')
    assert find_config_file(tmp_path) == config_file


def test_find_config_pyproject_without_section_skipped(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.ruff]\nline-length = 100\n")
    assert find_config_file(tmp_path) is None


def test_find_config_invalid_pyproject_skipped(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.dirservice\n")
    assert find_config_file(tmp_path) is None


def test_find_config_walks_up(tmp_path: Path) -> None:
    config_file = tmp_path / "dirservice.toml"
    config_file.write_text('temp-prefix = "scratch-"\n')
    subdir = tmp_path / "sub" / "deep"
    subdir.mkdir(parents=True)
    assert find_config_file(subdir) == config_file


def test_find_config_none_when_missing(tmp_path: Path) -> None:
    assert find_config_file(tmp_path) is None


def test_load_config_kebab_case(tmp_path: Path) -> None:
    config_file = tmp_path / "dirservice.toml"
    config_file.write_text(
        'temp-prefix = "scratch-"\ntemp-root = "/var/scratch"\nextend-exclude = ["drafts/"]\n'
    )
    config = load_config(config_file)
    assert config.temp_prefix == "scratch-"
    assert config.temp_root == "/var/scratch"
    assert config.extend_exclude == ["drafts/"]
    assert config.exclude is None


def test_load_config_sections_flattened(tmp_path: Path) -> None:
    config_file = tmp_path / ".dirservice.toml"
    config_file.write_text('[temporary]\ntemp_prefix = "tmp-"\n\n[walk]\nexclude = ["out/"]\n')
    config = load_config(config_file)
    assert config.temp_prefix == "tmp-"
    assert config.exclude == ["out/"]


def test_load_config_pyproject(tmp_path: Path) -> None:
    config_file = tmp_path / "pyproject.toml"
    config_file.write_text(
        '[project]\nname = "x"\n\n[tool.dirservice]\ntemp-prefix = "py-"\n'
    )
    config = load_config(config_file)
    assert config.temp_prefix == "py-"
    assert config.temp_root is None


def test_load_config_ignores_unknown_keys(tmp_path: Path) -> None:
    config_file = tmp_path / "dirservice.toml"
    config_file.write_text('temp-prefix = "a-"\nbogus = 1\n')
    config = load_config(config_file)
    assert config == DirectoryServiceConfig(temp_prefix="a-")


def test_effective_exclude_defaults() -> None:
    assert DirectoryServiceConfig().effective_exclude == DEFAULT_EXCLUDES


def test_effective_exclude_replaced_and_extended() -> None:
    config = DirectoryServiceConfig(exclude=["out/"], extend_exclude=["tmp/"])
    assert config.effective_exclude == ["out/", "tmp/"]


def test_effective_exclude_extended() -> None:
    config = DirectoryServiceConfig(extend_exclude=["drafts/"])
    assert "drafts/" in config.effective_exclude
    for pattern in DEFAULT_EXCLUDES:
        assert pattern in config.effective_exclude

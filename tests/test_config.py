"""Tests for the configuration modules."""

import math
from pathlib import Path

import pytest
from pydantic import ValidationError

from gametree import EvaluationConfig, PlayerKind
from gametree._cli.config import (
    ConfigError,
    GameTreeConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestEvaluationConfig:
    def test_defaults(self) -> None:
        config = EvaluationConfig()

        assert config.is_max_player is False
        assert config.pruning_enabled is False
        assert config.range is None
        assert config.verbose is False
        assert config.bound == math.inf
        assert config.root_player is PlayerKind.MIN

    def test_bound_from_range(self) -> None:
        config = EvaluationConfig(is_max_player=True, range=10)

        assert config.bound == 10
        assert config.root_player is PlayerKind.MAX

    @pytest.mark.parametrize("value", [0, -3])
    def test_range_must_be_positive(self, value: int) -> None:
        with pytest.raises(ValidationError):
            EvaluationConfig(range=value)

    def test_frozen(self) -> None:
        config = EvaluationConfig()
        with pytest.raises(ValidationError):
            config.verbose = True  # type: ignore[misc]

    def test_unknown_field(self) -> None:
        with pytest.raises(ValidationError):
            EvaluationConfig(depth=3)  # type: ignore[call-arg]


class TestPlayerKind:
    def test_values(self) -> None:
        assert str(PlayerKind.MAX) == "max"
        assert str(PlayerKind.MIN) == "min"

    def test_opponent(self) -> None:
        assert PlayerKind.MAX.opponent is PlayerKind.MIN
        assert PlayerKind.MIN.opponent is PlayerKind.MAX

    def test_for_layer(self) -> None:
        assert PlayerKind.for_layer(is_max_player=True) is PlayerKind.MAX
        assert PlayerKind.for_layer(is_max_player=False) is PlayerKind.MIN


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert find_pyproject_toml(tmp_path) == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "games" / "trees"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == pyproject


class TestLoadConfig:
    """Tests for loading the [tool.gametree] table."""

    def test_full_configuration(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.gametree]
player = "max"
verbose = true
alpha_beta = true
range = -20
""",
        )

        config = load_config(pyproject)

        assert config == GameTreeConfig(
            player=PlayerKind.MAX,
            verbose=True,
            alpha_beta=True,
            range=20,
            project_root=tmp_path,
        )

    def test_missing_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == GameTreeConfig(project_root=tmp_path)
        assert config.player is PlayerKind.MIN

    def test_invalid_toml(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.gametree\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_invalid_player(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.gametree]\nplayer = "both"\n')

        with pytest.raises(ConfigError, match="player"):
            load_config(pyproject)

    @pytest.mark.parametrize("value", ["0", "true", '"10"'])
    def test_invalid_range(self, tmp_path: Path, value: str) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f"[tool.gametree]\nrange = {value}\n")

        with pytest.raises(ConfigError, match="range"):
            load_config(pyproject)

    def test_invalid_flag_type(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.gametree]\nverbose = "yes"\n')

        with pytest.raises(ConfigError, match="expected boolean"):
            load_config(pyproject)

    def test_unknown_key(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.gametree]\ndepth = 3\n")

        with pytest.raises(ConfigError, match="Unknown"):
            load_config(pyproject)

    def test_get_config_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.gametree]\nplayer = "max"\n')
        monkeypatch.chdir(tmp_path)

        assert get_config().player is PlayerKind.MAX

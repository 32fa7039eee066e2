"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from gametree._config import PlayerKind


class ConfigError(Exception):
    """Error in gametree configuration."""


@dataclass(slots=True, frozen=True)
class GameTreeConfig:
    """Default CLI settings loaded from the `[tool.gametree]` table.

    Command-line tokens override every field.
    """

    player: PlayerKind = PlayerKind.MIN
    verbose: bool = False
    alpha_beta: bool = False
    range: int | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _parse_player(value: object) -> PlayerKind:
    if not isinstance(value, str) or value not in {p.value for p in PlayerKind}:
        msg = f"Invalid [tool.gametree].player: expected 'max' or 'min', got {value!r}"
        raise ConfigError(msg)
    return PlayerKind(value)


def _parse_bool(section: dict[str, object], key: str) -> bool:
    value = section.get(key, False)
    if not isinstance(value, bool):
        msg = f"Invalid [tool.gametree].{key}: expected boolean"
        raise ConfigError(msg)
    return value


def _parse_range(value: object) -> int:
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int) or value == 0:
        msg = f"Invalid [tool.gametree].range: expected non-zero integer, got {value!r}"
        raise ConfigError(msg)
    return abs(value)


def load_config(pyproject_path: Path) -> GameTreeConfig:
    """Load and validate [tool.gametree] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GameTreeConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    # Extract [tool.gametree] section
    tool_section = data.get("tool", {})
    section = tool_section.get("gametree", {})

    if not section:
        return GameTreeConfig(project_root=project_root)

    unknown = set(section) - {"player", "verbose", "alpha_beta", "range"}
    if unknown:
        msg = f"Unknown [tool.gametree] keys: {', '.join(sorted(unknown))}"
        raise ConfigError(msg)

    player = _parse_player(section["player"]) if "player" in section else PlayerKind.MIN
    range_ = _parse_range(section["range"]) if "range" in section else None

    return GameTreeConfig(
        player=player,
        verbose=_parse_bool(section, "verbose"),
        alpha_beta=_parse_bool(section, "alpha_beta"),
        range=range_,
        project_root=project_root,
    )


def get_config() -> GameTreeConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GameTreeConfig (defaults if no pyproject.toml or no [tool.gametree] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GameTreeConfig()
    return load_config(pyproject_path)

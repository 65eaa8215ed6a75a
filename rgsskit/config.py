"""Runtime configuration read from a TOML file."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Self

DEFAULT_CONFIG_PATH = "sapphire_config.toml"


@dataclass
class FilesystemConfig:
    """Where the game's files live."""

    game_dir: str = "."


@dataclass
class GraphicsConfig:
    """Rendering options."""

    force_downlevel: bool = False
    vsync: bool = True


@dataclass
class BehaviourConfig:
    """How the runtime reacts to fatal errors."""

    abort_on_panic: bool = False


def _build_section(section_cls: type, name: str, raw: Any) -> Any:
    if not isinstance(raw, dict):
        raise ValueError(f"[{name}] must be a table, not {type(raw).__name__}")
    values = {}
    for spec in fields(section_cls):
        if spec.name not in raw:
            continue
        value = raw[spec.name]
        if type(value) is not spec.type:
            raise ValueError(
                f"{name}.{spec.name} must be of type {spec.type.__name__}, "
                f"not {type(value).__name__}"
            )
        values[spec.name] = value
    return section_cls(**values)


@dataclass
class Config:
    """Complete configuration; every missing value takes its default."""

    fs: FilesystemConfig = field(default_factory=FilesystemConfig)
    graphics: GraphicsConfig = field(default_factory=GraphicsConfig)
    behaviour: BehaviourConfig = field(default_factory=BehaviourConfig)

    @classmethod
    def from_toml(cls, text: str) -> Self:
        """Parse a configuration from TOML text.

        Raises ValueError (including tomllib.TOMLDecodeError) on bad input.
        """
        raw = tomllib.loads(text)
        sections = {}
        for spec in fields(cls):
            if spec.name in raw:
                sections[spec.name] = _build_section(spec.default_factory, spec.name, raw[spec.name])
        return cls(**sections)

    @classmethod
    def load(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> Self:
        """Read the configuration file, falling back to defaults if it cannot be read."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError:
            return cls()
        return cls.from_toml(text)
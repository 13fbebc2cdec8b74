"""
Configuration management for tui-bounded
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from blessed.colorspace import X11_COLORNAMES_TO_RGB
from loguru import logger

BASIC_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


def is_color_name(name: str) -> bool:
    """True if blessed knows ``name`` as a foreground color."""
    if not isinstance(name, str):
        return False
    if name.startswith("bright_"):
        return name[len("bright_"):] in BASIC_COLORS
    return name in BASIC_COLORS or name in X11_COLORNAMES_TO_RGB


def _is_int(value) -> bool:
    # bool is an int subclass; `page_size = true` is still a mistake
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class UIConfig:
    """Configuration for the list user interface."""

    wrap: bool = True  # Wrap around when stepping past either end
    page_size: int = 10  # Items moved by page up/down
    highlight_symbol: str = ">> "
    border_color: str = "white"
    title: str = "List"
    items: List[str] = field(default_factory=list)  # Initial items (empty = generated)
    initial_items: int = 30  # Number of generated items when `items` is empty
    initial_selection: Optional[int] = 0

    def validate(self) -> None:
        """Validate UI configuration values.

        Raises:
            TypeError: If a value has the wrong type
            ValueError: If configuration values are invalid
        """
        if not isinstance(self.wrap, bool):
            raise TypeError(f"wrap must be true or false, got {self.wrap!r}")
        for name in ("page_size", "initial_items"):
            if not _is_int(getattr(self, name)):
                raise TypeError(f"{name} must be an integer, got {getattr(self, name)!r}")
        if self.initial_selection is not None and not _is_int(self.initial_selection):
            raise TypeError(
                f"initial_selection must be an integer, got {self.initial_selection!r}"
            )
        if self.page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {self.page_size}")
        if self.initial_items < 0:
            raise ValueError(
                f"initial_items cannot be negative, got {self.initial_items}"
            )
        if not is_color_name(self.border_color):
            raise ValueError(f"Unknown border_color {self.border_color!r}")


@dataclass
class KeysConfig:
    """Keybinding strings per action, parsed by Keybind.parse."""

    quit: str = "escape"
    up: str = "up"
    down: str = "down"
    top: str = "t"
    bottom: str = "b"
    add: str = "enter"
    remove: str = "d"
    page_up: str = "pgup"
    page_down: str = "pgdown"
    deselect: str = "space"
    help: str = "?"

    def as_dict(self) -> Dict[str, str]:
        return dict(self.__dict__)


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/tui-bounded/tui-bounded.log)
    )

    def validate(self) -> None:
        """Check the level against the levels loguru knows.

        Raises:
            ValueError: If the level does not exist
        """
        logger.level(self.level)


@dataclass
class Config:
    """Main configuration object."""

    ui: UIConfig = field(default_factory=UIConfig)
    keys: KeysConfig = field(default_factory=KeysConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "tui-bounded"
    return Path.home() / ".config" / "tui-bounded"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/tui-bounded (or ~/.config/tui-bounded)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "tui-bounded"
    return Path.home() / ".local" / "share" / "tui-bounded"


def get_log_file_path(config: Config) -> Path:
    """Resolve the log file, honouring a custom path from the config."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "tui-bounded.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# tui-bounded Configuration

[ui]
# Wrap to the opposite end when stepping past the first/last item
wrap = true

# Items moved by page up / page down
page_size = 10

# Marker drawn in front of the selected row
highlight_symbol = ">> "

# Border color of the list block (any blessed color name)
border_color = "white"

# Title of the list block
title = "List"

# Initial items; leave empty to generate `initial_items` placeholder rows
items = []
initial_items = 30

# Initially selected row (0-based)
initial_selection = 0

[keys]
# Key names: single characters, or up, down, left, right, enter, escape,
# tab, space, home, end, pgup, pgdown, backspace, delete.
# Modifiers: ctrl+<letter>, shift+tab
quit = "escape"
up = "up"
down = "down"
top = "t"
bottom = "b"
add = "enter"
remove = "d"
page_up = "pgup"
page_down = "pgdown"
deselect = "space"
help = "?"

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/tui-bounded/tui-bounded.log)
# log_file = "/path/to/custom/tui-bounded.log"
""".strip()


def write_default_config(path: Optional[Path] = None) -> Path:
    """Write the default config file, leaving an existing one untouched."""
    config_path = path or get_config_dir() / "config.toml"
    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        logger.info(f"Created default configuration at: {config_path}")
    return config_path


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Args:
        path: Explicit config file (default: see get_config_path)

    Returns:
        Parsed configuration. Missing sections and keys keep their defaults;
        an unreadable or invalid file yields the default configuration.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return Config()

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Could not read config {config_path}: {e}")
        return Config()

    config = Config()

    if "ui" in toml_data:
        ui_data = toml_data["ui"]
        config.ui = UIConfig(
            wrap=ui_data.get("wrap", config.ui.wrap),
            page_size=ui_data.get("page_size", config.ui.page_size),
            highlight_symbol=ui_data.get(
                "highlight_symbol", config.ui.highlight_symbol
            ),
            border_color=ui_data.get("border_color", config.ui.border_color),
            title=ui_data.get("title", config.ui.title),
            items=[str(item) for item in ui_data.get("items", config.ui.items)],
            initial_items=ui_data.get("initial_items", config.ui.initial_items),
            initial_selection=ui_data.get(
                "initial_selection", config.ui.initial_selection
            ),
        )
        try:
            config.ui.validate()
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid ui configuration: {e}. Using defaults.")
            config.ui = UIConfig()

    if "keys" in toml_data:
        keys_data = toml_data["keys"]
        defaults = config.keys.as_dict()
        unknown = set(keys_data) - set(defaults)
        if unknown:
            logger.warning(f"Ignoring unknown key actions: {sorted(unknown)}")
        config.keys = KeysConfig(
            **{
                action: str(keys_data.get(action, default))
                for action, default in defaults.items()
            }
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=str(logging_data.get("level", config.logging.level)).upper(),
            log_file=log_file,
        )
        try:
            config.logging.validate()
        except ValueError as e:
            logger.warning(f"Invalid logging configuration: {e}. Using INFO.")
            config.logging = LoggingConfig(log_file=log_file)

    return config

"""Core infrastructure layer - configuration and logging.

No dependencies on the UI layer.
"""

from .config import (
    Config,
    KeysConfig,
    LoggingConfig,
    UIConfig,
    create_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
    write_default_config,
)
from .output import setup_loguru

__all__ = [
    "Config",
    "KeysConfig",
    "LoggingConfig",
    "UIConfig",
    "create_default_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    "write_default_config",
    "setup_loguru",
]

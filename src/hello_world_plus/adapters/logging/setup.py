"""lib_log_rich runtime setup for every entry point.

The greeter itself has no settings; the only tunables belong to the logging
runtime. They start from the ``[lib_log_rich]`` table of the bundled
``defaults.toml``, which lib_layered_config layers with host and user files
and ``HELLO_WORLD_PLUS_LIB_LOG_RICH__<KEY>`` variables. lib_log_rich applies
its own ``LOG_*`` variables (also read from ``.env``) last.

Contents:
    * :class:`LoggingSettings` - validated ``[lib_log_rich]`` table.
    * :func:`load_logging_settings` - read the layered table.
    * :func:`init_logging` - bring the runtime up once per process.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import read_config
from pydantic import BaseModel, ConfigDict

from hello_world_plus import __init__conf__

#: Bundled logging defaults, lowest layer of the settings.
DEFAULTS_FILE = Path(__file__).with_name("defaults.toml")

#: Table holding the runtime settings in every configuration layer.
SECTION = "lib_log_rich"


class LoggingSettings(BaseModel):
    """Runtime settings; unknown keys are handed to ``RuntimeConfig`` as-is.

    ``console_level`` defaults to WARNING because console records share the
    terminal with the demo lines.

    Example:
        >>> LoggingSettings().console_level
        'WARNING'
        >>> LoggingSettings.model_validate({"queue_enabled": False}).model_dump()["queue_enabled"]
        False
    """

    model_config = ConfigDict(extra="allow")

    service: str = __init__conf__.name
    environment: str = "prod"
    console_level: str = "WARNING"

    def to_runtime_config(self) -> lib_log_rich.runtime.RuntimeConfig:
        return lib_log_rich.runtime.RuntimeConfig(**self.model_dump())


def load_logging_settings(*, start_dir: str | None = None) -> LoggingSettings:
    """Read the layered ``[lib_log_rich]`` table.

    Args:
        start_dir: Directory where ``.env`` discovery begins; the current
            working directory when omitted.
    """
    layered = read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=DEFAULTS_FILE,
        start_dir=start_dir,
    )
    table: Mapping[str, Any] = layered.get(SECTION, default={}) or {}
    return LoggingSettings.model_validate(dict(table))


def init_logging(settings: LoggingSettings | Mapping[str, Any] | None = None) -> None:
    """Initialise lib_log_rich and route stdlib ``logging`` into it.

    Does nothing when a runtime is already active, so the CLI, ``python -m``
    and tests can all call it unconditionally.

    Args:
        settings: Explicit settings (a model or a plain ``[lib_log_rich]``
            mapping). Loaded through :func:`load_logging_settings` when omitted.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    if settings is None:
        resolved = load_logging_settings()
    elif isinstance(settings, LoggingSettings):
        resolved = settings
    else:
        resolved = LoggingSettings.model_validate(dict(settings))
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(resolved.to_runtime_config())
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "DEFAULTS_FILE",
    "LoggingSettings",
    "init_logging",
    "load_logging_settings",
]

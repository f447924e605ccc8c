"""lib_log_rich runtime setup shared by every entry point.

The printing engine logs through the standard :mod:`logging` module; this
module starts the lib_log_rich runtime once and bridges stdlib records into
it so the engine's debug records reach the configured console and backends.

Contents:
    * :class:`LoggingConfigModel` - validated view of ``[lib_log_rich]``.
    * :func:`init_logging` - idempotent runtime start.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from objprinter import __init__conf__

LOGGING_SECTION = "lib_log_rich"


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are interpreted here; every other
    key is handed to ``lib_log_rich.runtime.RuntimeConfig`` untouched.

    Example:
        >>> LoggingConfigModel(console_level="DEBUG").model_dump()
        {'service': None, 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the distribution name.
    """
    section: object = config.get(LOGGING_SECTION, default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start lib_log_rich from ``config`` unless it already runs.

    Enables ``.env`` lookup of ``LOG_*`` variables before reading the
    runtime settings, then attaches stdlib logging so records emitted by
    ``objprinter.domain`` end up in the same sinks.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LOGGING_SECTION",
    "LoggingConfigModel",
    "init_logging",
]

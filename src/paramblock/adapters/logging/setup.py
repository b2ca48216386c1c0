"""Initialize the lib_log_rich runtime from the ``[lib_log_rich]`` config table.

The domain logs through stdlib ``logging``; once the runtime is up those
records are bridged into lib_log_rich so diagnostics from
:class:`~paramblock.domain.registry.ServiceParameters` share its console and
its context binding.

Contents:
    * :class:`LoggingConfigModel` - validated view of the config table.
    * :func:`init_logging` - idempotent runtime initialization.
"""

from __future__ import annotations

from collections.abc import Mapping

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from paramblock import __init__conf__

LOGGING_SECTION = "lib_log_rich"


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` table; unknown keys pass through to the runtime.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(console_level="DEBUG").model_dump(exclude_none=True)
        {'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the config table onto a RuntimeConfig; the service defaults to the package name."""
    raw: object = config.get(LOGGING_SECTION, default={})
    parsed = LoggingConfigModel.model_validate(dict(raw) if isinstance(raw, Mapping) else {})
    extra = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra,
    )


def init_logging(config: Config) -> None:
    """Start lib_log_rich once per process and bridge stdlib logging into it.

    ``.env`` files are loaded first so ``LOG_*`` variables apply. Later calls
    return immediately.

    Example:
        >>> init_logging(Config({LOGGING_SECTION: {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LOGGING_SECTION",
    "LoggingConfigModel",
    "build_runtime_config",
    "init_logging",
]

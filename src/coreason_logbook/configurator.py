# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logbook

from typing import Optional, TextIO, Tuple

from loguru import logger

from coreason_logbook.errors import InvalidLevelError, LogFileError, NilLoggerError
from coreason_logbook.interfaces import LoggerFactory
from coreason_logbook.loader import ConfigSource, load_config
from coreason_logbook.named_logger import default_destination
from coreason_logbook.registry import LoggerRegistry
from coreason_logbook.schemas import LoggerConfig
from coreason_logbook.severity import Severity


def open_destination(name: str, file: str) -> Tuple[TextIO, bool]:
    """
    Resolves the output of a named logger.

    Returns:
        Tuple[stream, owned]: Standard output (not owned) for an empty path,
        otherwise the file opened for append, created if absent (owned).
    """
    if not file:
        return default_destination(), False
    try:
        return open(file, "a", encoding="utf-8"), True
    except OSError as e:
        logger.error(f"Failed to open log file for {name}: {e}")
        raise LogFileError(name, file, e.strerror or str(e)) from e


class Configurator:
    """
    Applies logger configurations to a registry.
    """

    def __init__(self, registry: LoggerRegistry):
        self.registry = registry

    def apply(self, config: ConfigSource, factory: Optional[LoggerFactory] = None) -> None:
        """
        Builds a logger for every configured name and installs it in the registry.

        Entries are independent. The first failing entry aborts the call;
        entries processed before it stay installed.

        Args:
            config: The configuration, or anything `load_config` resolves.
            factory: Builds the logger instances. Defaults to the registry's
                default factory.

        Raises:
            InvalidLevelError: An entry names an unrecognized level.
            LogFileError: An entry's file cannot be opened for append.
            NilLoggerError: The factory returned no logger.
        """
        cfg = load_config(config)
        factory = factory or self.registry.default_factory

        for name, logger_cfg in cfg.loggers.items():
            self._apply_entry(name, logger_cfg, factory)

        logger.info(f"Applied logger configuration for {len(cfg.loggers)} logger(s)")

    def apply_from_source(self, source: ConfigSource) -> None:
        """Loads a configuration and applies it with the default factory."""
        self.apply(load_config(source))

    def _apply_entry(self, name: str, logger_cfg: LoggerConfig, factory: LoggerFactory) -> None:
        try:
            severity = Severity.parse(logger_cfg.level)
        except ValueError as e:
            logger.error(f"Invalid level for {name}: {logger_cfg.level!r}")
            raise InvalidLevelError(name, logger_cfg.level) from e

        destination, owned = open_destination(name, logger_cfg.file)

        try:
            instance = factory.create(name, severity, destination, logger_cfg.color)
        except BaseException:
            if owned:
                destination.close()
            raise

        if instance is None:
            if owned:
                destination.close()
            logger.error(f"Logger factory returned no logger for {name}")
            raise NilLoggerError(name)

        if owned:
            instance.own(destination)

        previous = self.registry.install(name, instance)
        if previous is not None and previous is not instance:
            previous.close()

        logger.debug(f"Configured logger '{name}' at {severity.label} -> {logger_cfg.file or '<stdout>'}")

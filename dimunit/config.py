"""
Runtime settings for dimunit, read from the environment at import time.
"""
import logging
import os
from dataclasses import dataclass

# Verbs which produce a number, see :mod:`dimunit.formatting`
NUMERIC_VERBS = ("e", "E", "f", "F", "g", "G", "v")


def _is_level(name: str) -> bool:
    return isinstance(logging.getLevelName(name), int)


@dataclass
class Settings:
    """Library wide settings.

    :param log_level: The level of the ``dimunit`` logger.
    :type log_level: str
    :param default_verb: The verb used when a quantity is formatted with an empty format spec.
    :type default_verb: str
    """

    log_level: str = "WARNING"
    default_verb: str = "v"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if not _is_level(self.log_level):
            raise ValueError(f"Unknown log level {self.log_level!r}")
        if self.default_verb not in NUMERIC_VERBS:
            raise ValueError(
                f"Default verb must be one of {NUMERIC_VERBS}, got {self.default_verb!r}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """Reads settings from ``DIMUNIT_LOG_LEVEL`` and ``DIMUNIT_DEFAULT_VERB``. Invalid values are logged and replaced by the defaults."""
        log_level = os.getenv("DIMUNIT_LOG_LEVEL", cls.log_level).upper()
        if not _is_level(log_level):
            logging.getLogger("dimunit").warning(
                f"Ignoring DIMUNIT_LOG_LEVEL={log_level!r}, using {cls.log_level}"
            )
            log_level = cls.log_level
        default_verb = os.getenv("DIMUNIT_DEFAULT_VERB", cls.default_verb)
        if default_verb not in NUMERIC_VERBS:
            logging.getLogger("dimunit").warning(
                f"Ignoring DIMUNIT_DEFAULT_VERB={default_verb!r}, using {cls.default_verb}"
            )
            default_verb = cls.default_verb
        return cls(log_level=log_level, default_verb=default_verb)


settings = Settings.from_env()


def GetSettings() -> Settings:
    """Returns the active settings.

    :return: The settings read when the package was imported.
    :rtype: :class:`Settings`
    """
    return settings

"""
This module contains the configuration merge shared by the Step and Task records.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from .exceptions import InvalidConfigurationError
from .logger import LoggingManager

logger = LoggingManager.get_logger("records", app="Records")


def apply_configuration(record: object, configuration: Optional[Mapping[str, Any]]) -> None:
    """
    Copy every key/value pair of the configuration onto the record as attributes.

    Keys naming an attribute the record already carries overwrite it. A ``None`` configuration merges nothing.

    :param record: Instance receiving the attributes
    :param configuration: Mapping of attribute names to values, or None
    :raise InvalidConfigurationError: The configuration is not a mapping, or one of its keys is not a string or names
        a special attribute
    """
    if configuration is None:
        return

    if not isinstance(configuration, Mapping):
        raise InvalidConfigurationError(
            f"configuration must be a mapping or None, not {type(configuration).__name__}", configuration
        )

    for key, value in configuration.items():
        if not isinstance(key, str):
            raise InvalidConfigurationError(f"configuration key {key!r} is not a string", configuration)
        if key.startswith("__") and key.endswith("__"):
            raise InvalidConfigurationError(f"configuration key {key!r} names a special attribute", configuration)

        if key in vars(record):
            logger.debug(f"{type(record).__name__}: configuration overrides field '{key}'")
        setattr(record, key, value)


def extension_fields(record: object, reserved: Iterable[str]) -> dict[str, Any]:
    """
    Collect the attributes of a record that are not among its reserved field names.

    :param record: Record to inspect
    :param reserved: Names of the predeclared fields
    :return: The remaining attributes, in assignment order
    """
    reserved = set(reserved)
    return {name: value for name, value in vars(record).items() if name not in reserved}

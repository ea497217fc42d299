"""``guardkit.framework.project`` module provides utility to
configure guardkit from an application package and access its settings."""

from __future__ import annotations

import importlib
import importlib.util
import logging.config
import os
from collections import UserDict
from pathlib import Path
from typing import Any

import yaml
from dynaconf import LazySettings
from dynaconf.validator import ValidationError, Validator


def _get_default_class(class_import_path: str):
    module, _, class_name = class_import_path.rpartition(".")

    def validator_func(settings, validators):
        return getattr(importlib.import_module(module), class_name)

    return validator_func


class _IsSubclassValidator(Validator):
    """A validator to check if the supplied setting value is a subclass of the default class"""

    def validate(self, settings, *args, **kwargs):
        super().validate(settings, *args, **kwargs)

        default_class = self.default(settings, self)
        for name in self.names:
            setting_value = getattr(settings, name)
            if not isinstance(setting_value, type) or not issubclass(
                setting_value, default_class
            ):
                raise ValidationError(
                    f"Invalid value '{setting_value!r}' received for setting "
                    f"'{name}'. It must be a subclass of "
                    f"'{default_class.__module__}.{default_class.__qualname__}'."
                )


class _ProjectSettings(LazySettings):
    """Define all settings available for applications to configure in guardkit,
    along with their validation rules and default values.
    Use Dynaconf's LazySettings as base.
    """

    _HOOKS = Validator("HOOKS", default=tuple())
    _DISABLE_HOOKS_FOR_PLUGINS = Validator("DISABLE_HOOKS_FOR_PLUGINS", default=tuple())
    _ERROR_KIND_REGISTRY_CLASS = _IsSubclassValidator(
        "ERROR_KIND_REGISTRY_CLASS",
        default=_get_default_class("guardkit.factory.registry.ErrorKindRegistry"),
    )

    def __init__(self, *args, **kwargs):
        kwargs.update(
            validators=[
                self._HOOKS,
                self._DISABLE_HOOKS_FOR_PLUGINS,
                self._ERROR_KIND_REGISTRY_CLASS,
            ]
        )
        super().__init__(*args, **kwargs)


class _ProjectLogging(UserDict):
    # noqa: super-init-not-called
    def __init__(self):
        """Initialise guardkit logging. The path to logging configuration is given in
        environment variable GUARDKIT_LOGGING_CONFIG (defaults to default_logging.yml)."""
        path = os.environ.get(
            "GUARDKIT_LOGGING_CONFIG", Path(__file__).parent / "default_logging.yml"
        )
        logging_config = Path(path).read_text(encoding="utf-8")
        self.configure(yaml.safe_load(logging_config))
        logging.getLogger(__name__).debug("Using '%s' as logging configuration", path)

    def configure(self, logging_config: dict[str, Any]) -> None:
        """Configure logging using ``logging_config``. We store this in the
        UserDict data so that it can be extended later by ``set_project_logging``.
        """
        logging.config.dictConfig(logging_config)
        self.data = logging_config

    def set_project_logging(self, package_name: str):
        """Add the application package logger upon provision of a package name.
        Checks if the logger is already configured to prevent overwriting, if none
        exists it defaults to setting the package logs at INFO level."""
        loggers = self.data.setdefault("loggers", {})
        if package_name not in loggers:
            loggers[package_name] = {"level": "INFO"}
            self.configure(self.data)


PACKAGE_NAME = None
LOGGING = _ProjectLogging()

settings = _ProjectSettings()


def configure_project(package_name: str):
    """Configure guardkit from an application package by populating its settings
    with the values defined in the package's ``settings.py``.

    The process-wide hook manager and error factory are discarded so they are
    rebuilt from the new settings on next use.
    """
    settings_module = f"{package_name}.settings"
    settings.configure(settings_module)

    global PACKAGE_NAME  # noqa: PLW0603
    PACKAGE_NAME = package_name

    if PACKAGE_NAME:
        LOGGING.set_project_logging(PACKAGE_NAME)

    # Imported here to avoid circular imports
    from guardkit.factory.factory import _reset_error_factory
    from guardkit.framework.hooks.manager import _reset_hook_manager

    _reset_hook_manager()
    _reset_error_factory()


def configure_logging(logging_config: dict[str, Any]) -> None:
    """Configure logging according to ``logging_config`` dictionary."""
    LOGGING.configure(logging_config)


def validate_settings():
    """Eagerly validate that the settings module is importable if it exists. This is desirable to
    surface any syntax or import errors early. In particular, without eagerly importing
    the settings module, dynaconf would silence any import error (e.g. missing
    dependency) and defaults would be used instead without notice.
    More info on the dynaconf issue: https://github.com/rochacbruno/dynaconf/issues/460
    """
    if PACKAGE_NAME is None:
        raise ValueError(
            "Package name not found. Make sure you have configured guardkit using "
            "'configure_project' before validating its settings."
        )
    # Check if file exists, if it does, validate it.
    if importlib.util.find_spec(f"{PACKAGE_NAME}.settings") is not None:
        importlib.import_module(f"{PACKAGE_NAME}.settings")
    else:
        logger = logging.getLogger(__name__)
        logger.warning("No 'settings.py' found, defaults will be used.")

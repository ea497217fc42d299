"""
This file contains the fixtures that are reusable by any tests within
this directory. You don't need to import the fixtures as pytest will
discover them automatically. More info here:
https://docs.pytest.org/en/latest/fixture.html
"""

import os
import sys

import pytest

from guardkit.factory import ErrorFactory, ErrorKindRegistry
from guardkit.factory.factory import _reset_error_factory
from guardkit.framework.hooks.manager import _reset_hook_manager


@pytest.fixture(autouse=True)
def preserve_system_context():
    """
    Revert some changes to the application context tests do to isolate them.
    """
    old_path = sys.path.copy()
    old_cwd = os.getcwd()
    yield
    sys.path = old_path

    if os.getcwd() != old_cwd:
        os.chdir(old_cwd)  # pragma: no cover


@pytest.fixture(autouse=True)
def reset_global_factory():
    """Discard the process-wide hook manager and error factory after each test."""
    yield
    _reset_hook_manager()
    _reset_error_factory()


@pytest.fixture
def registry():
    return ErrorKindRegistry()


@pytest.fixture
def factory(registry):
    return ErrorFactory(registry)


class DefaultConstructorOnlyError(Exception):
    def __init__(self):
        super().__init__("default message")
        self.parameter = "default parameter"


class SingleStringConstructorOnlyError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.parameter = "default parameter"


class DoubleStringConstructorOnlyError(Exception):
    def __init__(self, parameter, message):
        super().__init__(message)
        self.parameter = parameter


class NoUsableConstructorError(Exception):
    def __init__(self, code, parameter, message):
        super().__init__(message)
        self.code = code
        self.parameter = parameter


class PlainError(Exception):
    pass


@pytest.fixture
def default_constructor_only():
    return DefaultConstructorOnlyError


@pytest.fixture
def single_string_constructor_only():
    return SingleStringConstructorOnlyError


@pytest.fixture
def double_string_constructor_only():
    return DoubleStringConstructorOnlyError


@pytest.fixture
def no_usable_constructor():
    return NoUsableConstructorError


@pytest.fixture
def plain_error():
    return PlainError

"""
This file contains the fixtures that are reusable by any tests within
this directory. You don't need to import the fixtures as pytest will
discover them automatically. More info here:
https://docs.pytest.org/en/latest/fixture.html
"""

from pytest import fixture

from guardkit.framework.cli.utils import GuardkitCliError


@fixture
def entry_points(mocker):
    return mocker.patch("importlib_metadata.entry_points", spec=True)


@fixture
def entry_point(mocker, entry_points):
    ep = mocker.patch("importlib_metadata.EntryPoint", spec=True)
    entry_points.return_value.select.return_value = [ep]
    return ep


@fixture(autouse=True)
def reset_verbose_error():
    yield
    GuardkitCliError.VERBOSE_ERROR = False

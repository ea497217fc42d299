"""Test a set of helper functions being used across guardkit components."""

import pytest

from guardkit.utils import _format_rich, load_obj


class DummyClass:
    pass


class TestExtractObject:
    def test_load_obj(self):
        extracted_obj = load_obj("tests.test_utils.DummyClass")
        assert extracted_obj is DummyClass

    def test_load_obj_default_path(self):
        extracted_obj = load_obj("DummyClass", "tests.test_utils")
        assert extracted_obj is DummyClass

    def test_load_obj_invalid_module(self):
        with pytest.raises(ImportError, match=r"No module named 'missing_path'"):
            load_obj("InvalidClass", "missing_path")

    def test_load_obj_invalid_attribute(self):
        with pytest.raises(AttributeError, match=r"has no attribute 'InvalidClass'"):
            load_obj("tests.test_utils.InvalidClass")


def test_format_rich():
    assert _format_rich("value", "bold red") == "[bold red]value[/bold red]"

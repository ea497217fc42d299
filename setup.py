from setuptools import setup

setup(
    package_data={
        "guardkit": ["py.typed", "framework/project/*.yml"]
    },
)

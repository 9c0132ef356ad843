"""
setup.py for the synthdata package.

Usage:
    pip install -e .[test]
    python -m synthdata --hash "lang/fr"
"""
from setuptools import find_packages, setup

VERSION = {}
with open("synthdata/__version__.py") as f:
    exec(f.read(), VERSION)

setup(
    name="synthdata",
    version=VERSION["__version__"],
    description="Shareable synthetic CSV configuration kept in the URL fragment",
    packages=find_packages(include=["synthdata", "synthdata.*"]),
    package_data={"synthdata": ["data/*.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "synthdata=synthdata.__main__:main",
        ],
    },
)

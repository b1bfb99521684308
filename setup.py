"""Packaging for memo (src layout, single console script)."""

from setuptools import find_packages, setup

setup(
    name="memo",
    version="0.4.0",
    description="A simple memo app: timestamped one-line notes in a flat text file",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=["click>=8.1"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["memo = memo.cli:main"]},
)

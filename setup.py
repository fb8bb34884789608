"""
Setup script for letter-freq.
"""

from setuptools import setup, find_packages

setup(
    name="letter-freq",
    version="0.1.0",
    packages=find_packages(include=["letter_freq", "letter_freq.*"]),
    package_data={"letter_freq": ["py.typed"]},
    python_requires=">=3.8",
)

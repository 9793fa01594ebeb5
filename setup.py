# setup.py
from setuptools import setup, find_packages

setup(
    name="symbex",
    version="0.1.0",
    description="An embeddable evaluator for a minimal symbolic expression language",
    python_requires=">=3.10",
    packages=find_packages(include=["symbex", "symbex.*"]),
    package_data={"symbex": ["prelude/std/*.sx"]},
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["symbex = symbex.__main__:main"]},
    zip_safe=False,
)

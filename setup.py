# setup.py
from setuptools import setup, find_packages

setup(
    name="mal",
    version="0.1.0",
    description="A read-eval-print loop for a minimal symbolic-expression language",
    packages=find_packages(include=["mal", "mal.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mal = mal.__main__:main"],
    },
    zip_safe=False,
)

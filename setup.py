# setup.py
from setuptools import setup, find_packages

setup(
    name="sprig",
    version="0.1.0",
    description="A small Lisp interpreter with exact rationals, closures and quasiquote",
    packages=find_packages(include=["sprig", "sprig.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sprig=sprig.repl:main"],
    },
    zip_safe=False,
)

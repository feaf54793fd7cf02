# setup.py
from setuptools import setup, find_packages

setup(
    name="simple-lisp",
    version="0.1.0",
    description="A small Lisp interpreter for PAIP chapter 1 exercises",
    packages=find_packages(include=["simple_lisp", "simple_lisp.*", "simple_lisp_repl", "simple_lisp_repl.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "simple-lisp=simple_lisp_repl.console:main",
        ],
    },
    zip_safe=False,
)

# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="schemelet",
    version="0.1.0",
    description="Evaluation core of a small Lisp-family language",
    python_requires=">=3.10",
    # Subpackages carry no __init__.py
    packages=find_namespace_packages(include=["schemelet", "schemelet.*"]),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["schemelet = schemelet.cli:main"]},
    zip_safe=False,
)

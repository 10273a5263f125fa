# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="quill",
    version="0.1.0",
    description="A small Lisp interpreter with macros, closures and tail calls",
    python_requires=">=3.10",
    # Subpackages (types, reader, evaluation, builtin, modules) are namespace packages
    packages=find_namespace_packages(include=["quill", "quill.*"]),
    package_data={"quill": ["prelude/*.qll"]},
    include_package_data=True,
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["quill=quill.repl:main"],
    },
    zip_safe=False,
)

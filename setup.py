# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="funlet",
    version="0.1.0",
    description="Parser, binder and language server for the Funlet expression language",
    packages=find_namespace_packages(include=["funlet", "funlet.*", "funlet_lsp", "funlet_lsp.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pygls>=2.0",
        "lsprotocol>=2025.0.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "funlet-ls=funlet_lsp.server:main",
        ],
    },
    zip_safe=False,
)

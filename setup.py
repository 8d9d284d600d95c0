# setup.py
from setuptools import setup, find_packages

setup(
    name="lithp",
    version="0.3.0",
    description="A tiny S-expression calculator with quoted expressions",
    packages=find_packages(include=["lithp", "lithp.*", "lithp_lsp", "lithp_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",
        "pygls>=2.0",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": [
            "lithp=lithp.cli:app",
        ],
    },
    zip_safe=False,
)

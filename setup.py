from setuptools import find_packages, setup

setup(
    name="metsysd",
    version="0.1.0",
    description="metsysd - generate and install systemd services",
    packages=find_packages(include=["metsysd", "metsysd.*"]),
    python_requires=">=3.11",
    install_requires=[
        "typer<0.26",  # CLI (later releases vendor click; the code reads the context via click)
        "click",  # Typer context and usage errors
        "pydantic>=2",  # Definition and config validation
        "rich",  # Terminal formatting
        "pygments",  # Output highlighting on a TTY
        "PyYAML",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "metsysd=metsysd.cli:main",
        ],
    },
)

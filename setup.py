from setuptools import find_packages, setup

setup(
    name="btex-ref",
    version="0.1.0",
    description="btex cross-reference node - resolution, page inference and rendering",
    packages=find_packages(include=["btex", "btex.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output for CLI
        "jinja2",  # Template rendering for CLI outputs
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "btexc=btex.cli:main",
        ],
    },
)

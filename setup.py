from setuptools import find_packages, setup

setup(
    name="rmpatch",
    version="1.3.0",
    description="rmpatch - checksum-gated binary patching for reMarkable devices",
    author="reHackable",
    packages=find_packages(include=["rmpatch", "rmpatch.*"]),
    include_package_data=True,
    package_data={
        "rmpatch.api.profile": ["_builtin/*.json"],
    },
    python_requires=">=3.10",
    install_requires=[
        "bsdiff4",  # BSDIFF40 patch application
        "pydantic>=2",  # Configuration and output schemas
        "typer<0.26",  # CLI; 0.26+ vendors click, breaking the click exception handling
        "click",  # Used directly by the CLI (exceptions, exit handling)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "rmpatch=rmpatch.cli:main",
        ],
    },
)

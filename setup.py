from setuptools import find_packages, setup

setup(
    name="codefig",
    version="0.1.0",
    description="Captioned, syntax-highlighted code figures for Jinja2-rendered blogs",
    packages=find_packages(include=["codefig", "codefig.*"]),
    python_requires=">=3.10",
    install_requires=[
        "jinja2",  # Template rendering and the codeblock tag extension
        "markupsafe",  # HTML escaping of captions
        "pygments",  # Syntax highlighting
        "pydantic>=2",  # Configuration models
        "typer",  # CLI
        "click",  # CLI exceptions (typer runs on click)
        "rich",  # Terminal formatting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "codefig=codefig.cli:main",
        ],
    },
)

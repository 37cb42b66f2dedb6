from setuptools import setup, find_packages
import os

# Read version from __init__.py
def get_version():
    """Get version from enum_next/__init__.py"""
    init_file = os.path.join(os.path.dirname(__file__), "enum_next", "__init__.py")
    with open(init_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"\'')
    raise RuntimeError("Unable to find version string.")

# Installation Examples:
# - Base package only: pip install enum-next
# - With test tooling: pip install "enum-next[dev]"

extras_require = {
    # Development dependencies
    "dev": [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "coverage>=7.3.2",
    ],
}

setup(
    name="enum-next",
    version=get_version(),
    description="Validated, immutable enumerations with identity tokens, payloads and shared behaviour",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    keywords="enum, enumeration, constants, immutable",
    packages=find_packages(include=["enum_next", "enum_next.*"]),
    install_requires=[],
    extras_require=extras_require,
)

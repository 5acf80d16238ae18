"""
Setup script for the Dotty package.
"""

from setuptools import setup
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read version from __init__.py (which is in current directory)
version = "1.0.0"
init_file = Path(__file__).parent / "__init__.py"
if init_file.exists():
    for line in init_file.read_text().splitlines():
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break

# setup.py lives INSIDE the Dotty directory, so map the current dir to Dotty
subpackages = [
    "core",
    "core.morse",
    "core.utils",
    "cli",
    "cli.config",
    "cli.repl",
    "cli.ui",
]
package_dir_map = {"Dotty": "."}
for pkg in subpackages:
    package_dir_map[f"Dotty.{pkg}"] = pkg.replace(".", "/")

setup(
    name="dotty-morse",
    version=version,
    description="Text <-> Morse code conversion engine with a terminal front end",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir=package_dir_map,
    packages=["Dotty"] + [f"Dotty.{pkg}" for pkg in subpackages],
    package_data={
        "Dotty": ["skills/*/tools.py"],
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "dotty=Dotty.cli.__main__:main",
        ],
    },
    install_requires=[
        "pyyaml>=6.0",
        "rich>=13.0.0",
        "prompt-toolkit>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pytest-mock>=3.12.0",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Communications :: Ham Radio",
        "Topic :: Text Processing",
    ],
    keywords="morse morse-code encoder decoder cli",
)

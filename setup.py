"""
Setup script for the Project Board application

Installation:
    pip install -e .          # Development mode (editable install)
    pip install -e .[test]    # With test dependencies

After installation, run with:
    projectboard              # Console entry point
    python main_qt.py         # Or directly
"""
from setuptools import setup, find_namespace_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).resolve().parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text(encoding="utf-8")

# Read requirements
requirements_file = Path(__file__).resolve().parent / "requirements.txt"
install_requires = []
if requirements_file.exists():
    with open(requirements_file, "r", encoding="utf-8") as f:
        install_requires = [
            line.strip()
            for line in f
            if line.strip() and not line.startswith("#")
        ]

setup(
    name="projectboard",
    version="0.1.0",
    description="Drag-and-drop project board (active / finished)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="ProjectBoard",
    author_email="",
    packages=find_namespace_packages(include=["src", "src.*", "ui", "ui.*"]),
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "projectboard=main_qt:main",
        ],
    },
    py_modules=["main_qt"],  # Include main_qt.py as a module
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    include_package_data=True,
)

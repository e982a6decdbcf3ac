"""
Setup script for AutoUI CLI tool.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = (
    readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""
)

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_path.exists():
    with open(requirements_path, "r", encoding="utf-8") as f:
        requirements = [
            line.strip() for line in f if line.strip() and not line.startswith("#")
        ]

setup(
    name="autoui",
    version="0.1.0",
    author="AutoUI Development Team",
    author_email="autoui@example.com",
    description="Issue-driven questionnaire and coming-soon page generator",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/autoui",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"autoui": ["templates/*.json", "templates/*.template"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Code Generators",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={"test": ["pytest>=7.0.0"]},
    entry_points={
        "console_scripts": [
            "autoui=autoui.cli.main:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)

"""Setup script for Darwin"""

from setuptools import find_packages, setup

with open("requirements.txt") as f:
    requirements = [
        line.strip() for line in f if line.strip() and not line.startswith("#")
    ]

setup(
    name="darwin-ga",
    version="0.1.0",
    description="Genetic algorithm engine for real-valued optimization",
    packages=find_packages(exclude=["tests*"]),
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "dev": ["pytest", "pytest-mock", "psutil", "black", "isort", "mypy"],
    },
    entry_points={
        "console_scripts": ["darwin=darwin_core.cli:main"],
    },
)

"""
Setup script for the rwanda-geo package.
"""

from setuptools import setup, find_packages

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

# Separate development requirements
dev_requirements = [req for req in requirements if any(dev in req for dev in ["pytest", "black", "flake8", "mypy"])]
install_requirements = [req for req in requirements if req not in dev_requirements]

setup(
    name="rwanda-geo",
    version="1.0.0",
    author="Data Analytics Team",
    description="Rwanda's administrative hierarchy: lookup, navigation, search and validation",
    long_description="Rwanda Geo - An in-process query library over Rwanda's five administrative levels (province, district, sector, cell, village) with fuzzy search and integrity validation.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    package_data={
        "rwanda_geo": ["data/*.json", "data/*.json.gz"],
    },
    install_requires=install_requirements,
    extras_require={
        "dev": dev_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "rwanda-geo=main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)

"""
Setup script for Taskbot
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
try:
    long_description = readme_file.read_text(encoding='utf-8') if readme_file.exists() else ""
except (UnicodeDecodeError, Exception):
    # Fallback to simpler description if README has encoding issues
    long_description = "Personal task-tracking assistant driven by line-based text commands"

# Read requirements
requirements_file = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_file.exists():
    with open(requirements_file) as f:
        requirements = [
            line.strip()
            for line in f
            if line.strip() and not line.startswith('#')
        ]

setup(
    name="taskbot",
    version="0.1.0",
    author="Taskbot Team",
    author_email="",
    description="Personal task-tracking assistant driven by line-based text commands",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Office/Business :: Scheduling",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "taskbot=taskbot.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)

#!/usr/bin/env python3
"""
Setup script for the Feedback Form core

This setup script provides package installation and the CLI entry point
for the feedback form interaction core.
"""

from setuptools import setup, find_packages
import os
import sys

# Ensure we're using Python 3.10 or higher
if sys.version_info < (3, 10):
    raise RuntimeError("Python 3.10 or higher is required")

# Read version from package
def get_version():
    """Extract version from package"""
    version_file = os.path.join(os.path.dirname(__file__), 'src', 'feedback_form', '__init__.py')
    if os.path.exists(version_file):
        with open(version_file) as f:
            for line in f:
                if line.startswith('__version__'):
                    return line.split('=')[1].strip().strip('"\'')
    return "1.0.0"

# Read long description from README
def get_long_description():
    """Read long description from README file"""
    readme_file = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_file):
        with open(readme_file, 'r', encoding='utf-8') as f:
            return f.read()
    return "Feedback form interaction core"

# Core dependencies
INSTALL_REQUIRES = [
    "click>=8.0.0",
    "python-dotenv>=0.19.0",
    "pydantic>=2.0.0",
    "httpx>=0.24.0",
]

# Development dependencies
EXTRAS_REQUIRE = {
    'dev': [
        "pytest>=7.0.0",
        "pytest-asyncio>=0.21.0",
        "pytest-cov>=4.0.0",
        "black>=23.0.0",
        "flake8>=6.0.0",
        "mypy>=1.0.0"
    ],
    'test': [
        "pytest>=7.0.0",
        "pytest-asyncio>=0.21.0",
        "pytest-cov>=4.0.0"
    ]
}

setup(
    name="feedback-form",
    version=get_version(),
    description="Feedback form interaction core: draft, screenshot capture and submission",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    author="Feedback Form Team",

    # Package configuration
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,

    python_requires=">=3.10",

    # Dependencies
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,

    # CLI entry points
    entry_points={
        'console_scripts': [
            'feedback-form=feedback_form.cli.main:main',
        ],
    },

    # Package metadata
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: User Interfaces",
        "Topic :: Utilities",
    ],

    keywords=[
        "feedback", "bug-report", "screenshot", "form", "state-machine",
    ],

    zip_safe=False,
)

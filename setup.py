#!/usr/bin/env python3
"""
Wink Render Setup
"""

from setuptools import setup, find_packages

# Read requirements from requirements.txt
with open('requirements.txt') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="wink-render",
    version="1.0.0",
    description="Styling and layout core of the Wink renderer: CSS parsing, cascade and block layout",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Wink Browser Team",
    author_email="team@winkbrowser.example.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "wink-render=render_engine.main:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Markup :: HTML",
    ],
    keywords="css, cascade, layout, html, renderer",
)

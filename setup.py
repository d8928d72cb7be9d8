"""
Setup script for the tnap terminal slideshow.
"""

from setuptools import setup, find_packages

setup(
    name="tnap",
    version="0.1.0",
    description="Terminal slideshow that keeps growing while AI images are generated",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="tnap developers",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "rich>=13.0.0",
        "pillow>=10.0.0",
        "numpy>=1.24.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0.0",
        "openai>=1.0.0",
        "requests>=2.31.0",
        "term-image>=0.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tnap=tnap.main:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)

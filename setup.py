from setuptools import setup, find_packages

setup(
    name="logfacility",
    version="0.1.0",
    description="Process-wide leveled logging to stdout — verbosity gating, caller location, ANSI-colored tags",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "logfacility=logfacility.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)

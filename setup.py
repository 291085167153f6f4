from setuptools import setup, find_packages

setup(
    name="time-calculator",
    version="0.1.0",
    description="Pure h:m:s time conversions with a small CLI and result cards",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "pillow>=10.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "time-calculator=time_calculator.cli:main",
        ],
    },
)

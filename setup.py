# setup.py
from setuptools import setup, find_packages

setup(
    name="formula-catalog",
    version="0.1.0",
    description="Enumerate boolean formulas and catalog the smallest formula for every truth table",
    author="Randy Davila",
    author_email="rrd6@rice.edu",
    url="https://github.com/your-org/formula-catalog",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.24",
        "pandas>=2.0",
        "rich>=13.0",
        "tqdm>=4.60",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "formula-catalog=formula_catalog.cli:main",
        ],
    },
    python_requires=">=3.10",
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="range-pool",
    version="0.1.0",
    description="Partition an index range among a dynamically growing set of workers",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
)

from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="wordladder",
    version="0.1.0",
    description="Cheapest word ladders under a multi-resolution edit cost.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["numpy", "PyYAML"],
    tests_require=["pytest", "hypothesis", "networkx"],
    extras_require={"test": ["pytest", "hypothesis", "networkx"]},
    entry_points={"console_scripts": ["wordladder=wordladder.cli:main"]},
)

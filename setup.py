from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = fh.read().splitlines()

setup(
    name="grapho_algorithms",
    version="0.1.0",
    author="UFABC",
    author_email="author@ufabc.edu.br",
    description="Weighted graph stores with traversal, shortest-path and ordering algorithms",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ufabc/grapho_algorithms",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "grapho-algorithms=grapho_algorithms.cli:main",
        ],
    },
)

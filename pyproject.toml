[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polybio"
version = "0.1.0"
description = "Sequence utilities for synthetic biology: transforms, IUPAC variants, seqhash, codon tables and CDS fixing."
requires-python = ">=3.10"
dependencies = []
keywords = ["dna", "protein", "codon", "seqhash", "synthetic biology", "bioinformatics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polybio"]

[tool.pytest.ini_options]
addopts = "-ra"

"""
Setup script for docchunker package
"""
from setuptools import setup, find_packages
from pathlib import Path

readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

requirements_path = Path(__file__).parent / "requirements.txt"
if requirements_path.exists():
    requirements = [
        line.strip()
        for line in requirements_path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]
else:
    requirements = [
        "pyyaml>=6.0"
    ]

setup(
    name="docchunker",
    version="1.0.0",
    description="Token-bounded, structure-aware document chunking for embedding pipelines",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "hf": [
            "transformers>=4.30.0",
        ],
        "dev": [
            "pytest>=7.4.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "docchunker=docchunker.cli.chunk_cli:main",
        ],
    },
    include_package_data=True,
    keywords="chunking markdown embedding tokens rag nlp",
)

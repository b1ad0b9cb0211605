"""
Setup script for dsa-survey.

dsa-survey is the question bank and answer collection service behind the
Design System Awards entry form. It serves:

1. Award categories and their questions
2. Per-user or per-session answer recording
3. Generate payloads pairing questions with answers for document rendering

The 'dsa-survey' command runs the API server and inspects stored answers.
"""

from setuptools import find_packages, setup

setup(
    name="dsa-survey",
    version="1.0.0",
    description="Design System Awards survey API: questions, answers and generate payloads",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config", "main"],
    package_data={"dsa_survey": ["data/*.json", "data/*.yaml"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        # API
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "httpx>=0.25.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dsa-survey=dsa_survey.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Web Environment",
        "Framework :: FastAPI",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="survey design-systems awards fastapi",
)

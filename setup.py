"""
Setup script for job-board project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="job-board",
    version="1.0.0",
    packages=find_packages(include=["jobboard*", "api_service*", "frontend*", "scripts*"]),
    py_modules=["version"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "pymongo>=4.6",
        "python-dotenv>=1.0",
        "flask>=3.0",
        "requests>=2.31",
        "typing_extensions>=4.8",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-mock>=3.12",
            "httpx>=0.26",
        ],
    },
)

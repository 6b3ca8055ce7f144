import os

from setuptools import find_packages, setup

setup(
    name="structval",
    version="0.1.0",
    packages=find_packages(include=["structval", "structval.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
        ],
    },
    author="structval Contributors",
    description="Composable runtime validators that turn untrusted JSON-like data into typed values",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)

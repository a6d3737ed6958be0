import os

from setuptools import find_packages, setup

setup(
    name="vetted",
    version="0.1.0",
    packages=find_packages(include=["vetted", "vetted.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="Vetted Contributors",
    description="Validation outcomes as values: a passed value or field-scoped failures",
    long_description=open("README.md").read()
    if os.path.exists("README.md")
    else "",
    long_description_content_type="text/markdown",
)

import os

from setuptools import find_packages, setup

setup(
    name="lookslike",
    version="0.1.0",
    packages=find_packages(include=["lookslike", "lookslike.*"]),
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
    author="lookslike Contributors",
    description="Declarative structural matching for nested test fixtures",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)

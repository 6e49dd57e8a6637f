import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    if not os.path.exists(README):
        return ""
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="swagger_blocks",
    version="1.0.0",
    description="Declare Swagger 1.2 / 2.0 fragments on Python classes and aggregate them into JSON documents",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Documentation",
        "Intended Audience :: Developers",
    ],
    keywords="swagger openapi dsl api documentation json",
    license="MIT",
    packages=find_packages(exclude=["swagger_blocks.tests", "swagger_blocks.tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "swagger_blocks=swagger_blocks.swagger_blocks:swagger_blocks",
        ],
    },
    zip_safe=False,
)

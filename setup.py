import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="discovery_to_code",
    version="0.1.0",
    description="Generate C# client service classes from discovery documents",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Intended Audience :: Developers",
    ],
    keywords="discovery api client code generation csharp newtonsoft json",
    license="MIT",
    packages=find_packages(),
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
            "tree-sitter>=0.22.0",
            "tree-sitter-c-sharp>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "discovery_to_code=discovery_to_code.discovery_to_code:discovery_to_code",
        ],
    },
    include_package_data=True,
    package_data={
        "discovery_to_code": ["tests/test_data/*"],
    },
    zip_safe=False,
)

import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="swagger_to_cs",
    version="1.0.0",
    description="Generate strongly-typed async C# API clients from Swagger documents",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Intended Audience :: Developers",
    ],
    keywords="swagger openapi code generation csharp client sdk template",
    license="Apache-2.0",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
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
            "swagger_to_cs=swagger_to_cs.swagger_to_cs:swagger_to_cs",
        ],
    },
    include_package_data=True,
    package_data={
        "swagger_to_cs": ["templates/**/*.jinja2"],
    },
    zip_safe=False,
)

from setuptools import setup, find_packages

setup(
    name="dimunit",
    version="0.1.0",
    packages=find_packages(include=["dimunit", "dimunit.*"]),
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    description=(
        "Dimensional analysis arithmetic: quantities tagged with SI base dimension "
        "exponents, with dimension checked arithmetic and printf style formatting."
    ),
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.10",
)

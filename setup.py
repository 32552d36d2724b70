from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="typebind",
    version="0.1.0",
    description="Resolve the field types of generic classes under concrete type arguments",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"typebind": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        "typing_extensions>=4.6.0",
    ],
    extras_require={
        "testing": [
            "pytest",
            "pytest-cov",
            "attrs",
        ],
        "type-checking": [
            "mypy",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)

import ast
import re

from setuptools import find_packages, setup

with open("kvdict/version.py") as f:
    version_tuple = ast.literal_eval(
        re.search(r"^version_tuple\b.*= (\(.*\))$", f.read(), re.M).group(1)
    )

if isinstance(version_tuple[-1], str):
    version = ".".join(map(str, version_tuple[:-1])) + version_tuple[-1]
else:
    version = ".".join(map(str, version_tuple))

setup(
    name="KVDict",
    version=version,
    author="grantUser",
    description="A typed key-value dictionary container with ordered entries and BSON serialization.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "pymongo",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8, <4",
    keywords=["dictionary", "map", "key-value", "BSON"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    license="MIT",
    maintainer="grantUser"
)

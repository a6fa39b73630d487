""" btcamount build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import btcamount

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=btcamount.name,
    version=btcamount.__version__,
    license=btcamount.__license__,
    author=btcamount.__author__,
    author_email=btcamount.__author_email__,
    description="Exact, bounds-checked bitcoin monetary amounts",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses_json>=0.6"],
    extras_require={"test": ["pytest"]},
    keywords="bitcoin amount satoshi decimal fixed-point",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Office/Business :: Financial",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)

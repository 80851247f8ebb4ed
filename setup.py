# setup.py
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR


from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="seedlink-stations",
    version="1.0.0",
    author="Kris Kirby, KE4AHR",
    description="Station catalogs of remote Seedlink servers, cached and served over HTTP",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["seedlink_stations", "PySeedLink", "PyStationREST"]),
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Physics",
        "Topic :: System :: Networking",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0", "httpx>=0.24"],
    },
    entry_points={
        "console_scripts": [
            "seedlink-stations=seedlink_stations.server:main",
        ],
    },
    include_package_data=True,
    package_data={
        "": ["*.yaml", "*.md"],
    },
    keywords="seedlink seismology station catalog fdsn",
    license="GPLv3",
    platforms=["any"],
)

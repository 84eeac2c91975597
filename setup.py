import os
import re

from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, "geoconv", "_version.py")) as f:
    version = re.search(r'__version__ = "([^"]+)"', f.read()).group(1)

setup(
    name="geoconv",
    version=version,
    description="Convert between typed 2-D geometries and flat GeoJSON values",
    license="BSD",
    packages=["geoconv"],
    package_data={"geoconv": ["py.typed"]},
    python_requires=">=3.8",
    install_requires=["msgspec>=0.18"],
    extras_require={"test": ["pytest"]},
)

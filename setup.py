import os
import re

from setuptools import setup


def get_version():
    path = os.path.join(os.path.dirname(__file__), "geotree", "_version.py")
    with open(path) as f:
        return re.search(r'__version__ = "(.*)"', f.read()).group(1)


setup(
    name="geotree",
    version=get_version(),
    license="BSD",
    description="A typed GeoJSON object model with order-insensitive comparison",
    packages=["geotree"],
    package_data={"geotree": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.18.5"],
    extras_require={"test": ["pytest"]},
)

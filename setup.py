# setup.py
from setuptools import setup, find_packages

setup(
    name="objmesh",
    version="1.0.0",
    description="Wavefront OBJ loader producing deduplicated triangle mesh buffers",
    packages=find_packages(include=["objmesh", "objmesh.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["objmesh=objmesh.__main__:main"],
    },
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="horizon3d",
    version="1.0.0",
    description="Horizon3D – ellipsoidal horizon culling",
    packages=find_packages(include=["horizon3d", "horizon3d.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)

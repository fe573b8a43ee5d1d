# setup.py
from setuptools import setup, find_packages

setup(
    name="orrery3d",
    version="1.0.0",
    description="Animated solar-system scene on a small Python 3D engine",
    packages=find_packages(include=["orrery3d", "orrery3d.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "glfw>=2.5.0",
        "PyOpenGL>=3.1.5",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    package_data={
        'orrery3d': ['resources/shaders/*.glsl'],
    },
)

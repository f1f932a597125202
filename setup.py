from setuptools import find_packages, setup

setup(
    name="Lattice",
    version="0.0.1",
    packages=find_packages(where="py", include=["Lattice", "Lattice.*"]),
    package_dir={"": "py"},
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
)

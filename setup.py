from setuptools import setup, find_packages


setup(
    name="orbrot",
    version="1.0.0",
    description="Quaternion rotations for reorienting vectors and N-body particle state",
    packages=find_packages(include=["orbrot", "orbrot.*"]),
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.24",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
)

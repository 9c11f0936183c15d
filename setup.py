from setuptools import setup, find_packages

setup(
    name="cornerkit",
    version="1.0.0",
    description="Ranked corner extraction from corner response matrices",
    author="cornerkit",
    packages=find_packages(include=["cornerkit", "cornerkit.*"]),
    install_requires=[
        "opencv-python>=4.8.0",
        "numpy>=1.24.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
)

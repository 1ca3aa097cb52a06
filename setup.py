from setuptools import setup, find_packages

setup(
    name="eez-watch",
    version="0.1",
    packages=find_packages(include=["eez_watch", "eez_watch.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.21.0",
        "pandas>=1.5.0,<3",
        "geopandas>=0.9.0",
        "shapely>=1.7.0",
        "requests>=2.26.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["eez-watch=eez_watch.main:main"],
    },
)

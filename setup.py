# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="funcnamer",
    version="1.0.0",
    description="Names anonymous JavaScript functions so stack traces and profilers can tell them apart",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["funcnamer*"]),
    install_requires=[
        "esprima>=4.0.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'funcnamer=funcnamer.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

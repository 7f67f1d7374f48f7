# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="dirscout",
    version="1.0.0",
    description="Local filesystem exploration: directory index, tree rendering, pattern search and file comparison",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirscout", "dirscout.*"]),
    package_data={
        "dirscout.interface.locales": ["*.json"],
    },
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirscout=dirscout.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

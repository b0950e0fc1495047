import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='carhire',
    version='1.0.0',
    license='MIT',
    description='A car hire record store with vehicles, customers, and reservations.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.8',
    install_requires=[
        'aiohttp>=3.8',
        'aiohttp-cors>=0.7',
        'marshmallow>=3.13',
        'uvloop',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-aiohttp',
            'pytest-asyncio',
            'faker',
        ],
    },
    entry_points={
        'console_scripts': ['carhire=carhire.cli:run'],
    },
)

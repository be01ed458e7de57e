from setuptools import setup, find_packages

setup(
    name='lexica',
    version='0.1.0',
    url='https://github.com/Mardroemmar/lexica',
    author='Mariell Hoversholm',
    description='Immutable bi-directional index of unique keys to unique values',
    license='MPL-2.0',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.8',
    install_requires=[],
    extras_require={'test': ['pytest==8.2.2']},
)

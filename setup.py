from setuptools import find_packages, setup

setup(
    name='discrete_operators',
    version='0.1.0',
    packages=find_packages(include=['discrete_operators', 'discrete_operators.*']),
    install_requires=[
        'matplotlib',
        'potpourri3d',
        'torch'
    ],
    extras_require={
        'test': ['pytest']
    }
)

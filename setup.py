from setuptools import setup

setup(
    name='jacobipoly',
    packages=['jacobipoly'],
    version='0.1',
    install_requires=[
        'numpy',
        'scipy',
    ],
    extras_require={
        'test': [
            'pytest',
            'sympy',
            'mpmath',
        ],
    },
)

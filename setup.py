"""
Setup script for perfgate.

Statistical performance-regression engine: turns repeated timing and
utilization measurements into a pass/fail verdict about whether a change
regressed performance.
"""

import os

from setuptools import setup

setup(
    name='perfgate',
    version='0.2.0',
    author='perfgate maintainers',
    description='Statistical performance regression detection for benchmark samples',
    long_description=open('README.md').read() if os.path.exists('README.md') else '',
    long_description_content_type='text/markdown',
    packages=[
        'perfgate',
        'perfgate.cli',
        'perfgate.core',
        'perfgate.regression',
        'perfgate.statistics',
    ],
    package_dir={'': 'src'},
    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.22.0',
        'scipy>=1.7.0',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'hypothesis>=6.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'perfgate=perfgate.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Quality Assurance',
        'Topic :: Software Development :: Testing',
    ],
    zip_safe=False,
)

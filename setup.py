"""
Setup script for gd3dmath.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[dev]"    # With dev dependencies

Pure Python package, no compiled extensions. Sources live under src/:
    - src/gd3dmath/mathutils/  (vector, plane, matrix4, viewport, ...)
"""

from setuptools import setup, find_packages


setup(
    name='gd3dmath',
    version='0.1.0',
    description='Direct3D-style affine/projective math: vectors, planes, 4x4 matrices, viewports.',
    python_requires='>=3.9',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=[
        'numpy',
    ],
    extras_require={
        'dev': [
            'pytest',
        ],
    },
)

import setuptools

setuptools.setup(
    name = 'smoothpath',
    version = '1.0',
    description = 'smooth cubic Bezier curves through 2D points',
    packages = setuptools.find_packages(exclude=['tests']),
    python_requires='>=3.6',
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
)

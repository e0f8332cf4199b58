import setuptools

setuptools.setup(
    name = 'edgematch',
    version = '0.1',
    description = 'area-based matching of puzzle-piece edge curves',
    packages = setuptools.find_packages(exclude=['tests']),
    python_requires='>=3.8',
    install_requires=['numpy', 'scipy', 'PyYAML'],
    extras_require={'test': ['pytest']},
)

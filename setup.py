from setuptools import setup, find_packages

setup(
    name='versync',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    version='0.1.0',
    description='Keeps a VERSION file and the version field of JSON manifests in step',
    keywords=['versioning', 'semver', 'release', 'package.json', 'cli'],
    classifiers=['Development Status :: 3 - Alpha',
                 'Intended Audience :: Developers',
                 'Topic :: Software Development :: Build Tools',
                 'Programming Language :: Python :: 3'],
    python_requires='>=3.10',
    install_requires=['docopt', 'rich'],
    extras_require={'test': ['pytest']},
    entry_points={
        "console_scripts": ['versync = versync.versync:run_versync']
    }
)

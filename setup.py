from glob import glob
from setuptools import setup


setup(
    name='torchcalc',
    use_scm_version={
        # Source tarballs and plain copies carry no git metadata.
        'fallback_version': '0.1.0',
    },
    description='Scientific calculator core of the Torch Lite widget',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['torchcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)

from glob import glob
from setuptools import setup


setup(
    name='mathexpr',
    use_scm_version={
        # Source tarballs and plain checkouts carry no tags.
        'fallback_version': '0.1.0',
    },
    description='Mathematical expression evaluator',
    install_requires=[
        'regex',
        'prompt_toolkit',
        'numpy',
    ],
    packages=['mathexpr'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
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

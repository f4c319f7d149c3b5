from glob import glob
from setuptools import setup


setup(
    name='calcbrain',
    use_scm_version={
        'fallback_version': '0.1.0',
    },
    description='RPN calculator brain with infix descriptions',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['calcbrain'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
            'mypy',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)

from glob import glob
from setuptools import setup


setup(
    name='calc',
    use_scm_version={
        # Not every checkout is a git repository.
        'fallback_version': '0.1.0',
    },
    description='Infix arithmetic calculator',
    python_requires='>=3.8',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['calc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)

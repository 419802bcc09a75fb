import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="scrivener-notes",
    version="0.1.0",
    description="Keeps track of plaintext note files by name, with tags.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    packages=setuptools.find_packages('src'),
    package_dir={'': 'src'},
    entry_points={
        'console_scripts': [
            'scrivener = scrivener.cli:main'
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        'Mako>=1.1.3',
        'pyyaml>=5.3.1',
        'terminaltables',
    ],
    extras_require={
        'test': [
            'pytest',
            'pyfakefs',
            'pytest-mock',
        ],
    },
    python_requires='>=3.7',
)

import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pyzeros",
    version="0.1.0",
    author="Eric J. Whitney",
    author_email="eric.j.whitney@optusnet.removethispart.com.au",
    description="Solvers for finding the zeros of scalar functions and "
                "polynomials.",
    include_package_data=True,  # <<< Note!
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest', 'scipy'],
        'examples': ['matplotlib'],
        'doc': ['sphinx', 'pydata-sphinx-theme'],
    },
    keywords='root finding zeros solver polynomial numerical',
    long_description=long_description,
    long_description_content_type="text/markdown",
    setup_requires=["numpy"],
    url="https://github.com/ericjwhitney/pyzeros",
    packages=setuptools.find_packages(include=['pyzeros', 'pyzeros.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)

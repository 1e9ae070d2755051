import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="ndpoint",
    version="0.1",
    description="N-dimensional points with elementwise and scalar arithmetic",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires=[
        "attrs",
        "expression",
        "numpy",
        "numpydoc_decorator",
        "pyyaml",
    ],
    extras_require={
        "test": ["hypothesis", "pytest"],
    },
)

from setuptools import setup

with open("README.md") as f:
    readme = f.read()

about = {}
with open("routefinder/_version.py") as f:
    exec(f.read(), about)

setup(
    name=about["__title__"],
    version=about["__version__"],
    description=about["__description__"],
    long_description=readme,
    long_description_content_type="text/markdown",
    author=about["__author__"],
    author_email=about["__author_email__"],
    url=about["__url__"],
    license=about["__license__"],
    packages=[
        "routefinder",
        "routefinder.maps",
        "routefinder.maps.a_star",
        "routefinder.search",
        "routefinder.routing",
        "routefinder.observer",
    ],
    install_requires=[
        "openlr==1.0.1",
        "shapely",
        "numpy",
    ],
    extras_require={
        "test": ["geographiclib", "pytest"],
    },
    test_suite="tests",
    python_requires=">=3.8",
    classifiers=[
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
)

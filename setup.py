#!python

import os.path, sys
from setuptools import setup, find_packages

sys.path.insert(0, os.path.abspath("src"))
from nordstem import __version__, versionstring


if __name__ == "__main__":
    setup(
        name="Nordstem",
        version=versionstring(),
        package_dir={'': 'src'},
        packages=find_packages("src"),

        description="Pure-Python Snowball stemmers for Finnish and Swedish.",
        long_description=open("README.txt", encoding="utf-8").read(),

        license="Two-clause BSD license",
        keywords="stemming snowball finnish swedish search index",

        zip_safe=True,
        python_requires=">=3.6",
        extras_require={'test': ['pytest']},

        classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: Finnish",
        "Natural Language :: Swedish",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: Indexing",
        "Topic :: Text Processing :: Linguistic",
        ],
    )

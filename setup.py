#!/usr/bin/env python
import os
from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open(os.path.join(os.path.dirname(__file__), "VERSION"), "r") as fh:
    version = fh.read().strip()

setup(name='gpexplorer',
      version=version,
      author='gpexplorer developers',
      description='gpexplorer: interactive 1D Gaussian process regression',
      long_description=long_description,
      long_description_content_type="text/markdown",
      classifiers=[
          "Programming Language :: Python :: 3",
          "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
          "Operating System :: OS Independent",
      ],
      packages=['gpexplorer', 'gpexplorer.num', 'gpexplorer.core',
                'gpexplorer.kernel', 'gpexplorer.plot'],
      license='GPLv3',
      install_requires=[
             "numpy",
             "scipy>=1.8.0",
             "matplotlib"
         ],
      extras_require={
          "test": ["pytest"],
      },
      python_requires=">=3.8",
      )

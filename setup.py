#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

EMERGE_PATH = HERE / "emerge"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(EMERGE_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='pyemerge',
      version=VERSION,
      description='Reference-preserving updates of nested dicts and lists',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.9',
      packages=find_packages(include=['emerge', 'emerge.*']),
      install_requires=[
          'colorama>=0.4.6',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'emerge = emerge.__main__:main_dispatch',
              'emerge-get = emerge.showapp:main',
              'emerge-put = emerge.updateapp:main_put',
              'emerge-patch = emerge.updateapp:main_patch',
              'emerge-merge = emerge.updateapp:main_merge',
          ],
      },
      classifiers=[
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
      ],
    )

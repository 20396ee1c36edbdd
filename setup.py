"""
Setup module for nitf_transformer.
"""

import os
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))
# Get the long description from the README file
with open(os.path.join(here, 'README.md'), 'r') as f:
    long_description = f.read()


# Get the relevant setup parameters from the package
parameters = {}
with open(os.path.join(here, 'nitf_transformer', '__about__.py'), 'r') as f:
    exec(f.read(), parameters)


def my_test_suite():
    import unittest
    test_loader = unittest.TestLoader()
    test_suite = test_loader.discover('tests', top_level_dir='.')
    return test_suite


setup(name=parameters['__title__'],
      version=parameters['__version__'],
      description=parameters['__summary__'],
      long_description=long_description,
      long_description_content_type='text/markdown',
      packages=find_packages(exclude=('*tests*', )),
      author=parameters['__author__'],
      install_requires=['numpy>=1.11.0', 'sarpy>=1.3.0'],
      extras_require={
          'tests': ['pytest', ],
          'all': ['pytest', ],
      },
      zip_safe=False,
      test_suite="setup.my_test_suite",
      python_requires='>=3.8',
      entry_points={
          'console_scripts': [
              'nitf_metadata=nitf_transformer.utils.nitf_metadata:main',
          ],
      },
      classifiers=[
          'Development Status :: 4 - Beta',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: MIT License',
          'Programming Language :: Python :: 3',
          'Programming Language :: Python :: 3.8',
          'Programming Language :: Python :: 3.9',
          'Programming Language :: Python :: 3.10',
          'Programming Language :: Python :: 3.11'
      ],
      platforms=['any'],
      license='MIT')

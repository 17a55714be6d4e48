#!/usr/bin/env python

from setuptools import setup, find_packages

import httpdate_codec

setup(name='httpdate_codec',
      version=httpdate_codec.__version__,
      description='Parse, check and format HTTP dates.',
      long_description=open("README.md").read(),
      long_description_content_type="text/markdown",
      license = "MIT",
      packages=find_packages(exclude=["test", "test.*"]),
      package_dir={'httpdate_codec': 'httpdate_codec'},
      scripts=['bin/httpdate_cli'],
      python_requires=">=3.8",
      install_requires=[
          'markdown >= 3.0',
          'markupsafe >= 2.0',
          'typing_extensions >= 3.7'
      ],
      extras_require={
          'dev': [
          'mypy',
          'pytest'
          ],
          'test': [
          'pytest'
          ]
      },
      classifiers=[
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Environment :: Web Environment',
        'Topic :: Internet :: WWW/HTTP',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: MIT License',
      ],
)

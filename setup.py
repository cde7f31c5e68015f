# coding: utf-8
# (c) Copyright IBM Corp. 2025

import re
from os import path

from setuptools import find_packages, setup

pwd = path.abspath(path.dirname(__file__))

# Importing sparkprobe.version would import the package and its dependencies
with open(path.join(pwd, "sparkprobe", "version.py"), encoding="utf-8") as f:
    VERSION = re.search(r"^VERSION = \"([^\"]+)\"", f.read(), re.M).group(1)

# Import README.md into long_description
with open(path.join(pwd, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()


setup(name='sparkprobe',
      version=VERSION,
      license='MIT',
      description='Identity probes for Spark driver and executor processes',
      packages=find_packages(exclude=['tests', 'tests.*']),
      long_description=long_description,
      long_description_content_type='text/markdown',
      zip_safe=False,
      python_requires='>=3.8',
      install_requires=['PyYAML>=5.1'],
      extras_require={
          'test': ['pytest>=7.0',
                   'pytest-mock>=3.10'],
      },
      entry_points={
          'console_scripts': ['sparkprobe = sparkprobe.__main__:main'],
      },
      keywords=['spark', 'profiling', 'metrics', 'monitoring', 'jvm'],
      classifiers=[
          'Development Status :: 5 - Production/Stable',
          'Intended Audience :: Developers',
          'Intended Audience :: System Administrators',
          'License :: OSI Approved :: MIT License',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          'Topic :: System :: Monitoring',
          'Topic :: Software Development :: Libraries :: Python Modules'])

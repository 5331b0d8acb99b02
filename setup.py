# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
"""
A setuptools based setup module.
See:
https://packaging.python.org/guides/distributing-packages-using-setuptools/
https://github.com/pypa/sampleproject
"""

# Always prefer setuptools over distutils
from setuptools import setup, find_packages
import os

here = os.path.abspath(os.path.dirname(__file__))

# the package cannot be imported before its dependencies are installed
version_info = dict()
with open(os.path.join(here, 'src', 'BadDataEngine', '__version__.py'), encoding='utf-8') as f:
    exec(f.read(), version_info)

long_description = """# BadDataEngine

Chi-squares bad data detection for power systems state estimation.

Given the solution of a state estimation and the measurements that produced it,
BadDataEngine computes the normalized residuals of every measurement, the degrees of freedom
of the problem from the network topology, and tells whether the measurement set
probably contains gross errors.

## Installation

pip install BadDataEngine
"""

description = 'Chi-squares bad data detection for power systems state estimation'

pkgs_to_exclude = ['docs', 'research', 'tests', 'tutorials']

packages = find_packages(where='src', exclude=pkgs_to_exclude)

# ... so we have to do the filtering ourselves
packages2 = list()
for package in packages:
    elms = package.split('.')
    excluded = False
    for exclude in pkgs_to_exclude:
        if exclude in elms:
            excluded = True

    if not excluded:
        packages2.append(package)

dependencies = ['setuptools>=41.0.1',
                "numpy>=1.24",
                "scipy>=1.10",
                "pandas>=2.0",
                ]

extras_require = {
    'test': ["pytest>=7.2"]
}

setup(
    name='BadDataEngine',  # Required
    version=version_info['__BadDataEngine_VERSION__'],  # Required
    license='MPL2',
    description=description,  # Optional
    long_description=long_description,  # Optional
    long_description_content_type='text/markdown',  # Optional (see note above)
    classifiers=[
        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',
        'Programming Language :: Python :: 3.8',
    ],
    keywords='power systems state estimation bad data',  # Optional
    packages=packages2,  # Required
    package_dir={'': 'src'},
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=dependencies,
    extras_require=extras_require,
)

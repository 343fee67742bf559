# -*- coding: utf-8 -*-
from setuptools import setup
from setuptools import find_packages
import nevernull

with open('README.md', encoding='utf-8') as file:
    long_description = file.read()

setup(
    name='nevernull',
    version=nevernull.__version__,
    description='Null-safe navigation of nested values. Read any chain of attributes, unwrap by calling.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',

    packages=find_packages(exclude=['tests']),
    install_requires=[],
    include_package_data=True,
    zip_safe=False,
    test_suite='tests',
    extras_require={
        'testing': ['pytest', 'pytest-xdist'],
    },

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)

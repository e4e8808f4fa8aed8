# -*- coding: utf-8 -*-
import codecs
from setuptools import setup, find_packages


tests_require = [
    'Flask>=2.2',
    'pytest>=7.0',
]

setup(
    name='telerivet-client',
    version='1.8.0',
    packages=find_packages(exclude=['*tests*']),
    url='https://telerivet.com/api',
    license='MIT',
    description='Client library for the Telerivet REST API',
    long_description=codecs.open('README.rst', encoding='utf-8').read(),
    python_requires='>=3.8',
    tests_require=tests_require,
    install_requires=[
        'requests>=2.20',
        'jsonschema>=3.0',
        'blinker>=1.3',
    ],
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Communications :: Telephony',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    zip_safe=False,
    extras_require={
        'tests': tests_require,
    }
)

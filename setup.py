#!/usr/bin/env python

from setuptools import setup, find_packages

long_description = open("README.rst").read()
install_requires = ['numpy>=1.18.5',
                    'quantities>=0.12.1']
extras_require = {
    'test': ['pytest'],
}
extras_require["all"] = sum(extras_require.values(), [])

with open("spikeread/version.py") as fp:
    d = {}
    exec(fp.read(), d)
    spikeread_version = d['version']

setup(
    name="spikeread",
    version=spikeread_version,
    packages=find_packages(include=["spikeread", "spikeread.*"]),
    install_requires=install_requires,
    extras_require=extras_require,
    author="spikeread authors and contributors",
    description="spikeread normalizes spike timestamps, waveforms and unit ids "
                "decoded from a range of acquisition systems into one "
                "canonical dataset",
    long_description=long_description,
    license="BSD-3-Clause",
    python_requires=">=3.8",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering']
)

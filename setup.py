#!/usr/bin/env python3

from setuptools import setup

setup(
    name="pngme",
    version="1.0.0",
    description='Hide messages in the chunks of PNG files',
    long_description="""A pure python package to read, edit and write the chunk stream of PNG files,
    with a command line tool to hide and recover messages in custom chunks""",
    license='GPL-3.0',
    classifiers=[
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: GNU General Public License (GPL)',
        'Programming Language :: Python :: 3',
    ],
    keywords='png library steganography chunk',
    packages=["pngme"],
    install_requires=['requests'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['pngme=pngme.__main__:main']},
    python_requires='>=3.8',
    package_data={},
    data_files=[],
)

# -*- coding: utf-8 -*-

"""
frontdesk setuptools configuration file.
"""

from setuptools import setup


def readme():
    """Re-use the README.md file."""
    with open("README.md") as f:
        return f.read()


setup(
    name="frontdesk",
    version="0.1.0",
    description="A text-based hotel front-desk console built on the observer pattern.",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Natural Language :: English",
        "License :: CeCILL-C Free Software License Agreement (CECILL-C)",
        "Programming Language :: Python :: 3",
    ],
    keywords="observer hotel notification",
    url="http://opensource.umr-cnrm.fr",
    author="Louis-François Meunier",
    author_email="louis-francois.meunier@meteo.fr",
    license="CECILL-C",
    package_dir={"": "src"},
    packages=["frontdesk", "frontdesk.entrypoints"],
    scripts=[
        "bin/frontdesk_demo.py",
        "bin/frontdesk_dumppalette.py",
    ],
    entry_points={
        "console_scripts": [
            "frontdesk_demo=frontdesk.entrypoints.demo:main",
        ],
    },
    python_requires=">=3.7",
    install_requires=["urwid"],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    zip_safe=True,
)

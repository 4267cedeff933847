#!/usr/bin/env python

from setuptools import find_packages, setup

install_requires = [
    "Django>=4.2",
    "Pillow>=9.1.0",
]

# Testing dependencies
testing_extras = [
    "pytest>=7.0",
    "pytest-django>=4.5",
    "beautifulsoup4>=4.8",
]

setup(
    name="django-mediablocks",
    version="1.0",
    description="A media block type for block-based Django CMS pages.",
    license="BSD",
    packages=find_packages(exclude=["tests", "mediablocks.tests*"]),
    include_package_data=True,
    package_data={"mediablocks": ["templates/mediablocks/*/*.html"]},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Web Environment",
        "Framework :: Django",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP :: Site Management",
    ],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require={"testing": testing_extras},
    zip_safe=False,
)

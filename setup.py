# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from setuptools import setup, find_packages

setup(
    name="svcgen",
    version="0.1.0",
    description="Python client, types, provider and server generation from service models",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["svcgen", "svcgen.*"]),
    package_data={"svcgen.templates": ["sources/*.j2"]},
    install_requires=[
        "black>=23.1",
        "click>=8.0",
        "jinja2>=3.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "pyyaml>=6.0",
        "rich>=12.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Programming Language :: Python",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
    ],
    license="MIT",
    entry_points={
        'console_scripts': [
            'svcgen=svcgen.cli:main',
        ],
    },
    python_requires=">=3.8",
)

# This file is part of Forgetful.
#
# Copyright the Forgetful Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import sys
from pathlib import Path

import setuptools

if sys.version_info[:2] < (3, 9):
    raise Exception(
        "You are trying to install Forgetful using Python "
        f"{sys.version.split()[0]}, but it requires Python 3.9 or later."
    )


def local_file(name):
    return Path(__file__).absolute().parent.joinpath(name).relative_to(Path.cwd())


SOURCE = str(local_file("src"))
README = local_file("README.rst")


# Assignment to placate pyflakes. The actual version is from the exec that follows.
__version__ = None
exec(local_file("src/forgetful/version.py").read_text(encoding="utf-8"))
assert __version__ is not None


extras = {
    "pytest": ["pytest>=7.0"],
    "hypothesis": ["hypothesis>=6.0"],
}

extras["test"] = sorted(set(extras["pytest"] + extras["hypothesis"]))
extras["all"] = sorted(set(sum(extras.values(), [])))


setuptools.setup(
    name="forgetful",
    version=__version__,
    packages=setuptools.find_packages(SOURCE),
    package_dir={"": SOURCE},
    license="MPL-2.0",
    description="Scope-bound observation of items, for cycle detection",
    zip_safe=False,
    extras_require=extras,
    install_requires=["attrs>=22.2.0"],
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: Libraries",
    ],
    long_description=README.read_text(encoding="utf-8"),
    long_description_content_type="text/x-rst",
)

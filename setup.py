import setuptools

from zulipwidgets import __version__

setuptools.setup(
    name="zulipwidgets",
    version=__version__,
    url="https://github.com/mautrix/zulipwidgets",

    author="Tulir Asokan",
    author_email="tulir@maunium.net",

    description="Typed parsing of Zulip submessages (widgets like polls).",
    long_description=open("README.rst").read(),

    packages=setuptools.find_packages(),

    install_requires=[
        "attrs>=18.1.0",
    ],
    extras_require={
        "lint": ["black==22.1.0", "isort"],
        "test": ["pytest"],
    },
    python_requires="~=3.8",

    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Topic :: Communications :: Chat",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],

    package_data={
        "zulipwidgets": ["py.typed"],
    },
)

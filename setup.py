import os.path
from setuptools import find_packages, setup

# the directory containing this file
ROOT = os.path.dirname(__file__)

# the text of the README file
with open(os.path.join(ROOT, "README.md"), "r") as f:
    README = f.read()

# the version string of the package
VERSION: dict[str, str] = {}
with open(os.path.join(ROOT, "contentshortcodes", "_version.py"), "r") as f:
    exec(f.read(), VERSION)

setup(
    name="content-shortcodes",
    version=VERSION["__version__"],
    description="Expand content shortcodes such as buttons, alerts, galleries and tabs into HTML markup",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Content Shortcodes contributors",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    python_requires=">=3.10",
    packages=find_packages(exclude=("tests",)),
    include_package_data=True,
    install_requires=[
        "cattrs >= 23.1",
        "markdown",
        "orjson",
        "pymdown-extensions",
        "PyYAML",
        "requests",
        "typing-extensions; python_version < '3.12'",
    ],
    extras_require={
        "test": ["lxml"],
    },
    entry_points={
        "console_scripts": ["content-shortcodes = contentshortcodes.__main__:main"],
    },
)

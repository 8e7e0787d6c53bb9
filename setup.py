import re

from setuptools import find_packages, setup


with open("termask/__init__.py", "rb") as fh:
    init_text = fh.read().decode()
    VERSION = re.search(r"__version__ = \"(.*?)\"", init_text).group(1)

setup(
    name="termask",
    version=VERSION,
    packages=find_packages(
        exclude=["tests", "tests.*", "examples", "examples.*"]
    ),
    python_requires=">=3.7.0",
    install_requires=[],
    extras_require={
        "tests": ["pytest"],
    },
    license="MIT",
    description="Ask questions in the terminal, or answer them from a recorded file.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    data_files=[("", ["LICENSE"])],
    zip_safe=True,
    entry_points={
        "console_scripts": [
            "termask = termask:cli",
        ],
    },
)

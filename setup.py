"""
Setup file.
"""

import os

from setuptools import find_packages, setup

URL = "https://github.com/cubemk/cubemk"
KEYWORDS = "embedded stm32 cubemx makefile firmware microcontroller build-info"
HERE = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(HERE, "src", "cubemk", "__init__.py"), encoding="utf-8") as fd:
    VERSION = next(
        line.split("=")[1].strip().strip('"')
        for line in fd
        if line.startswith("__version__")
    )


if __name__ == "__main__":
    setup(
        name="cubemk",
        version=VERSION,
        description="Extract build information from STM32CubeMX generated Makefiles",
        keywords=KEYWORDS,
        url=URL,
        python_requires=">=3.8",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=[],
        extras_require={"test": ["pytest"]},
        entry_points={"console_scripts": ["cubemk=cubemk.cli:main"]},
        include_package_data=True)

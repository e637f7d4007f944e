from pathlib import Path

from setuptools import find_packages, setup

NAME = "cfdimx"
DESCRIPTION = "Visor de CFDI: extracción y validación estructural de facturas electrónicas."

README = Path("README.md")
LONG_DESCRIPTION = README.read_text(encoding="utf-8") if README.exists() else DESCRIPTION

setup(
    name=NAME,
    version="0.1.0",
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"cfdimx": ["data/*.json"]},
    python_requires=">=3.10",
    install_requires=[
        "lxml>=4.9",
        "openpyxl>=3.1",
    ],
    extras_require={
        "tests": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "cfdimx = cfdimx.cli:main",
        ],
    },
)

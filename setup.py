from pathlib import Path
from setuptools import setup, find_packages
import re


HERE = Path(__file__).parent


def _read_text(p: Path) -> str:
    """Read a UTF-8 text file, or return an empty string if it doesn't exist."""
    if not p.exists():
        return ""
    return p.read_text(encoding="utf-8")


def read_requirements(req_file: Path):
    lines = _read_text(req_file).splitlines()
    return [l.strip() for l in lines if l.strip() and not l.strip().startswith("#")]


def get_version(pkg_init: Path):
    m = re.search(r"__version__\s*=\s*['\"]([^'\"]+)['\"]", _read_text(pkg_init))
    return m.group(1) if m else "0.0.0"


long_description = _read_text(HERE / "README.md")

install_requires = read_requirements(HERE / "requirements.txt")

setup(
    name="bundle-inspect",
    version=get_version(HERE / "src" / "bundle_inspect" / "__init__.py"),
    description="Dump Android SDK bundles and extract device-specific APKs with bundletool",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=install_requires,
    extras_require={"test": read_requirements(HERE / "requirements-test.txt")},
    entry_points={
        "console_scripts": [
            "bundle-inspect=bundle_inspect.main:main",
        ]
    },
    python_requires=">=3.9",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)

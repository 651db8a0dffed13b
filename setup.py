"""Setup configuration for the remote browser CDP connector.

- Package as "cdp-remote-browser" for pip installation
- Support development mode (pip install -e .)
- Engine libraries are extras: [puppeteer] pulls pyppeteer, [playwright] pulls playwright
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text() if readme_path.exists() else ""


def read_requirements(name):
    path = Path(__file__).parent / name
    if not path.exists():
        return []
    return [
        line.strip()
        for line in path.read_text().splitlines()
        if line.strip() and not line.startswith("#")
    ]


setup(
    name="cdp-remote-browser",
    version="0.1.0",
    description="Attach puppeteer or playwright to an already-running browser over CDP",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",

    # Package discovery
    packages=find_packages(include=["remote_browser", "remote_browser.*"]),

    # Dependencies
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "puppeteer": ["pyppeteer>=1.0.2"],
        "playwright": ["playwright>=1.40"],
        "dev": read_requirements("requirements-dev.txt"),
    },

    # Python version requirement
    python_requires=">=3.10",

    # PyPI classifiers
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Testing",
        "Topic :: Internet :: WWW/HTTP :: Browsers",
    ],

    # Keywords for PyPI search
    keywords="chrome devtools cdp remote browser puppeteer playwright automation",
)

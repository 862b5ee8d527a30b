"""Setup script for zonedtime, timezone-aware timestamps with pluggable providers."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read requirements, separating test-only packages
requirements_file = Path(__file__).parent / "requirements.txt"
requirements = []
test_requirements = []

if requirements_file.exists():
    for line in requirements_file.read_text().splitlines():
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue

        if "pytest" in line:
            test_requirements.append(line)
        else:
            requirements.append(line)

setup(
    name="zonedtime",
    version="0.1.0",
    description="Timezone-aware timestamps with pluggable timezone providers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="zonedtime developers",
    # Package configuration
    packages=find_packages(include=["zonedtime", "zonedtime.*"]),
    include_package_data=True,
    # Dependencies
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
        "dev": test_requirements
        + [
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.0.0",
        ],
    },
    python_requires=">=3.11",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Internationalization",
    ],
    keywords="timezone datetime zoneinfo pytz dateutil dst",
    entry_points={
        "console_scripts": [
            "zonedtime=zonedtime.__main__:main",
        ],
        # Convention-based provider discovery; third-party packages add their own.
        "zonedtime.providers": [
            "utc=zonedtime.providers.utc_only:UTCOnlyProvider",
            "zoneinfo=zonedtime.providers.zoneinfo_provider:ZoneInfoProvider",
            "pytz=zonedtime.providers.pytz_provider:PytzProvider",
            "dateutil=zonedtime.providers.dateutil_provider:DateutilProvider",
        ],
    },
    zip_safe=False,
)

from setuptools import setup, find_namespace_packages
from os import path

requires = [
    "colorlog~=6.4",
    # AESGCM and PBKDF2HMAC for the response cache
    "cryptography>=42",
    # lower bound because of pydantic v2 model_config and model_validate_json
    "pydantic~=2.0",
    "python-dateutil~=2.8",
    "pyyaml~=6.0",
    "tornado~=6.0",
]


# read the contents of your README file
this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

version = "1.0.0"

setup(
    version=version,
    python_requires=">=3.11",  # also update classifiers
    # Meta data
    name="rego-s2",
    description="Client for the XML API and event stream of Lenel S2 NetBox access control appliances",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Inmanta",
    author_email="code@inmanta.com",
    license="Apache Software License 2",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "Operating System :: POSIX :: Linux",
        "Topic :: Security",
        "Topic :: System :: Systems Administration",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="lenel s2 netbox access-control siem",
    # Packaging
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["rego*"]),
    # https://www.python.org/dev/peps/pep-0561/#packaging-type-information
    zip_safe=False,
    include_package_data=True,
    install_requires=requires,
    extras_require={
        "test": ["pytest>=7", "pytest-asyncio>=0.23"],
    },
)

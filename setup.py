from pathlib import Path
from setuptools import setup, find_packages


with open("README.md") as f:
    long_description = f.read()


def list_requirements(req_file: str) -> list:
    """
    Get all dependency names and versions from
    requirements.txt and append them to a list.
    """
    req_file = Path(req_file)
    req_list = []

    with open(req_file, "r") as requirements:
        for requirement in requirements:
            requirement = requirement.strip()
            if requirement and not requirement.startswith("#"):
                req_list.append(requirement)

    return req_list


setup(
    name="contract-addresses",
    version="0.1",
    license="MIT",
    description="Deployed contract address lookup from build artifacts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: MIT License",
    ],
    python_requires=">=3.7",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"contract_addresses": ["resources/conf/*.toml"]},
    install_requires=list_requirements("requirements.txt"),
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "contract-addresses=contract_addresses.cli:main",
        ]
    },
)

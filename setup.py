from setuptools import find_packages, setup

setup(
    name="licgate",
    version="0.0.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "cryptography",
        "click",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "licgate=licgate.cli:cli",
        ],
    },
)

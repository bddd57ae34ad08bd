from setuptools import setup, find_packages

setup(
    name="twap-from-file",
    version="0.1.0",
    packages=find_packages(include=["twap_from_file", "twap_from_file.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "PyYAML>=6.0",
        "pandas>=2.0.0",
        "numpy>=1.24.0",
        "sortedcontainers>=2.4.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "black>=23.7.0",
            "isort>=5.12.0",
            "flake8>=6.1.0",
            "mypy>=1.4.1",
        ]
    },
    entry_points={
        "console_scripts": [
            "twap-from-file=twap_from_file.cli:main",
        ]
    },
    python_requires=">=3.11",
)

from setuptools import setup, find_packages

setup(
    name="zksolidity_package",
    version="0.1.0",
    description="A package to generate Solidity verifiers for Groth16 proofs",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    entry_points={
        "console_scripts": [
            "zksolidity-verifier=zksolidity.cli:main",
        ],
    },
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)

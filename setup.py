from setuptools import setup, find_packages


setup(
    name="dprng",
    version="0.1",
    packages=find_packages(include=["dprng", "dprng.*"]),
    description="A deterministic, cross-language reproducible PRNG built on an S-box hash.",
    install_requires=[
        "pycryptodomex>=3.23.0",
        "argon2-cffi>=23.1.0",
    ],
    entry_points={
        "console_scripts": [
            "dprng=dprng.cli:main",
        ]
    },
)

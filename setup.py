from setuptools import setup, find_packages


setup(
    name="saltkit",
    version="0.1",
    packages=find_packages(include=["saltkit", "saltkit.*"]),
    description="Secure salts that carry their own length, salted byte buffers, and CSPRNG-seeded random integers.",
    python_requires=">=3.8",
    install_requires=[
        "pycryptodomex>=3.23.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
)

# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- MODELS & CONFIG ---
    "pydantic>=2.0.0",
    "pyyaml>=6.0.0",
    "python-dotenv>=1.0.0",

    # --- NETWORK ---
    "httpx>=0.27.0",

    # --- CONSOLE ---
    "rich>=13.0.0",
]

setup(
    name="PrimeCounter",
    version="0.1.0",
    description="PrimeCounter: reactive state core for a prime counter demo",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        # --- TESTS---
        "test": [
            "pytest",
            "pytest-asyncio>=0.23",
        ],
    },
    python_requires=">=3.10",
)

from setuptools import setup, find_packages

setup(
    name="stylesheet",
    version="0.1.0",
    description="Named terminal text styles with fallback-safe rendering",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)

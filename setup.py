from setuptools import setup, find_packages

setup(
    name="lpssim",
    version="0.1.0",
    description="Limited processor sharing queue simulation (shortest remaining work admission)",
    author="adamfilli",
    packages=find_packages(include=["lpssim", "lpssim.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["numpy", "pytest"],
    },
    entry_points={
        "console_scripts": [
            "lpssim=lpssim.cli:main",
        ],
    },
    include_package_data=True,
    python_requires=">=3.13",
)

from setuptools import find_packages, setup

setup(
    name="argtree",
    version="0.1.0",
    description="Declarative command-tree argument parser with usage and error reporting.",
    long_description=open("README.md", encoding="UTF-8").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=("tests", "tests.*", "examples", "examples.*")),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "python-json-logger>=3.0",
        "pyyaml>=6.0",
        "rich>=13.0",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "argtree=argtree.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)

from setuptools import setup, find_packages

setup(
    name="argwright",
    version="0.1.0",
    description="Declarative command-line argument engine with abbreviations, "
    "typed values, validators and argument groups.",
    long_description=open("README.md", encoding="UTF-8").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["argwright", "argwright.*"]),
    python_requires=">=3.10",
    install_requires=[
        "prompt_toolkit>=3.0",
        "pydantic>=2.0",
        "python-dateutil>=2.8",
        "python-json-logger>=3.1",
        "PyYAML>=6.0",
        "rich>=13.0",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["argwright=argwright.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
    ],
)

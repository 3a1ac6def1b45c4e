from setuptools import find_packages, setup


setup(
    name="codecollector",
    version="1.0.0",
    description="Concatenate every file with a given extension into one annotated text file",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["codecollector = codecollector.cli:main"]},
)

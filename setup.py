from setuptools import setup, find_packages

setup(
    name="numform-align",
    version="1.0.0",
    description="Column alignment detection for formatted numeric tables",
    author="numform contributors",
    packages=find_packages(exclude=["tests", "tests.*"]) + ["modules"],
    py_modules=["main"],
    install_requires=[
        "pandas",
        "rich",
        "tabulate",
    ],
    extras_require={
        "test": ["pytest", "numpy"],
    },
    python_requires='>=3.8',
    entry_points={
        "console_scripts": [
            "numform-align=main:main",
        ]
    },
    include_package_data=True,
)

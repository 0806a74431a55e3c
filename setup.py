from setuptools import setup, find_packages

main_ns = {}
with open("src/xlstyles/_version.py") as ver_file:
    exec(ver_file.read(), main_ns)

setup(
    name="xlstyles",
    version=main_ns["__version__"],
    description="Spreadsheet cell style tables with cascading cell formats",
    license="MIT",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    entry_points={
        "console_scripts": [
            "cat-xlstyles=xlstyles._cat_styles:main",
        ],
    },
    install_requires=["enum-tools", "pendulum", "protobuf", "python-snappy", "sigfig"],
    extras_require={
        "test": ["mock", "pytest", "pytest-check", "pytest-console-scripts"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)

from setuptools import setup, find_packages

setup(
    name="ktreport",
    version="0.1.0",
    packages=find_packages(include=["ktreport", "ktreport.*"]),
    include_package_data=True,
    install_requires=[
        "click>=8.2.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'ktreport=ktreport.cli:cli',
        ],
    },
    description="A CLI tool that renders Kotlin test reports as pytest-style console summaries",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="eventcalendar",
    version="0.1.0",
    author="",
    author_email="",
    description="Calendar periods and indexed event lookup",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["eventcalendar", "eventcalendar.*"]),
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "python-dateutil>=2.8.0",
        "isoweek>=1.3.0",
        "pandas>=1.3.0",
        "rapidfuzz>=2.0.0",
        "pyyaml>=5.4",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)

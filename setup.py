from setuptools import setup, find_packages

setup(
    name="hostinfo",
    version="0.1.0",
    description="hostinfo: portable facts about the host OS, Linux distribution, CPU and Python runtime",
    packages=find_packages(exclude=["tests", "tests.*"]),  # hostinfo + subpackages
    python_requires=">=3.8",
    install_requires=["rich", "psutil"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "hostinfo=hostinfo.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

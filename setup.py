"""Package setup for web_linkfinder."""

from setuptools import setup, find_packages

setup(
    name="web-linkfinder",
    version="1.0.0",
    description="Extract same-origin links and their parent directories "
                "from fetched web pages",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "web-linkfinder=web_linkfinder.cli:main",
        ],
    },
)

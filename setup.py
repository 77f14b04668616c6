from setuptools import setup, find_packages

setup(
    name="mvplugins",
    version="0.1.0",
    packages=find_packages(include=["mvplugins", "mvplugins.*"]),
    python_requires=">=3.8",
    install_requires=[
        "PySide6",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "erase-shadows=mvplugins.maps.cli:main",
        ],
    },
)

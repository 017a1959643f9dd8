from setuptools import setup, find_packages

setup(
    name="nfl-wp-signal",
    version="0.1.0",
    description="NFL team ratings and spread estimates from in-game win probability traces",
    author="Ben Rosen",
    packages=find_packages(include=["wpsignal", "wpsignal.*"]),
    install_requires=[
        "numpy>=1.22.4",
        "pandas>=1.5.3",
        "scipy>=1.10.0",
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=4.9.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "wpsignal=wpsignal.main:main",
        ],
    },
)

from setuptools import setup, find_packages

setup(
    name="cliweather",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.24",
        "python-dotenv>=1.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["cliweather=cliweather.cli:main"],
    },
    description="Command line lookup of current weather conditions via OpenWeatherMap.",
    author="chriscoveyduck",
    author_email="",
    include_package_data=True,
)

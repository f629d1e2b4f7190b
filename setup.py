from setuptools import setup, find_packages

setup(
    name="youtube-captions",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=1.26",
        "python-dotenv>=1.0.0",
        "colorlog>=6.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "youtube-captions=youtube_captions.main:main",
        ],
    },
    python_requires=">=3.8",
    description="Discover, fetch and format YouTube caption tracks without an API key",
)

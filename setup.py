from setuptools import setup, find_namespace_packages

setup(
    name="team_formation",
    version="0.1.0",
    packages=find_namespace_packages(include=["team_formation", "team_formation.*"]),
    install_requires=[
        "pandas>=2.0.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
        ],
    },
)

from setuptools import find_packages, setup

setup(
    name="rental-quote",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_dir={"": "."},
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "loguru>=0.7.0",
        "python-dotenv>=1.0.0",
        "prometheus-client>=0.19.0",
        "prometheus-fastapi-instrumentator>=6.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.26.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rental-quote=rental_quote.main:main",
        ],
    },
)

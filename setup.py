from setuptools import setup, find_packages

setup(
    name="docsearch",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0.0",
        "tenacity",
        "pymupdf>=1.24.0",
        "fastapi>=0.110.0",
        "uvicorn",
        "slowapi",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)

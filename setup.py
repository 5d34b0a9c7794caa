import re

from setuptools import setup
from os import path
from io import open

here = path.abspath(path.dirname(__file__))

with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

# Read the version without importing the package, which patches botocore
with open(path.join(here, "lambda_client_context", "version.py"), encoding="utf-8") as f:
    version = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)

setup(
    name="lambda_client_context",
    version=version,
    description="Trace context propagation for direct AWS Lambda invocations",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Datadog, Inc.",
    author_email="dev@datadoghq.com",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="datadog aws lambda tracing client context",
    packages=["lambda_client_context"],
    python_requires=">=3.8, <4",
    install_requires=[
        "ddtrace>=3.0.0",
        "wrapt>=1.11.2",
        "ujson>=5.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "flake8>=6.0.0",
        ]
    },
)

from setuptools import setup, find_packages

setup(
    name="aws-helpers",
    version="0.1.0",
    description="DynamoDB and Cognito helpers for Lambda functions",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        # aiobotocore pins botocore exactly; pip picks the boto3 release
        # built against that botocore
        "aiobotocore>=2.5.0",
        "botocore>=1.29.0",
        "boto3>=1.26.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "dev": [
            "mypy>=1.0.0",
            "types-boto3>=1.0.0",
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "isort>=5.0.0",
            "flake8>=6.0.0"
        ]
    },
    python_requires=">=3.9",
)

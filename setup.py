from setuptools import setup, find_packages

setup(
    name="user-validation-lib",
    version="0.1.0",
    description="Composable validation rules for user profiles",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        'user_validation': ['local-config.yaml'],
    },
    include_package_data=True,
    install_requires=[
        'pyyaml>=6.0',
        'jsonschema>=4.17.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
)

from setuptools import find_packages, setup

setup(
    name="azresource",
    version="0.1.0",
    description="Azure resource management sample: provisioning workflow and subscription-wide listing",
    license="MIT",
    packages=find_packages(exclude=["tests*"]),
    python_requires=">=3.9",
    install_requires=[
        "azure-identity>=1.15.0",
        "azure-core>=1.29.0",
        "azure-mgmt-core>=1.4.0",
        "azure-mgmt-resource>=23.0.0,<26",
        "azure-mgmt-storage>=21.0.0",
        "pyyaml>=6.0.1",
        "click>=8.1.0,<8.2",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "azresource=azresource.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: System :: Systems Administration",
    ],
)

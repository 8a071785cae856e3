"""
Enterprise Service

Administrative backend for Admin accounts and Enterprise records with
JWT authentication and a Redis event side-channel.
"""

from setuptools import setup, find_packages

setup(
    name="enterprise-service",
    version="1.0.0",
    description="Enterprise Service - admins, enterprises and authentication API",
    packages=find_packages(include=["enterprise_service", "enterprise_service.*"]),
    python_requires=">=3.11",
    install_requires=[
        # Web framework
        "fastapi>=0.110.0",
        "uvicorn[standard]>=0.27.0",
        "pydantic[email]>=2.5.0",
        "pydantic-settings>=2.1.0",

        # PostgreSQL support
        "sqlalchemy[asyncio]>=2.0.25",
        "asyncpg>=0.29.0",

        # Event side-channel
        "redis>=5.0.1",

        # Security
        "python-jose[cryptography]>=3.3.0",
        "bcrypt>=4.1.0",

        # Monitoring and observability
        "sentry-sdk[fastapi]>=1.39.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
            "httpx>=0.26.0",
            "aiosqlite>=0.19.0",
            "black>=23.10.0",
            "flake8>=6.1.0",
            "mypy>=1.7.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.11",
        "License :: Other/Proprietary License",
    ],
)

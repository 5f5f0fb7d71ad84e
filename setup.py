from setuptools import setup, find_packages

setup(
    name="openmeteo_mcp_tools",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "google-adk",
        "mcp>=1.9.0,<2",
        "aiohttp>=3.8.0",
        "yarl",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "openmeteo-mcp-server=adk_mcp_tools.openmeteo_tool.weather_server:main",
        ],
    },
    python_requires=">=3.10",
)

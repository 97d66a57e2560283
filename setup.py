from setuptools import setup, find_packages

setup(
    name="envctl",
    use_scm_version={
        "write_to": "src/envctl/version.py",
        "fallback_version": "0.1.0",
    },
    setup_requires=["setuptools_scm"],
    description="Manage fleet environment and config variables",
    license="MIT",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
    ],
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "aiohttp>=3.6.0,<4.0.0",
        "click>=7.0",
        "colorama>=0.4.6",
        "marshmallow>=3.2.0,<4.0.0",
        "marshmallow-oneofschema>=2.0.1",
        "pyyaml>=5.1.2",
        "structlog>=19.1.0",
    ],
    extras_require={"test": ["tox", "pytest", "pytest-asyncio"]},
    entry_points={"console_scripts": ["envctl = envctl.shell.__main__:main"]},
)

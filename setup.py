from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = [line for line in f.read().splitlines() if line and not line.startswith('#')]

setup(
    name = 'stackenv',
    version = '0.1.0',
    description = 'Service-aware environment variable validation for application startup',
    packages = find_packages(include=['stackenv', 'stackenv.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov'],
    },
    entry_points = {
        'console_scripts': ['stackenv=stackenv.__main__:main'],
    },
)

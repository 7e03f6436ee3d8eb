# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="deptree",
    version="0.1.0",
    description="Cycle-safe dependency tree and bundle order of Python, JavaScript and stylesheet sources",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["deptree", "deptree.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'deptree=deptree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="kwd-decoder",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "construct>=2.10",
        "numpy>=1.21",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    author="akspa0",
    author_email="akspa0@immoralhole.com",
    description="A decoder for Dungeon Keeper II KWD/KLD level files",
    keywords="dungeon keeper, kwd, kld, level, decoder",
    entry_points={
        'console_scripts': [
            'kwd-decode=kwd_decoder.main:main',
        ],
    }
)

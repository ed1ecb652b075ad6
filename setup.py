#!/usr/bin/env python3

from setuptools import setup, find_packages

requires = [
    "discord.py (>=2.0,<3.0)",
    "sqlalchemy (>=1.4,<3.0)",
]

extras = {
    "postgres": ["psycopg2 (>=2.7,<3.0)"],
    "test": ["pytest"],
}

setup(name='Parse-tree',
      version='1.0.0',
      description='Integer arithmetic evaluator using shunting-yard and expression trees, with a discord calculator bot',
      install_requires=requires,
      extras_require=extras,
      python_requires='>=3.8',
      scripts=['parse-tree.py'],
      packages=find_packages(exclude=['tests']))

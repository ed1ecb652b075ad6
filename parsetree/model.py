#!/usr/bin/env python3

from sqlalchemy import (
    Column,
    String,
)
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class Config (Base):
    '''
    Stores the configuration values for the application in key value pairs
    '''
    __tablename__ = 'configuration'

    name = Column(
        String(64),
        primary_key=True,
        doc="The setting's name")
    value = Column(
        'setting', String,
        doc="The setting's value")

    def __str__(self):
        return '{0.name}: {0.value}'.format(self)


class Prefix (Base):
    '''
    Stores the prefixes for servers
    '''
    __tablename__ = 'prefixes'

    server = Column(
        String(64),
        primary_key=True,
        doc='The server id for the prefix')
    prefix = Column(
        String(64),
        doc='The prefix for the server')

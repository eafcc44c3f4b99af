from .client import PyMongoConnection, connect
from .config import MongoDBProbeConfig
from .probe import MongoDBProbe, build_uri, parse_query

__all__ = [
    "MongoDBProbeConfig",
    "MongoDBProbe",
    "PyMongoConnection",
    "build_uri",
    "connect",
    "parse_query",
]

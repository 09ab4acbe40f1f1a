"""Supported backend service types.

Catalog labels vary between providers, so several labels map to each
service type. Labels are matched case-insensitively.
"""

from enum import Enum


class ServiceType(str, Enum):
    """Backend kinds that can be backed up and restored."""

    ELASTICSEARCH = "elasticsearch"
    MYSQL = "mysql"
    MONGODB = "mongodb"
    POSTGRES = "postgres"
    REDIS = "redis"


_LABELS: dict[str, ServiceType] = {
    # elasticsearch
    "elasticsearch": ServiceType.ELASTICSEARCH,
    "elastic": ServiceType.ELASTICSEARCH,
    "es": ServiceType.ELASTICSEARCH,
    # mysql
    "mysql": ServiceType.MYSQL,
    "mariadb": ServiceType.MYSQL,
    "mariadbent": ServiceType.MYSQL,
    "mysql-database": ServiceType.MYSQL,
    "pxc": ServiceType.MYSQL,
    "galera": ServiceType.MYSQL,
    # mongodb
    "mongodb": ServiceType.MONGODB,
    "mongo": ServiceType.MONGODB,
    "mongodb-2": ServiceType.MONGODB,
    "mongodbent": ServiceType.MONGODB,
    "mongodbent-database": ServiceType.MONGODB,
    # postgres
    "postgres": ServiceType.POSTGRES,
    "postgresql": ServiceType.POSTGRES,
    "pg": ServiceType.POSTGRES,
    "psql": ServiceType.POSTGRES,
    "elephantsql": ServiceType.POSTGRES,
    "citusdb": ServiceType.POSTGRES,
    # redis
    "redis": ServiceType.REDIS,
    "redis-2": ServiceType.REDIS,
    "redisent": ServiceType.REDIS,
    "redis-enterprise": ServiceType.REDIS,
    "redis-ha": ServiceType.REDIS,
}


def parse_service_type(label: str) -> ServiceType | None:
    """Map a catalog label to its service type, or None if unsupported."""
    return _LABELS.get(label.strip().lower())


def is_valid_service_type(label: str) -> bool:
    """Whether a catalog label names a supported service type."""
    return parse_service_type(label) is not None

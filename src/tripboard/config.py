import json
from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

DEFAULT_TRIP_ID = "00000000-0000-0000-0000-000000000001"

_cached_database_password: str | None = None


def _resolve_database_password() -> str:
    """Fetch the database password from Secrets Manager at runtime, with caching."""
    global _cached_database_password
    if _cached_database_password is not None:
        return _cached_database_password

    # Local dev: use env var directly
    direct = environ.get("DATABASE_PASSWORD", "")
    if direct:
        _cached_database_password = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("DATABASE_SECRET_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager", region_name=environ.get("AWS_REGION", "us-east-1"))
    secret = json.loads(client.get_secret_value(SecretId=arn)["SecretString"])
    _cached_database_password = secret.get("password", "")
    return _cached_database_password


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    database_url: str = ""
    database_password: str = ""
    api_base_path: str
    api_base_url: str
    trip_id: str = DEFAULT_TRIP_ID
    environment: str

    @property
    def store_configured(self) -> bool:
        return bool(self.database_url and self.database_password)


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. For testing only."""
    global _cached_config, _cached_database_password
    _cached_config = None
    _cached_database_password = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        database_url=environ.get("DATABASE_URL", ""),
        database_password=_resolve_database_password(),
        api_base_path=environ.get("API_BASE_PATH", "/api"),
        api_base_url=environ.get("API_BASE_URL", "http://localhost:3000/api"),
        trip_id=environ.get("TRIP_ID", DEFAULT_TRIP_ID),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config

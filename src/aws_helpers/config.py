"""
Process configuration for the AWS adapters.

Values are read once from the environment at startup and then passed into
adapter constructors, so one process can address several user pools or
endpoints side by side.
"""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

# Environment variable names
REGION_ENV = 'AWS_REGION'
USER_POOL_ENV = 'COGNITO_USERPOOL_ID'
DYNAMODB_ENDPOINT_ENV = 'DYNAMODB_ENDPOINT_URL'


class ServiceConfig(BaseModel):
    """
    Settings shared by the record store and user directory adapters.

    Attributes:
        region: AWS region the clients talk to (None lets botocore decide)
        user_pool_id: Cognito user pool merged into every directory request
        endpoint_url: Optional DynamoDB endpoint override, e.g. DynamoDB Local
    """
    model_config = ConfigDict(frozen=True)

    region: Optional[str] = None
    user_pool_id: Optional[str] = None
    endpoint_url: Optional[str] = None

    @field_validator('region', 'user_pool_id', 'endpoint_url', mode='before')
    @classmethod
    def blank_as_unset(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ServiceConfig':
        """Build a config from environment variables (os.environ by default)."""
        env = os.environ if environ is None else environ
        return cls(
            region=env.get(REGION_ENV),
            user_pool_id=env.get(USER_POOL_ENV),
            endpoint_url=env.get(DYNAMODB_ENDPOINT_ENV),
        )

"""
Environment variable models for type-safe configuration.

This module defines Pydantic models for environment variables used by the
status endpoint handlers. Values are parsed with aws-lambda-env-modeler and
handed to the logic layer as an explicit configuration object.
"""

import os
from typing import Annotated, Optional

from aws_lambda_env_modeler import LAMBDA_ENV_MODELER_DISABLE_CACHE, BaseModel, get_environment_variables
from pydantic import Field

# Credentials are read on every invocation, so the modeler must not memoize the parsed model
os.environ.setdefault(LAMBDA_ENV_MODELER_DISABLE_CACHE, 'true')


class HandlerEnvVars(BaseModel):
    """Environment variables for the status endpoint handlers."""

    # Twitch application credentials (client-credentials grant)
    TWITCH_CLIENT_ID: Annotated[Optional[str], Field(
        description='Twitch application client id'
    )] = None

    TWITCH_CLIENT_SECRET: Annotated[Optional[str], Field(
        description='Twitch application client secret'
    )] = None

    TWITCH_TOKEN_CACHE_ENABLED: Annotated[str, Field(
        description='Reuse the Twitch app token across warm invocations (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'

    # Upstream HTTP settings
    UPSTREAM_TIMEOUT_SECONDS: Annotated[Optional[float], Field(
        description='Timeout for upstream HTTP calls; unset relies on the Lambda timeout',
        gt=0,
        le=900
    )] = None

    FIVEM_DEFAULT_SERVER_CODE: Annotated[str, Field(
        description='FiveM join code used when the request omits one',
        min_length=1
    )] = 'ajv9r5'

    # Environment name (dev, staging, prod)
    ENVIRONMENT: Annotated[str, Field(
        description='Deployment environment name',
        pattern=r'^(dev|staging|prod|test)$'
    )] = 'dev'

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'status-endpoints'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    @property
    def twitch_configured(self) -> bool:
        """Both Twitch credentials are present and non-empty."""
        return bool(self.TWITCH_CLIENT_ID) and bool(self.TWITCH_CLIENT_SECRET)

    @property
    def twitch_token_cache_enabled(self) -> bool:
        return self.TWITCH_TOKEN_CACHE_ENABLED.lower() == 'true'


def get_handler_env_vars() -> HandlerEnvVars:
    """
    Parse typed environment variables for Lambda handlers.

    Parsed fresh on each call unless LAMBDA_ENV_MODELER_DISABLE_CACHE is
    set to something other than true.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=HandlerEnvVars)

import os

from pydantic import BaseModel, ConfigDict

DEFAULT_STACK_NAME = "FunctionDirectiveStack"
DEFAULT_API_LOGICAL_ID = "GraphQLAPI"
DEFAULT_ENV_PARAMETER = "env"
DEFAULT_ENV_CONDITION = "HasEnvironmentParameter"


class TransformerConfig(BaseModel):
    """Logical ids and conventions shared by every resource the transformer emits."""

    model_config = ConfigDict(frozen=True)

    stack_name: str = DEFAULT_STACK_NAME
    api_logical_id: str = DEFAULT_API_LOGICAL_ID
    env_parameter: str = DEFAULT_ENV_PARAMETER
    has_env_condition: str = DEFAULT_ENV_CONDITION
    function_version: str = "2018-05-29"
    model_directive: str = "model"

    @classmethod
    def from_env(cls) -> "TransformerConfig":
        return cls(
            stack_name=os.getenv("SIDECAR_STACK_NAME", DEFAULT_STACK_NAME),
            api_logical_id=os.getenv("SIDECAR_API_LOGICAL_ID", DEFAULT_API_LOGICAL_ID),
            env_parameter=os.getenv("SIDECAR_ENV_PARAMETER", DEFAULT_ENV_PARAMETER),
            has_env_condition=os.getenv("SIDECAR_ENV_CONDITION", DEFAULT_ENV_CONDITION),
        )

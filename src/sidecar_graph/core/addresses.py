import re

from sidecar_graph.config import TransformerConfig
from sidecar_graph.core.expressions import Conditional, Expression, Ref, Sub

_ENV_REFERENCE = re.compile(r"\$\{env\}")
_TRAILING_ENV_REFERENCE = re.compile(r"-\$\{env\}")


def lambda_arn_template(name: str, region: str | None = None) -> str:
    if region:
        return f"arn:aws:lambda:{region}:${{AWS::AccountId}}:function:{name}"
    return f"arn:aws:lambda:${{AWS::Region}}:${{AWS::AccountId}}:function:{name}"


def references_env(value: str) -> bool:
    return _ENV_REFERENCE.search(value) is not None


def remove_env_reference(value: str) -> str:
    # Only the first "-${env}" segment is removed; other placements are left untouched.
    return _TRAILING_ENV_REFERENCE.sub("", value, count=1)


def lambda_arn(name: str, region: str | None, config: TransformerConfig) -> Conditional:
    """Build the ARN of the target function for both env and env-less deployments.

    When the stack has an environment parameter, a ``${env}`` placeholder in
    ``name`` is substituted with that parameter. Otherwise the ``-${env}``
    segment is dropped from the name.
    """
    variables: dict[str, Expression] = {}
    if references_env(name):
        variables["env"] = Ref(logical_id=config.env_parameter)
    return Conditional(
        condition=config.has_env_condition,
        branch_true=Sub(template=lambda_arn_template(name, region), variables=variables),
        branch_false=Sub(template=lambda_arn_template(remove_env_reference(name), region)),
    )

"""Deferred CloudFormation expressions.

Nothing here is resolved locally. Each node describes an intrinsic function
that the deployment engine evaluates against the live stack, so callers can
inspect branch structure instead of parsing rendered strings.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Intrinsic(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_cfn(self) -> dict[str, Any]:
        raise NotImplementedError


class Ref(_Intrinsic):
    kind: Literal["Ref"] = "Ref"
    logical_id: str

    def to_cfn(self) -> dict[str, Any]:
        return {"Ref": self.logical_id}


class GetAtt(_Intrinsic):
    kind: Literal["GetAtt"] = "GetAtt"
    logical_id: str
    attribute: str

    def to_cfn(self) -> dict[str, Any]:
        return {"Fn::GetAtt": [self.logical_id, self.attribute]}


class Sub(_Intrinsic):
    kind: Literal["Sub"] = "Sub"
    template: str
    variables: dict[str, Expression] = Field(default_factory=dict)

    def to_cfn(self) -> dict[str, Any]:
        return {"Fn::Sub": [self.template, {k: render_value(v) for k, v in self.variables.items()}]}


class Join(_Intrinsic):
    kind: Literal["Join"] = "Join"
    delimiter: str
    values: list[Expression]

    def to_cfn(self) -> dict[str, Any]:
        return {"Fn::Join": [self.delimiter, [render_value(v) for v in self.values]]}


class Conditional(_Intrinsic):
    """Evaluates to ``branch_true`` when ``condition`` holds at deploy time, else ``branch_false``."""

    kind: Literal["If"] = "If"
    condition: str
    branch_true: Expression
    branch_false: Expression

    def to_cfn(self) -> dict[str, Any]:
        return {"Fn::If": [self.condition, render_value(self.branch_true), render_value(self.branch_false)]}


Expression = Union[str, Ref, GetAtt, Sub, Join, Conditional]

Sub.model_rebuild()
Join.model_rebuild()
Conditional.model_rebuild()


def render_value(value: Any) -> Any:
    """Render a value that may contain expressions into its CloudFormation JSON form."""
    if isinstance(value, _Intrinsic):
        return value.to_cfn()
    if isinstance(value, dict):
        return {k: render_value(v) for k, v in value.items()}
    if isinstance(value, (list | tuple)):
        return [render_value(v) for v in value]
    return value

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

from sidecar_graph.core.expressions import Expression, render_value


class Directive(BaseModel):
    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class AnnotatedType(BaseModel):
    """An object type definition as handed over by the schema parser."""

    name: str
    directives: list[Directive] | None = None

    def find_directive(self, name: str) -> Directive | None:
        for directive in self.directives or []:
            if directive.name == name:
                return directive
        return None


class DirectiveArguments(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    region: str | None = None


# --- Resource descriptors ---


class Resource(BaseModel):
    """A CloudFormation resource descriptor held in the registry.

    ``depends_on`` lists logical ids of resources that must be provisioned first.
    """

    model_config = ConfigDict(frozen=True)

    resource_type: ClassVar[str] = ""

    depends_on: list[str] = Field(default_factory=list)

    def properties(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_cfn(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {
            "Type": self.resource_type,
            "Properties": render_value(self.properties()),
        }
        if self.depends_on:
            rendered["DependsOn"] = list(self.depends_on)
        return rendered


class IamPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    policy_name: str
    policy_document: dict[str, Any]


class IamRole(Resource):
    resource_type: ClassVar[str] = "AWS::IAM::Role"

    role_name: Expression
    assume_role_policy_document: dict[str, Any]
    policies: list[IamPolicy] = Field(default_factory=list)

    def properties(self) -> dict[str, Any]:
        return {
            "RoleName": self.role_name,
            "AssumeRolePolicyDocument": self.assume_role_policy_document,
            "Policies": [{"PolicyName": p.policy_name, "PolicyDocument": p.policy_document} for p in self.policies],
        }


class LambdaDataSource(Resource):
    resource_type: ClassVar[str] = "AWS::AppSync::DataSource"

    api_id: Expression
    name: str
    type: Literal["AWS_LAMBDA"] = "AWS_LAMBDA"
    service_role_arn: Expression
    lambda_function_arn: Expression

    def properties(self) -> dict[str, Any]:
        return {
            "ApiId": self.api_id,
            "Name": self.name,
            "Type": self.type,
            "ServiceRoleArn": self.service_role_arn,
            "LambdaConfig": {"LambdaFunctionArn": self.lambda_function_arn},
        }


class FunctionConfiguration(Resource):
    resource_type: ClassVar[str] = "AWS::AppSync::FunctionConfiguration"

    api_id: Expression
    name: str
    data_source_name: str
    function_version: str
    request_mapping_template: str
    response_mapping_template: str

    def properties(self) -> dict[str, Any]:
        return {
            "ApiId": self.api_id,
            "Name": self.name,
            "DataSourceName": self.data_source_name,
            "FunctionVersion": self.function_version,
            "RequestMappingTemplate": self.request_mapping_template,
            "ResponseMappingTemplate": self.response_mapping_template,
        }


class Resolver(Resource):
    resource_type: ClassVar[str] = "AWS::AppSync::Resolver"

    api_id: Expression
    type_name: str
    field_name: str
    kind: Literal["UNIT", "PIPELINE"] = "UNIT"
    data_source_name: str
    request_mapping_template: str
    response_mapping_template: str

    def properties(self) -> dict[str, Any]:
        return {
            "ApiId": self.api_id,
            "TypeName": self.type_name,
            "FieldName": self.field_name,
            "Kind": self.kind,
            "DataSourceName": self.data_source_name,
            "RequestMappingTemplate": self.request_mapping_template,
            "ResponseMappingTemplate": self.response_mapping_template,
        }

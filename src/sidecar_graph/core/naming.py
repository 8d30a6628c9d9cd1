import hashlib
import re

from pluralizer import Pluralizer

_PLACEHOLDER_PATTERN = re.compile(r"-?_?\$\{[^}]*\}_?-?")
_NON_NAME_CHARS = re.compile(r"[^_0-9A-Za-z]")

_ROLE_NAME_HASH_LENGTH = 4

_pluralizer = Pluralizer()


def graphql_name(value: str) -> str:
    return _NON_NAME_CHARS.sub("", value)


def to_upper(value: str) -> str:
    return value[:1].upper() + value[1:]


def simplify_name(value: str) -> str:
    """Strip ``${...}`` placeholders and non-identifier characters, then capitalize."""
    return to_upper(graphql_name(_PLACEHOLDER_PATTERN.sub("", value)))


def function_data_source_id(name: str, region: str | None = None) -> str:
    return f"{simplify_name(name)}{simplify_name(region or '')}LambdaDataSource"


def function_iam_role_id(name: str, region: str | None = None) -> str:
    return f"{function_data_source_id(name, region)}Role"


def function_config_id(name: str, region: str | None = None) -> str:
    return f"Invoke{function_data_source_id(name, region)}"


def function_iam_role_name(name: str, with_env: bool = False) -> str:
    # IAM role names cap at 64 chars; the API id and env suffixes are joined on later.
    digest = hashlib.md5(name.encode("utf-8")).hexdigest()[:_ROLE_NAME_HASH_LENGTH]
    limit = 22 if with_env else 32
    return f"{simplify_name(name)[:limit]}{digest}"


def resolver_id(type_name: str, field_name: str) -> str:
    return f"{type_name}{to_upper(field_name)}SidecarResolver"


def plurality(value: str) -> str:
    """Pluralize a field name the way the model transformer names its list query (``listPerson`` -> ``listPeople``)."""
    if not value.strip():
        return ""
    return _pluralizer.plural(value)

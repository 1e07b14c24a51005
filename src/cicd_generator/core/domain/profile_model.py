import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")


class ProfileModel(BaseModel):
    """Immutable base for configuration profiles.

    Accepts both snake_case field names and the camelCase keys used by
    hand-written configuration documents (``projectName``, ``jenkinsConfig``).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


def reject_control_characters(value: str) -> str:
    if _CONTROL_CHARACTERS.search(value):
        raise ValueError("must be a single line without control characters")
    return value


# Values that end up inside Groovy literals, comments and shell words
SingleLineStr = Annotated[str, AfterValidator(reject_control_characters)]

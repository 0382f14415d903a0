from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

# ---- Source model ----
# Read-only records supplied fresh on every mapping call. The aliases accept
# the shapes the inventory front end produces for the same record.


def _coerce_identifier(value):
    # Graph-store ids arrive as ints as often as strings
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _require_text(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field_name} must not be blank")
    return value


class SourceNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    identity: str = Field(validation_alias=AliasChoices("identity", "nodeId", "tempUID", "id"))
    title: str = Field(default="", validation_alias=AliasChoices("title", "name"))
    classification: str = Field(default="", validation_alias=AliasChoices("classification", "assetClass"))
    systems: List[str] = Field(default_factory=list)
    groups: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _title_falls_back_to_name(cls, data):
        # Records may carry both keys with an empty title
        if isinstance(data, dict) and not data.get("title") and data.get("name"):
            data = {**data, "title": data["name"]}
        return data

    @field_validator("identity", mode="before")
    @classmethod
    def _identity_as_text(cls, value):
        return _coerce_identifier(value)

    @field_validator("identity")
    @classmethod
    def _identity_not_blank(cls, value: str) -> str:
        return _require_text(value, "identity")

    @field_validator("title", "classification", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("systems", "groups", mode="before")
    @classmethod
    def _none_as_no_members(cls, value):
        return [] if value is None else value


class SourceEdge(BaseModel):
    model_config = ConfigDict(frozen=True)

    identity: str = Field(validation_alias=AliasChoices("identity", "relationshipId", "id"))
    from_id: str = Field(validation_alias=AliasChoices("from_id", "fromId", "source"))
    to_id: str = Field(validation_alias=AliasChoices("to_id", "toId", "target"))
    relationship_tag: str = Field(
        default="",
        validation_alias=AliasChoices("relationship_tag", "relationshipTag", "relationshipType", "type"),
    )

    @field_validator("identity", "from_id", "to_id", mode="before")
    @classmethod
    def _ids_as_text(cls, value):
        return _coerce_identifier(value)

    @field_validator("identity", "from_id", "to_id")
    @classmethod
    def _ids_not_blank(cls, value: str, info) -> str:
        return _require_text(value, info.field_name)

    @field_validator("relationship_tag", mode="before")
    @classmethod
    def _none_as_untagged(cls, value):
        return "" if value is None else value

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


class TemplateEntryModel(BaseModel):
    id: str = Field(..., description="Identifier used by callers, e.g. 'jenkinsfile'")
    path: str = Field(..., description="Path of the .j2 file relative to the catalog root")
    slots: List[str] = Field(default_factory=list, description="Names the render context must provide")

    @field_validator("path")
    def validate_path(cls, v: str) -> str:
        if not v.endswith(".j2") or ".." in v or v.startswith("/"):
            raise ValueError(f"Template path must be a relative .j2 file: {v}")
        return v


class TemplateManifestModel(BaseModel):
    template_version: str = Field(..., description="Version of the manifest schema, e.g. '1'")
    description: str = Field(..., description="Short description of the catalog")
    templates: List[TemplateEntryModel] = Field(..., description="Templates shipped by the catalog")

    @field_validator("template_version")
    def validate_version(cls, v: str) -> str:
        if v != "1":
            raise ValueError("Only template_version '1' is supported")
        return v

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "TemplateManifestModel":
        ids = [entry.id for entry in self.templates]
        if not ids:
            raise ValueError("templates cannot be empty")
        if len(ids) != len(set(ids)):
            raise ValueError("template ids must be unique")
        return self

    def entry(self, template_id: str) -> TemplateEntryModel:
        for entry in self.templates:
            if entry.id == template_id:
                return entry
        raise KeyError(template_id)

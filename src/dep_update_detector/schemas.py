"""Pydantic models for the JSON result document."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .models import DependencyUpdateToolData, File, Tool


class FileSchema(BaseModel):
    path: str
    type: str
    offset: int

    @classmethod
    def from_file(cls, file: File) -> FileSchema:
        return cls(path=file.path, type=file.type.value, offset=file.offset)


class ToolSchema(BaseModel):
    name: str
    url: str | None = None
    desc: str | None = None
    files: list[FileSchema] = Field(default_factory=list)

    @classmethod
    def from_tool(cls, tool: Tool) -> ToolSchema:
        return cls(
            name=tool.name,
            url=tool.url,
            desc=tool.desc,
            files=[FileSchema.from_file(f) for f in tool.files],
        )


class DependencyUpdateToolResponse(BaseModel):
    repository: str
    tools: list[ToolSchema] = Field(default_factory=list)

    @classmethod
    def from_data(cls, repository: str, data: DependencyUpdateToolData) -> DependencyUpdateToolResponse:
        return cls(repository=repository, tools=[ToolSchema.from_tool(t) for t in data.tools])


__all__ = ["FileSchema", "ToolSchema", "DependencyUpdateToolResponse"]

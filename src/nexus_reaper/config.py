"""Configuration for the Nexus repository reaper."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Self

import yaml
from pydantic import BeforeValidator, Field, model_validator
from safir.pydantic import CamelCaseModel, HumanTimedelta

from .models.scan_mode import ScanMode

__all__ = ["ReaperConfig"]


def _split_commas(inp: Any) -> Any:
    # Accept "a,b,c" as well as a YAML list.  An empty string is one empty
    # item, so that an empty path still yields one listing per repository.
    if isinstance(inp, str):
        return inp.split(",")
    return inp


def _empty_str_is_none(inp: Any) -> Any:
    if isinstance(inp, str) and inp == "":
        return None
    return inp


class ReaperConfig(CamelCaseModel):
    """Configuration for one invocation of the reaper."""

    hosts: Annotated[
        list[str],
        BeforeValidator(_split_commas),
        Field(
            title="Hosts",
            description=(
                "Nexus hosts to scan, as host:port, or as a URL if the "
                "scheme is not plain http."
            ),
            examples=[["localhost:8000", "nexus.example.com"]],
            min_length=1,
        ),
    ] = ["localhost:8000"]

    repositories: Annotated[
        list[str],
        BeforeValidator(_split_commas),
        Field(
            title="Repositories",
            description="Repository IDs to scan on every host.",
            examples=[["jts-release", "jts-snapshot"]],
            min_length=1,
        ),
    ] = ["jts-release"]

    paths: Annotated[
        list[str],
        BeforeValidator(_split_commas),
        Field(
            title="Paths",
            description="Paths within each repository to list.",
            examples=[["org/example/", "com/example/"]],
            min_length=1,
        ),
    ] = [""]

    regexp: Annotated[
        str,
        Field(
            title="Regular expression",
            description="Pattern searched for in each resource URI.",
            examples=[r"-SNAPSHOT/"],
        ),
    ] = ".*"

    before: Annotated[
        str | None,
        BeforeValidator(_empty_str_is_none),
        Field(
            title="Before",
            description=(
                "Act on content modified before this local time, either "
                "'YYYY-MM-DD HH:MM:SS' or 'YYYY-MM-DD'.  Defaults to now."
            ),
            examples=["2024-01-05 12:00:00", "2024-01-05"],
        ),
    ] = None

    age: Annotated[
        HumanTimedelta | None,
        BeforeValidator(_empty_str_is_none),
        Field(
            title="Age",
            description=(
                "Act on content older than this.  Mutually exclusive with "
                "'before'."
            ),
            examples=["30d", "2w"],
        ),
    ] = None

    mode: Annotated[
        ScanMode | None,
        Field(
            title="Mode",
            description="What to do with each host.",
            examples=[ScanMode.REPORT],
        ),
    ] = None

    dry_run: Annotated[
        bool,
        Field(
            title="Dry run",
            description="Do not actually delete any content.",
        ),
    ] = True

    debug: Annotated[
        bool,
        Field(
            title="Debug",
            description="Much more verbose logging.",
        ),
    ] = False

    keep_going: Annotated[
        bool,
        Field(
            title="Keep going",
            description=(
                "Log a failed listing and continue with the next one, "
                "rather than aborting the whole run."
            ),
        ),
    ] = False

    base_path: Annotated[
        str,
        Field(
            title="Base path",
            description="Path of the Nexus application on each host.",
            examples=["nexus/"],
        ),
    ] = "nexus/"

    timeout: Annotated[
        float | None,
        Field(
            title="Timeout",
            description=(
                "Seconds to wait on any single request.  By default, wait "
                "forever."
            ),
            gt=0,
        ),
    ] = None

    @model_validator(mode="after")
    def _validate_cutoff(self) -> Self:
        if self.before is not None and self.age is not None:
            raise ValueError("Only one of 'before' and 'age' may be set")
        return self

    @classmethod
    def from_file(cls, path: Path) -> Self:
        return cls.model_validate(yaml.safe_load(path.read_text()) or {})

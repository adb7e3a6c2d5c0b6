"""Shared request/response building blocks."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator

from imara.db.base import CamelModel


def _not_blank(value: str) -> str:
    if not value.strip():
        msg = "must not be blank"
        raise ValueError(msg)
    return value


# Required free text: must contain something other than whitespace, stored as sent.
RequiredText = Annotated[str, AfterValidator(_not_blank)]


class SuccessResponse(CamelModel):
    """Base for every success envelope."""

    success: bool = True


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int

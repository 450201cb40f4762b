"""HTTP API – dependencies."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from storefront.container import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]

__all__ = ["ContainerDep", "get_container"]

"""Site-to-site link entities."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from pritunl_client.models.base import PritunlModel


class Link(PritunlModel):
    """
    A site-to-site link definition.

    The API has no endpoint returning a single link; the client resolves a
    link by listing all of them (see ``Links``) and selecting by id.
    """

    omit_empty: ClassVar[frozenset[str]] = frozenset({"id", "status"})

    id: str = ""
    name: str = ""
    type: str = ""
    status: str = ""
    action: str = ""
    preferred_ike: str = ""
    preferred_esp: str = ""
    host_check: bool = False
    ipv6: bool = False
    force_preferred: bool = False


class Links(PritunlModel):
    """Paged envelope returned by ``GET /link``."""

    page: int = 0
    page_total: int = 0
    links: list[Link] = Field(default_factory=list)

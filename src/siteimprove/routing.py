"""Request context handed in by the CMS router."""

from dataclasses import dataclass

NODE_EDIT_ROUTES = frozenset({
    "entity.node.edit_form",
    "entity.node.latest_version",
})

TAXONOMY_TERM_EDIT_ROUTES = frozenset({
    "entity.taxonomy_term.edit_form",
    "entity.taxonomy_term.latest_version",
})


@dataclass(frozen=True)
class RequestContext:
    """Route information of the request being served.

    Attributes:
        route_name: Name of the matched route, None outside a routed request
        is_front_page: Whether the request is served as the site front page
    """

    route_name: str | None = None
    is_front_page: bool = False

    @property
    def is_node_edit_route(self) -> bool:
        return self.route_name in NODE_EDIT_ROUTES

    @property
    def is_taxonomy_term_edit_route(self) -> bool:
        return self.route_name in TAXONOMY_TERM_EDIT_ROUTES

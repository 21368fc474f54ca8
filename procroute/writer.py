"""Render routes in the procfs routing table layout"""

from .scanner import ADDR_OFFSET

INDEX_WIDTH = ADDR_OFFSET - len(". target:  ")

def format_route(index, route):
    if index < 0 or len(str(index)) > INDEX_WIDTH:
        raise ValueError("Route index out of range: %d" % index)

    indent = " " * (INDEX_WIDTH + 2)
    return "%0*d. target:  %s\n%snetmask: %s\n%srouter:  %s\n" % (
        INDEX_WIDTH, index, route.prefix.hex_string(),
        indent, route.netmask.hex_string(),
        indent, route.router.hex_string()
    )

def format_routes(routes):
    return "".join(
        format_route(index, route) for index, route in enumerate(routes, 1)
    )

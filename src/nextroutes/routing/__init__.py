"""File-system route reconstruction for Next.js projects.

Two builders share one node model:

    app/                     pages/
      page.tsx      /          index.js        /
      (shop)/                  users/
        cart/                    [id].js       /users/:id
          page.tsx  /cart
      blog/
        [slug]/
          page.tsx  /blog/:slug
"""

from nextroutes.routing.app_router import build_app_tree
from nextroutes.routing.detect import detect_router_type
from nextroutes.routing.pages_router import build_pages_tree
from nextroutes.routing.segments import Segment, SegmentKind, as_name, is_route_group, parse_segment
from nextroutes.routing.types import FOLDER_MARKER, RouteNode, RouterType

__all__ = [
    "FOLDER_MARKER",
    "RouteNode",
    "RouterType",
    "Segment",
    "SegmentKind",
    "as_name",
    "build_app_tree",
    "build_pages_tree",
    "detect_router_type",
    "is_route_group",
    "parse_segment",
]

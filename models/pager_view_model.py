from typing import Any, Dict, List

from db.services.pager_link_service import LinkDescriptor, LinkKind, Pager


def link_css_class(link: LinkDescriptor) -> str:
    """CSS class for the list item wrapping a link"""
    if not link.enabled:
        return "disabled"
    if link.is_current:
        return "active"
    return ""


def link_aria_label(link: LinkDescriptor) -> str:
    """Screen reader text for a pager link"""
    if link.kind == LinkKind.PAGE:
        if link.is_current:
            return f"Page {link.target_page}, current page"
        return f"Go to page {link.target_page}"

    if not link.enabled:
        return {
            LinkKind.FIRST: "First page unavailable",
            LinkKind.PREVIOUS: "Previous page unavailable",
            LinkKind.SKIP_BACK: "No earlier pages",
            LinkKind.SKIP_FORWARD: "No later pages",
            LinkKind.NEXT: "Next page unavailable",
            LinkKind.LAST: "Last page unavailable",
        }[link.kind]

    return {
        LinkKind.FIRST: "Go to first page",
        LinkKind.PREVIOUS: f"Go to previous page, page {link.target_page}",
        LinkKind.SKIP_BACK: f"Skip back to page {link.target_page}",
        LinkKind.SKIP_FORWARD: f"Skip forward to page {link.target_page}",
        LinkKind.NEXT: f"Go to next page, page {link.target_page}",
        LinkKind.LAST: f"Go to last page, page {link.target_page}",
    }[link.kind]


def format_link_for_view(link: LinkDescriptor) -> Dict[str, Any]:
    """Format a link descriptor for the pager template"""
    return {
        "kind": link.kind.value,
        "text": link.label,
        "href": link.url,
        "css_class": link_css_class(link),
        "aria_label": link_aria_label(link),
        "aria_current": "page" if link.is_current else None,
        "attributes": dict(link.attributes),
    }


def format_pager_for_view(pager: Pager) -> List[Dict[str, Any]]:
    """Format every link of a pager; empty when there is nothing to paginate"""
    if pager.is_empty:
        return []
    return [format_link_for_view(link) for link in pager.links]

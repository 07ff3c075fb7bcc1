"""Builders for small map snapshots used across tests."""

from mapvc.core.snapshot import CustomAsset, Element, Link, Snapshot, Tile


def element(element_id: str, type_id: str = "router", x: float = 0, y: float = 0) -> Element:
    return Element(id=element_id, type_id=type_id, options="{}", x=x, y=y)


def link(link_id: str, start: str, end: str) -> Link:
    return Link(
        id=link_id,
        start_element_id=start,
        start_connection="eth0",
        end_element_id=end,
        end_connection="eth0",
    )


def sample_snapshot(label: str = "a") -> Snapshot:
    """Snapshot with one item of every kind, ids derived from label.

    Two snapshots built from different labels share no ids.
    """
    return Snapshot(
        tiles=(Tile(x=0, y=0, depth=0, attributes={"terrain": f"grass-{label}"}),),
        elements=(element(f"{label}-e1"), element(f"{label}-e2", x=32, y=0)),
        links=(link(f"{label}-l1", f"{label}-e1", f"{label}-e2"),),
        custom_assets=(CustomAsset(id=f"{label}-asset", data=f"data:{label}"),),
    )


def single_element_snapshot(element_id: str) -> Snapshot:
    return Snapshot(elements=(element(element_id),))
